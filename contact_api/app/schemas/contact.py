"""
Pydantic schema for contacts.

A contact is identified by its ``name``, which is the key used for
storage and lookup.  ``number`` is free-form (phone number or any
other identifier) and ``type`` is a category tag.  Only the
``"Business"`` type carries extra validation, enforced by
``ContactService`` rather than here so that the service can report
the failure with its own error type.
"""

from typing import Optional

from pydantic import BaseModel, Field

BUSINESS_TYPE = "Business"


class Contact(BaseModel):
    """Schema for creating and reading a contact."""

    name: Optional[str] = Field(None, description="Unique contact name used as the lookup key")
    number: Optional[str] = Field(None, description="Phone number; required for business contacts")
    type: Optional[str] = Field(None, description="Contact category, e.g. \"Person\" or \"Business\"")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"name": "Pete", "number": "5031234567", "type": "Person"},
            ]
        },
    }

    @property
    def is_business(self) -> bool:
        return self.type == BUSINESS_TYPE
