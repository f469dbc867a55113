"""
Service layer for contacts.

``ContactService`` validates contacts before handing them to the
store and short-circuits lookups that cannot match anything.  The
only business rule is that business contacts must carry a number.

Duplicate names are not an error: the store keeps the first contact
created under a name and later creates are ignored (and logged).
"""

from __future__ import annotations

import logging
from typing import Optional

from contact_api.app.core.exceptions import ValidationError
from contact_api.app.core.store import ContactStore
from contact_api.app.schemas.contact import Contact

logger = logging.getLogger(__name__)


class ContactService:
    """Validate and persist contacts in a ``ContactStore``."""

    def __init__(self, store: ContactStore) -> None:
        if store is None:
            raise ValueError("store is required")
        self._store = store

    def retrieve(self, name: Optional[str]) -> Optional[Contact]:
        """Return the contact stored under ``name``.

        Empty or missing names return ``None`` without consulting the
        store.  Unknown names also return ``None``.
        """
        if not name:
            return None
        return self._store.retrieve(name)

    def create(self, contact: Optional[Contact]) -> None:
        """Validate ``contact`` and add it to the store.

        Raises
        ------
        ValidationError
            If ``contact`` is ``None`` or it is a business contact
            without a number.
        """
        if contact is None:
            logger.warning("Rejected contact create: no contact supplied")
            raise ValidationError("Unable to create contact.")

        if contact.is_business and not contact.number:
            logger.warning("Rejected business contact %r without a number", contact.name)
            raise ValidationError("Business contacts must have a number.")

        if self._store.create(contact):
            logger.info("Created contact %r", contact.name)
        else:
            logger.info("Contact %r already exists; keeping the existing record", contact.name)
