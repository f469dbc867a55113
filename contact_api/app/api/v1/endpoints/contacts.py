"""
Contact endpoints for API v1.

Two operations are exposed on the same path: ``GET`` looks a contact
up by exact name and ``POST`` creates one.  A lookup that finds
nothing (including a lookup with an empty name) answers ``200`` with a
JSON ``null`` body rather than ``404``.  Rejected creates answer
``400`` with the validation message in ``detail``.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request, status

from contact_api.app.core.exceptions import ValidationError
from contact_api.app.schemas.contact import Contact
from contact_api.app.services.contact_service import ContactService

router = APIRouter()


def get_contact_service(request: Request) -> ContactService:
    """Return the service owned by the running application."""
    return request.app.state.contact_service


@router.get("", response_model=Optional[Contact])
async def get_contact(
    name: Optional[str] = Query(None, description="Exact contact name"),
    service: ContactService = Depends(get_contact_service),
) -> Optional[Contact]:
    """Retrieve a contact by name, or ``null`` if there is none."""
    return service.retrieve(name)


@router.post("", status_code=status.HTTP_204_NO_CONTENT)
async def create_contact(
    contact: Optional[Contact] = Body(None),
    service: ContactService = Depends(get_contact_service),
) -> None:
    """Create a contact.

    An empty body reaches the service as ``None`` and is rejected
    there, so every business rule failure comes back as ``400``.
    """
    try:
        service.create(contact)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return None
