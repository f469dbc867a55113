"""
In-memory contact storage.

``ContactStore`` keeps contacts in a dictionary keyed by name for the
lifetime of the process.  Each application instance owns exactly one
store (see ``main.create_app``); nothing is written to disk and all
data is lost on restart.

A single lock guards the dictionary so the check-then-insert in
``create`` is atomic: when several requests create the same name
concurrently exactly one of them wins.
"""

from __future__ import annotations

import threading
from typing import Dict, Optional

from contact_api.app.schemas.contact import Contact


class ContactStore:
    """Thread-safe name -> contact mapping with first-writer-wins inserts."""

    def __init__(self) -> None:
        self._contacts: Dict[Optional[str], Contact] = {}
        self._lock = threading.Lock()

    def create(self, contact: Contact) -> bool:
        """Store ``contact`` under its name unless the name is taken.

        A copy is stored so later changes to the caller's object do not
        leak into the store.  Returns ``True`` if the contact was
        inserted and ``False`` if a contact with the same name already
        existed (the existing record is kept untouched).
        """
        with self._lock:
            if contact.name in self._contacts:
                return False
            self._contacts[contact.name] = contact.model_copy()
            return True

    def retrieve(self, name: Optional[str]) -> Optional[Contact]:
        """Return a copy of the contact stored under ``name`` or ``None``."""
        with self._lock:
            contact = self._contacts.get(name)
        return contact.model_copy() if contact is not None else None

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._contacts

    def __len__(self) -> int:
        with self._lock:
            return len(self._contacts)
