"""Persistence adapter contract for contacts."""

from __future__ import annotations

import json
from typing import Optional, Protocol

from ..schemas.contact import Contact, ContactCreate

NameKey = tuple[str, Optional[str]]


class ContactConflict(Exception):
    """Raised by an adapter when its own uniqueness constraint rejects a contact."""


class ContactIdInUse(Exception):
    """Raised by an adapter when the id it was asked to store under is taken.

    Not a business error: it means the configured id generator handed out an
    id twice. The store lets it propagate.
    """

    def __init__(self, contact_id: str) -> None:
        super().__init__(f"Contact id {contact_id!r} already in use")
        self.contact_id = contact_id


class ContactRepository(Protocol):
    """Create/read/list/delete of contact records. Knows nothing of business rules."""

    async def create(self, contact: ContactCreate, contact_id: str | None = None) -> str:
        """Store a contact under ``contact_id``, or a freshly generated id. Returns the id."""
        ...

    async def read(self, contact_id: str) -> Contact | None:
        """Return a copy of the stored contact, or None."""
        ...

    async def list_all(self) -> list[Contact]:
        """Return copies of every stored contact."""
        ...

    async def delete(self, contact_id: str) -> bool:
        """Remove the contact if present. Returns True if something was removed."""
        ...


def name_key(first_name: str, surname: str | None) -> NameKey:
    """Case-insensitive, whitespace-trimmed identity of a contact's name."""
    first = first_name.strip().casefold()
    if surname is None:
        return first, None
    return first, surname.strip().casefold()


def encode_name_key(key: NameKey) -> str:
    """Flatten a name key into a single string column value."""
    return json.dumps(list(key), ensure_ascii=False)
