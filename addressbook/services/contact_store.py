"""Contact store - validation, normalization and duplicate rejection.

The store is the only place business rules live. The repository it wraps
just persists whatever it is handed.
"""

from __future__ import annotations

import asyncio
import logging

from ..errors import InvalidContact, InvalidId
from ..ids import IdGenerator
from ..repositories.base import ContactConflict, ContactRepository, name_key
from ..schemas.contact import Contact, ContactCreate

logger = logging.getLogger(__name__)


class ContactStore:
    """Business-rule front of a ContactRepository.

    When ``id_generator`` is given the store assigns identifiers itself;
    otherwise the repository generates them.
    """

    def __init__(
        self,
        repository: ContactRepository,
        id_generator: IdGenerator | None = None,
    ) -> None:
        self.repository = repository
        self.id_generator = id_generator
        # Serializes check-then-insert for callers sharing this store.
        self._add_lock = asyncio.Lock()

    async def add_contact(self, contact: ContactCreate) -> str:
        """Validate, normalize and persist a contact. Returns its new id."""
        normalized = _normalize(contact)

        async with self._add_lock:
            if await self._is_duplicate(normalized):
                logger.info("Rejected duplicate contact %r", _display_name(normalized))
                raise InvalidContact(
                    "A contact with this name already exists",
                    {"first_name": "duplicate"},
                )

            contact_id = self.id_generator.new_id() if self.id_generator else None
            try:
                contact_id = await self.repository.create(normalized, contact_id)
            except ContactConflict as exc:
                logger.info("Storage rejected duplicate contact %r", _display_name(normalized))
                raise InvalidContact(
                    "A contact with this name already exists",
                    {"first_name": "duplicate"},
                ) from exc

        logger.info("Added contact %s", contact_id)
        return contact_id

    async def get_contact(self, contact_id: str) -> Contact:
        contact = await self.repository.read(contact_id)
        if contact is None:
            raise InvalidId(contact_id)
        return contact

    async def get_all(self) -> list[Contact]:
        return await self.repository.list_all()

    async def delete_contact(self, contact_id: str) -> bool:
        """Delete a contact. Unknown ids are ignored; returns True if one was removed."""
        removed = await self.repository.delete(contact_id)
        if removed:
            logger.info("Deleted contact %s", contact_id)
        else:
            logger.debug("Delete of unknown contact %s ignored", contact_id)
        return removed

    async def _is_duplicate(self, candidate: ContactCreate) -> bool:
        # Stored values are re-trimmed: a backing table may hold data written
        # by something other than this store.
        wanted = name_key(candidate.first_name, candidate.surname)
        for existing in await self.repository.list_all():
            if name_key(existing.first_name, existing.surname) == wanted:
                return True
        return False


def _normalize(contact: ContactCreate) -> ContactCreate:
    first_name = contact.first_name.strip() if contact.first_name is not None else ""
    if not first_name:
        logger.info("Rejected contact without first name")
        raise InvalidContact("First name is required", {"first_name": "required"})

    surname = contact.surname.strip() if contact.surname is not None else None
    return ContactCreate(
        first_name=first_name,
        surname=surname,
        birthday=contact.birthday,
        phone=contact.phone,
    )


def _display_name(contact: ContactCreate) -> str:
    return " ".join(p for p in (contact.first_name, contact.surname) if p)
