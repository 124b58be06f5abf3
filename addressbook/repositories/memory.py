"""In-memory implementation of ContactRepository (no DB)."""

from __future__ import annotations

import logging

from ..ids import IdGenerator, SequentialIdGenerator
from ..schemas.contact import Contact, ContactCreate
from .base import ContactIdInUse

logger = logging.getLogger(__name__)


class InMemoryContactRepository:
    """Stores contacts in a dict. Order preserved by insertion."""

    def __init__(self, id_generator: IdGenerator | None = None) -> None:
        self._ids = id_generator or SequentialIdGenerator()
        self._by_id: dict[str, Contact] = {}

    async def create(self, contact: ContactCreate, contact_id: str | None = None) -> str:
        contact_id = contact_id or self._ids.new_id()
        if contact_id in self._by_id:
            raise ContactIdInUse(contact_id)
        self._by_id[contact_id] = Contact(
            id=contact_id,
            **contact.model_dump(include={"first_name", "surname", "birthday", "phone"}),
        )
        logger.debug("Stored contact %s in memory", contact_id)
        return contact_id

    async def read(self, contact_id: str) -> Contact | None:
        contact = self._by_id.get(contact_id)
        return contact.model_copy() if contact else None

    async def list_all(self) -> list[Contact]:
        return [c.model_copy() for c in self._by_id.values()]

    async def delete(self, contact_id: str) -> bool:
        return self._by_id.pop(contact_id, None) is not None

    def __len__(self) -> int:
        return len(self._by_id)
