"""SQLAlchemy implementation of ContactRepository."""

from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..ids import IdGenerator, UUIDIdGenerator
from ..models.contact import ContactRow
from ..schemas.contact import Contact, ContactCreate
from .base import ContactConflict, ContactIdInUse, encode_name_key, name_key

logger = logging.getLogger(__name__)


class SqlContactRepository:
    """Stores contacts in the ``contacts`` table.

    Every call opens its own session and closes it before returning, so the
    pooled connection goes back to the pool on success and on error alike.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        id_generator: IdGenerator | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._ids = id_generator or UUIDIdGenerator()

    async def create(self, contact: ContactCreate, contact_id: str | None = None) -> str:
        contact_id = contact_id or self._ids.new_id()
        key = encode_name_key(name_key(contact.first_name, contact.surname))
        row = ContactRow(
            id=contact_id,
            first_name=contact.first_name,
            surname=contact.surname,
            birthday=contact.birthday,
            phone=contact.phone,
            name_key=key,
        )
        async with self._session_factory() as db:
            db.add(row)
            try:
                await db.commit()
            except IntegrityError as exc:
                await db.rollback()
                await self._raise_for_conflict(db, contact_id, key, exc)
                raise
        logger.debug("Inserted contact row %s", contact_id)
        return contact_id

    async def read(self, contact_id: str) -> Contact | None:
        async with self._session_factory() as db:
            row = await db.get(ContactRow, contact_id)
            if row is None:
                return None
            return Contact.model_validate(row)

    async def list_all(self) -> list[Contact]:
        stmt = select(ContactRow).order_by(ContactRow.created_at, ContactRow.id)
        async with self._session_factory() as db:
            result = await db.execute(stmt)
            return [Contact.model_validate(row) for row in result.scalars().all()]

    async def delete(self, contact_id: str) -> bool:
        stmt = delete(ContactRow).where(ContactRow.id == contact_id)
        async with self._session_factory() as db:
            result = await db.execute(stmt)
            await db.commit()
            return bool(result.rowcount)

    async def _raise_for_conflict(
        self, db: AsyncSession, contact_id: str, key: str, exc: IntegrityError
    ) -> None:
        """Name the constraint a failed insert hit. Returns if it was neither one."""
        same_name = await db.execute(select(ContactRow.id).where(ContactRow.name_key == key))
        if same_name.first() is not None:
            raise ContactConflict(f"Contact name {key} already stored") from exc
        same_id = await db.execute(select(ContactRow.id).where(ContactRow.id == contact_id))
        if same_id.first() is not None:
            raise ContactIdInUse(contact_id) from exc
