"""Contact table."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class ContactRow(TimestampMixin, Base):
    __tablename__ = "contacts"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(255))
    surname: Mapped[str | None] = mapped_column(String(255), default=None)
    birthday: Mapped[date | None] = mapped_column(Date, default=None)
    phone: Mapped[str | None] = mapped_column(String(255), default=None)
    # Normalized first name + surname; backs duplicate rejection across processes.
    name_key: Mapped[str] = mapped_column(String(3072), unique=True)

    def __repr__(self) -> str:
        return f"<ContactRow {self.id!r} {self.first_name!r}>"
