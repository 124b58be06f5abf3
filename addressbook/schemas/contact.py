"""Contact schemas."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel


class ContactCreate(BaseModel):
    first_name: str | None = None
    surname: str | None = None
    birthday: date | None = None
    phone: str | None = None


class Contact(ContactCreate):
    id: str
    first_name: str

    model_config = {"from_attributes": True}

    @property
    def full_name(self) -> str:
        parts = [p for p in (self.first_name, self.surname) if p]
        return " ".join(parts)


class ContactCreated(BaseModel):
    id: str
