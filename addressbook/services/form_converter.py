"""Turns submitted contact form fields into a ContactCreate."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime

from ..schemas.contact import ContactCreate


class ContactFormConverter:
    """Extracts, converts and checks the fields of the add-contact form.

    After ``verify_and_convert`` returns, ``command`` holds the converted
    contact (also when there are errors, so the form can be redisplayed with
    the submitted values) and ``errors`` maps field names to messages.
    """

    def __init__(self, birthday_format: str = "%d/%m/%Y") -> None:
        self.birthday_format = birthday_format
        self.command: ContactCreate | None = None
        self.errors: dict[str, str] = {}
        self.values: dict[str, str] = {}

    def verify_and_convert(self, form: Mapping[str, str]) -> bool:
        self.errors = {}
        self.values = {
            name: _text(form.get(name))
            for name in ("first_name", "surname", "birthday", "phone")
        }

        first_name = self.values["first_name"] or None
        if first_name is None:
            self.errors["first_name"] = "required"

        birthday = None
        if self.values["birthday"]:
            try:
                birthday = datetime.strptime(self.values["birthday"], self.birthday_format).date()
            except ValueError:
                self.errors["birthday"] = "invalid date"

        self.command = ContactCreate(
            first_name=first_name,
            surname=self.values["surname"] or None,
            birthday=birthday,
            phone=self.values["phone"] or None,
        )
        return not self.errors


def _text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()
