"""Errors raised by the contact store."""

from __future__ import annotations


class AddressBookError(Exception):
    """Base class for address book business errors."""


class InvalidContact(AddressBookError):
    """Raised when a contact is missing required data or duplicates another one."""

    def __init__(self, message: str, errors: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = dict(errors or {})


class InvalidId(AddressBookError):
    """Raised when no contact exists for the requested identifier."""

    def __init__(self, contact_id: str) -> None:
        super().__init__(f"Contact {contact_id!r} not found")
        self.contact_id = contact_id
