"""FastAPI dependencies."""

from __future__ import annotations

from fastapi import Request
from fastapi.templating import Jinja2Templates

from .config import AddressBookSettings
from .services.contact_store import ContactStore


def get_store(request: Request) -> ContactStore:
    """Return the store constructed at startup and attached to the app."""
    return request.app.state.store


def get_settings(request: Request) -> AddressBookSettings:
    """Return the settings the app was created with."""
    return request.app.state.settings


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates
