"""Address book models - re-exports all models and Base.metadata."""

from .base import Base, TimestampMixin
from .contact import ContactRow

__all__ = [
    "Base",
    "TimestampMixin",
    "ContactRow",
]
