"""Identifier generators for contacts."""

from __future__ import annotations

import threading
import uuid
from typing import Protocol


class IdGenerator(Protocol):
    def new_id(self) -> str: ...


class UUIDIdGenerator:
    """Random 32-char hex identifiers."""

    def new_id(self) -> str:
        return uuid.uuid4().hex


class SequentialIdGenerator:
    """Increasing decimal identifiers, optionally prefixed.

    Deterministic, so tests can predict the ids handed out.
    """

    def __init__(self, start: int = 1, prefix: str = "") -> None:
        self._next = start
        self._prefix = prefix
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            value = self._next
            self._next += 1
        return f"{self._prefix}{value}"


def build_id_generator(strategy: str) -> IdGenerator | None:
    """Map a configured strategy name to a generator. ``adapter`` returns None."""
    key = strategy.strip().lower()
    if key == "uuid":
        return UUIDIdGenerator()
    if key == "sequential":
        return SequentialIdGenerator()
    if key == "adapter":
        return None
    raise ValueError(f"Unknown id strategy: {strategy!r}")
