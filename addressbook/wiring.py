"""Builds a ContactStore from settings.

Callers construct the store once at startup and pass it down.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from .config import AddressBookSettings
from .database import build_engine, build_session_factory, create_tables
from .ids import build_id_generator
from .repositories.memory import InMemoryContactRepository
from .repositories.sql import SqlContactRepository
from .services.contact_store import ContactStore

logger = logging.getLogger(__name__)


async def build_store(cfg: AddressBookSettings) -> tuple[ContactStore, AsyncEngine | None]:
    """Return the configured store and, for the SQL backend, its engine.

    The caller owns the engine and must dispose of it on shutdown.
    """
    id_generator = build_id_generator(cfg.id_strategy)
    backend = cfg.storage_backend.strip().lower()

    if backend == "memory":
        logger.info("Using in-memory contact storage")
        return ContactStore(InMemoryContactRepository(), id_generator), None

    if backend == "sql":
        if cfg.id_strategy.strip().lower() == "sequential":
            # The counter restarts in every process; ids already in the table would be reissued.
            raise ValueError("The sequential id strategy only works with the memory backend")
        engine = build_engine(cfg.database_url, echo=cfg.echo_sql)
        # Auto-create tables for SQLite (local dev)
        if cfg.is_sqlite:
            await create_tables(engine)
        logger.info("Using SQL contact storage at %s", engine.url.render_as_string(hide_password=True))
        repository = SqlContactRepository(build_session_factory(engine))
        return ContactStore(repository, id_generator), engine

    raise ValueError(f"Unknown storage backend: {cfg.storage_backend!r}")
