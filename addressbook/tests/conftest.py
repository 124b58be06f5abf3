"""Async test fixtures for address book tests using in-memory storage and SQLite."""

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from addressbook.app import create_app
from addressbook.database import build_engine, build_session_factory, create_tables
from addressbook.ids import SequentialIdGenerator
from addressbook.repositories.memory import InMemoryContactRepository
from addressbook.repositories.sql import SqlContactRepository
from addressbook.services.contact_store import ContactStore


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest_asyncio.fixture
async def engine():
    eng = build_engine("sqlite+aiosqlite:///:memory:")
    await create_tables(eng)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(engine)


@pytest.fixture
def memory_repository():
    return InMemoryContactRepository(SequentialIdGenerator(prefix="mem-"))


@pytest_asyncio.fixture
async def sql_repository(session_factory):
    return SqlContactRepository(session_factory, SequentialIdGenerator(prefix="sql-"))


@pytest.fixture
def store(memory_repository):
    return ContactStore(memory_repository)


@pytest_asyncio.fixture(params=["memory", "sql"])
async def any_store(request, session_factory):
    """The same store contract, backed by each repository in turn."""
    if request.param == "memory":
        return ContactStore(InMemoryContactRepository())
    return ContactStore(SqlContactRepository(session_factory))


@pytest_asyncio.fixture
async def client(store):
    """HTTPX async test client against an app wired to the in-memory store."""
    app = create_app(store=store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
