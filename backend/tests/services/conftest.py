"""Service test fixtures — async DB, repositories, PostService + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - db_manager swapped for one wrapping the test engine, so routes run the
      real get_db (rollback + DatabaseError mapping included)
    - app_client keeps app exceptions inside the app (500 responses are observable)

Design Decisions:
    - SQLite in-memory: fast, no external dependency; integer autoincrement
      behaves like PostgreSQL for ordering by id
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from hodolog.db.base import Base
from hodolog.infrastructure.database import DatabaseSessionManager
from hodolog.infrastructure.post_repository import SqlAlchemyPostRepository
from hodolog.services.post_service import PostService
import hodolog.infrastructure.database as db_module
import hodolog.models  # noqa: F401
from hodolog.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def post_repository(test_db):
    return SqlAlchemyPostRepository(test_db)


@pytest.fixture
def post_service(post_repository):
    return PostService(post_repository)


@pytest.fixture
def test_db_manager(test_engine, monkeypatch):
    manager = DatabaseSessionManager.from_engine(test_engine)
    monkeypatch.setattr(db_module, "db_manager", manager)
    return manager


def _client(raise_app_exceptions: bool) -> AsyncClient:
    transport = ASGITransport(
        app=app, raise_app_exceptions=raise_app_exceptions,
    )
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
async def client(test_db_manager):
    """FastAPI test client over the test engine."""
    async with _client(raise_app_exceptions=True) as c:
        yield c


@pytest.fixture
async def app_client(test_db_manager):
    """Like client, but unhandled errors come back as 500 responses."""
    async with _client(raise_app_exceptions=False) as c:
        yield c
