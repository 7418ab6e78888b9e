"""Root conftest — shared test configuration."""

import os

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

# Tests never touch the docker-compose PostgreSQL
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def rollbacks(monkeypatch):
    """Sessions rolled back during the test, in order."""
    calls = []
    original = AsyncSession.rollback

    async def recording_rollback(self):
        calls.append(self)
        await original(self)

    monkeypatch.setattr(AsyncSession, "rollback", recording_rollback)
    return calls
