"""Database Session Manager — rollback and DatabaseError mapping.

Tests cover:
    - each SQLAlchemy error class maps to its DatabaseError operation
    - session() rolls back and re-raises SQLAlchemy errors as DatabaseError
    - other exceptions leave session() untouched
    - health_check reports connectivity
"""

import pytest
from sqlalchemy import select
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from hodolog.core.errors import DatabaseError, PostNotFound
from hodolog.infrastructure.database import (
    DatabaseSessionManager, to_database_error,
)
from hodolog.db.base import Base
from hodolog.models.post import Post


@pytest.fixture
async def manager():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield DatabaseSessionManager.from_engine(engine)
    await engine.dispose()


@pytest.mark.parametrize("exc, operation", [
    (IntegrityError("INSERT", {}, Exception("unique")), "commit"),
    (OperationalError("SELECT", {}, Exception("locked")), "execute"),
    (DBAPIError("SELECT", {}, Exception("driver")), "query"),
    (SQLAlchemyError("other"), "unknown"),
])
def test_to_database_error_operation(exc, operation):
    error = to_database_error(exc)

    assert isinstance(error, DatabaseError)
    assert error.operation == operation
    assert error.http_status == 503


def test_to_database_error_hides_driver_text():
    error = to_database_error(
        OperationalError("SELECT", {}, Exception("password=hunter2")),
    )
    assert "hunter2" not in error.message


async def test_session_rolls_back_uncommitted_work(manager, rollbacks):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            db.add(Post(title="half", content="written"))
            await db.flush()
            raise OperationalError("UPDATE", {}, Exception("lost connection"))

    assert exc_info.value.operation == "execute"
    assert isinstance(exc_info.value.__cause__, OperationalError)
    assert len(rollbacks) == 1
    async with manager.session() as db:
        assert (await db.execute(select(Post))).scalars().all() == []


async def test_session_passes_other_errors_through(manager, rollbacks):
    with pytest.raises(PostNotFound):
        async with manager.session():
            raise PostNotFound(7)

    assert rollbacks == []


async def test_session_commits_normally(manager):
    async with manager.session() as db:
        db.add(Post(title="kept", content=""))
        await db.commit()

    async with manager.session() as db:
        titles = (await db.execute(select(Post.title))).scalars().all()
    assert titles == ["kept"]


async def test_health_check_on_live_engine(manager):
    assert await manager.health_check() is True


async def test_health_check_reports_failure(manager, monkeypatch):
    async def failing_execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("refused"))

    monkeypatch.setattr(AsyncSession, "execute", failing_execute)

    assert await manager.health_check() is False
