"""Database Session Manager - in-memory engine sharing and error mapping."""

import pytest
from sqlalchemy import text
from sqlalchemy.pool import StaticPool

from todoapp.core.errors import DatabaseError
from todoapp.infrastructure.database import DatabaseSessionManager, _engine_options
from todoapp.services.todo_store import TodoStore


def test_memory_sqlite_uses_static_pool():
    assert _engine_options("sqlite+aiosqlite:///:memory:", 5, 10) == {
        "poolclass": StaticPool,
    }


def test_server_database_gets_pool_sizing():
    opts = _engine_options("postgresql+asyncpg://u:p@db/todo", 5, 10)
    assert opts["pool_size"] == 5
    assert opts["max_overflow"] == 10


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await m.create_schema()
    yield m
    await m.dispose()


async def test_sessions_share_one_in_memory_store(manager):
    async with manager.session() as db:
        await TodoStore(db).create("Buy milk")
    async with manager.session() as db:
        todos = await TodoStore(db).list_todos()
    assert [t.title for t in todos] == ["Buy milk"]


async def test_sqlalchemy_errors_become_database_error(manager):
    with pytest.raises(DatabaseError):
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))


async def test_health_check_true_when_reachable(manager):
    assert await manager.health_check() is True
