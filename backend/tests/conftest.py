"""Root conftest - fresh in-memory store per test, FastAPI app wired to it.

Invariants:
    - Every test gets a fresh in-memory SQLite database (ids restart at 1)
    - get_db dependency overridden to use the test engine
    - db_manager patched so readiness probes see the test engine

Design Decisions:
    - StaticPool: in-memory SQLite lives on one connection; every session must share it
    - httpx ASGITransport does not run lifespan: schema is created here instead
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import todoapp.infrastructure.database as db_module  # noqa: E402
import todoapp.models  # noqa: E402,F401
from todoapp.client.todo_client import TodoApiClient  # noqa: E402
from todoapp.db.base import Base  # noqa: E402
from todoapp.infrastructure.database import get_db, DatabaseSessionManager  # noqa: E402
from todoapp.main import app  # noqa: E402
from todoapp.services.todo_store import TodoStore  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
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
async def store(test_db):
    """A store bound to this test's private database."""
    return TodoStore(test_db)


@pytest.fixture
async def wired_app(test_engine, test_session_factory):
    """The FastAPI app with DB dependency and db_manager pointed at the test engine."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    yield app

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def client(wired_app):
    """Raw HTTP client against the wired app."""
    async with AsyncClient(
        transport=ASGITransport(app=wired_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def api(wired_app):
    """TodoApiClient talking to the wired app in-process."""
    async with TodoApiClient(
        base_url="http://test", transport=ASGITransport(app=wired_app),
    ) as c:
        yield c
