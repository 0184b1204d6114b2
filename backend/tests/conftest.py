"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test that asks for a DB gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory via aiosqlite: fast, no external dependency; the unique and
      check constraints the store relies on are enforced by SQLite too
    - StaticPool: every session in a test shares the one in-memory connection
"""

import os

# Ensure tests never reach a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import friendgraph.models  # noqa: E402,F401
from friendgraph.db.base import Base  # noqa: E402
from friendgraph.infrastructure.database import get_db, DatabaseSessionManager  # noqa: E402
import friendgraph.infrastructure.database as db_module  # noqa: E402
from friendgraph.infrastructure.graph_store import SqlGraphStore  # noqa: E402
from friendgraph.main import app  # noqa: E402


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
def sql_store(test_db):
    return SqlGraphStore(test_db)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def register(client):
    """POST /api/v1/users for each email; returns the created ids by email."""
    async def _register(*emails: str) -> dict[str, int]:
        ids = {}
        for email in emails:
            res = await client.post("/api/v1/users", json={"email": email})
            assert res.status_code == 201, res.text
            ids[email] = res.json()["data"]["id"]
        return ids
    return _register
