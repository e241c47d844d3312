"""Root conftest - shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Settings never point at a real PostgreSQL instance during tests

Design Decisions:
    - SQLite in-memory: fast, no external dependency; PostgreSQL-only paths
      (sequence resets) are skipped by dialect check
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

import foot.models  # noqa: E402, F401
from foot.db.base import Base  # noqa: E402
from foot.db.seed import seed_database  # noqa: E402


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
async def seeded(test_session_factory):
    """Insert the demo fixtures (teams E1..E3, players J1..J6, matches 1..3)."""
    async with test_session_factory() as session:
        await seed_database(session)


@pytest.fixture
async def test_db(test_session_factory, seeded):
    async with test_session_factory() as session:
        yield session
