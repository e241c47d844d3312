"""API test fixtures - FastAPI test client over a seeded in-memory database.

Invariants:
    - client overrides get_db with a bare test session
    - managed_client keeps the real get_db so session error mapping applies
    - db_manager patched so the readiness probe sees the test engine
"""

import pytest
from httpx import ASGITransport, AsyncClient

import foot.infrastructure.database as db_module
from foot.infrastructure.database import get_db, DatabaseSessionManager
from foot.main import app


def _test_manager(engine, session_factory) -> DatabaseSessionManager:
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = engine
    manager._session_factory = session_factory
    return manager


@pytest.fixture
async def client(test_engine, test_session_factory, seeded):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = _test_manager(test_engine, test_session_factory)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def managed_client(test_engine, test_session_factory, seeded):
    """Test client going through get_db and DatabaseSessionManager.session()."""
    original_manager = db_module.db_manager
    db_module.db_manager = _test_manager(test_engine, test_session_factory)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    db_module.db_manager = original_manager


@pytest.fixture
def player1() -> dict:
    return {"id": 1, "name": "J1", "isGuardian": False, "teamName": "E1"}
