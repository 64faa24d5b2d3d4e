"""API test fixtures — FastAPI app wired to the in-memory test database.

Invariants:
    - get_db dependency overridden to use test DB sessions
    - db_manager patched so readiness checks see the test engine
    - Request counter reset before each test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from task_api.infrastructure.database import get_db, DatabaseSessionManager
import task_api.infrastructure.database as db_module
from task_api.main import app



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

    app.state.request_counter.reset()

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def created_task_id(client):
    """Create one task through the API and return its id."""
    res = await client.post(
        "/api/v1/tasks",
        json={"descripcion": "buy milk", "observacion": "2 liters"},
    )
    assert res.status_code == 200
    return res.json()["taskId"]
