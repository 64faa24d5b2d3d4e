"""Application boundary — demo routes, catch-all, error boundary, request counter, probes.

Invariants:
    - Unmatched routes answer 400 (not 404) with the full URL in msg
    - GET /error becomes a 500; raw message only with expose_error_details
    - Every request bumps the counter once, failing ones included
"""

import json
import logging

import pytest

from task_api.api.middleware import GENERIC_ERROR_MESSAGE, RequestCounter
from task_api.infrastructure.observability import JSONFormatter
from task_api.main import app

API = "/api/v1"


async def test_root_greets(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.json()["message"].startswith("raiz ")


async def test_hola(client):
    res = await client.get("/hola")
    assert res.json()["message"].startswith("hello ")


async def test_hola_with_param(client):
    res = await client.get("/hola/abc")
    assert res.json()["message"].endswith("PARAM abc")


async def test_unmatched_route_returns_400_with_url(client):
    res = await client.get("/nope/nothing")
    assert res.status_code == 400
    assert res.json() == {"msg": "Not Found http://test/nope/nothing"}


async def test_wrong_method_is_not_the_catch_all(client):
    res = await client.post("/hola")
    assert res.status_code == 405


async def test_error_route_returns_generic_500(client):
    res = await client.get("/error")
    assert res.status_code == 500
    assert res.json() == {"msg": GENERIC_ERROR_MESSAGE}


async def test_error_route_exposes_message_when_enabled(client, monkeypatch):
    monkeypatch.setattr(app.state, "expose_error_details", True)
    res = await client.get("/error")
    assert res.status_code == 500
    assert res.json() == {"msg": "error forzado"}


async def test_counter_increments_per_request(client):
    await client.get("/hola")
    await client.get("/error")
    await client.get("/missing")
    assert app.state.request_counter.value == 3


async def test_liveness(client):
    res = await client.get(f"{API}/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get(f"{API}/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_without_database(client, monkeypatch):
    import task_api.infrastructure.database as db_module

    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get(f"{API}/health/ready")
    assert res.status_code == 503


@pytest.mark.parametrize("times", [1, 5])
def test_request_counter_returns_running_total(times):
    counter = RequestCounter()
    values = [counter.increment() for _ in range(times)]
    assert values == list(range(1, times + 1))
    counter.reset()
    assert counter.value == 0


async def test_error_response_carries_cors_headers(client):
    res = await client.get("/error", headers={"Origin": "http://example.com"})
    assert res.status_code == 500
    assert res.headers["access-control-allow-origin"] == "*"


async def test_log_lines_inside_request_carry_request_context(client):
    lines = []

    class _Capture(logging.Handler):
        def emit(self, record):
            lines.append(json.loads(JSONFormatter().format(record)))

    handler = _Capture(level=logging.INFO)
    task_logger = logging.getLogger("task_api")
    previous_level = task_logger.level
    task_logger.addHandler(handler)
    task_logger.setLevel(logging.INFO)
    try:
        res = await client.post(f"{API}/tasks", json={"descripcion": "buy milk"})
    finally:
        task_logger.removeHandler(handler)
        task_logger.setLevel(previous_level)

    task_id = res.json()["taskId"]
    created = [line for line in lines if line["message"] == f"Task {task_id} created"]
    assert len(created) == 1
    assert created[0]["path"] == f"{API}/tasks"
    assert created[0]["method"] == "POST"
    assert created[0]["request_count"] == 1
    assert created[0]["task_id"] == task_id
