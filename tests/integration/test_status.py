import logging

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_status(client: AsyncClient):
    """Test liveness endpoint."""
    response = await client.get("/status")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"status": "OK"}


@pytest.mark.asyncio
async def test_request_id_header(client: AsyncClient):
    """Every response carries a request ID; a caller-supplied one is echoed."""
    response = await client.get("/status")
    assert response.headers["X-Request-ID"]

    response = await client.get("/status", headers={"X-Request-ID": "trace-42"})
    assert response.headers["X-Request-ID"] == "trace-42"


@pytest.mark.asyncio
async def test_unknown_route(client: AsyncClient):
    response = await client.get("/nowhere")
    assert response.status_code == 404
    assert response.json() == {"error": {"title": "NotFound"}}


@pytest.mark.asyncio
async def test_method_not_allowed(client: AsyncClient):
    response = await client.put("/categories")
    assert response.status_code == 405
    assert response.json() == {"error": {"title": "MethodNotAllowed"}}


@pytest.mark.asyncio
async def test_request_log_carries_resource_ids(client: AsyncClient, caplog):
    caplog.set_level(logging.INFO, logger="spendcat.api.middleware.logging")

    response = await client.get(
        "/categories/2345/questions/2", headers={"X-Request-ID": "trace-7"}
    )

    assert response.status_code == 200
    [record] = [r for r in caplog.records if r.name == "spendcat.api.middleware.logging"]
    assert record.request_id == "trace-7"
    assert record.category_id == "2345"
    assert record.question_id == "2"
    assert record.status_code == 200
