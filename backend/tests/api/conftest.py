"""API test fixtures — FastAPI app driven in-process through httpx.

Invariants:
    - Lifespan is not run by ASGITransport; the root test_manager supplies the database

Design Decisions:
    - create_task helper posts through the API so ids come from the storage engine
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app


@pytest.fixture
async def client(test_manager):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def create_task(client):
    async def _create(title: str) -> dict:
        res = await client.post("/api/tasks", json={"title": title})
        assert res.status_code == 201, res.text
        return res.json()
    return _create
