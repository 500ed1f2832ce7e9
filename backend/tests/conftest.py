"""
Pytest fixtures for the validators and the HTTP API.

"Now" is pinned to 2025-06-03 10:00 UTC for every test; the API gets a
fresh in-process store per test.
"""

from datetime import datetime, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from plantcare.main import app
from plantcare.api.dependencies import get_clock, get_store
from plantcare.services.store import Store
from plantcare.validation.clock import fixed_clock

NOW = datetime(2025, 6, 3, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    return fixed_clock(NOW)


@pytest.fixture
def store() -> Store:
    return Store()


@pytest_asyncio.fixture(scope="function")
async def client(store: Store, clock) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client with the store and clock dependencies overridden."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_clock] = lambda: clock

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def test_plant(client: AsyncClient) -> dict:
    """A plant created through the API."""
    response = await client.post("/api/v1/plants/", json={
        "plant_name": "Kitchen Basil",
        "plant_type_id": 3,
    })
    assert response.status_code == 201
    return response.json()


@pytest_asyncio.fixture
async def test_post(client: AsyncClient, test_plant: dict) -> dict:
    response = await client.post("/api/v1/social/posts/", json={
        "title": "First leaves",
        "content": "The basil finally sprouted.",
        "plant_id": test_plant["plant_id"],
    })
    assert response.status_code == 201
    return response.json()


@pytest_asyncio.fixture
async def test_user(client: AsyncClient) -> dict:
    response = await client.post("/api/v1/users/", json={
        "username": "fern_fan",
        "email": "fern@example.com",
        "password": "Photosynth3sis",
    })
    assert response.status_code == 201
    return response.json()
