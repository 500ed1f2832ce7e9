"""
Tests for user registration and profile updates.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_register_user(client: AsyncClient):
    """Successful registration returns the profile without the password."""
    response = await client.post("/api/v1/users/", json={
        "email": "new@example.com",
        "username": "newuser",
        "password": "Securepassword123",
    })
    assert response.status_code == 201
    data = response.json()
    assert data["email"] == "new@example.com"
    assert data["username"] == "newuser"
    assert "password" not in data


@pytest.mark.asyncio
async def test_register_duplicate_email(client: AsyncClient, test_user):
    response = await client.post("/api/v1/users/", json={
        "email": "fern@example.com",
        "username": "different",
        "password": "Securepassword123",
    })
    assert response.status_code == 409
    assert response.json() == {"error": "Email already registered"}


@pytest.mark.asyncio
async def test_register_duplicate_username(client: AsyncClient, test_user):
    response = await client.post("/api/v1/users/", json={
        "email": "different@example.com",
        "username": "fern_fan",
        "password": "Securepassword123",
    })
    assert response.status_code == 409
    assert response.json() == {"error": "Username already in use"}


@pytest.mark.asyncio
async def test_register_weak_password(client: AsyncClient):
    response = await client.post("/api/v1/users/", json={
        "email": "weak@example.com",
        "username": "weakuser",
        "password": "short",
    })
    assert response.status_code == 400
    assert response.json() == {"error": "Password must be at least 8 characters long"}


@pytest.mark.asyncio
async def test_register_short_username(client: AsyncClient):
    response = await client.post("/api/v1/users/", json={
        "username": "ab", "email": "a@b.co", "password": "Abcdefg1",
    })
    assert response.status_code == 400
    assert "username" in response.json()["error"].lower()


@pytest.mark.asyncio
async def test_update_username(client: AsyncClient, test_user):
    response = await client.patch(f"/api/v1/users/{test_user['id']}", json={"username": "fern_fanatic"})
    assert response.status_code == 200
    assert response.json()["username"] == "fern_fanatic"


@pytest.mark.asyncio
async def test_update_username_taken(client: AsyncClient, test_user):
    other = await client.post("/api/v1/users/", json={
        "username": "cactus_club", "email": "cactus@example.com", "password": "Spiky1234",
    })
    response = await client.patch(f"/api/v1/users/{other.json()['id']}", json={"username": "fern_fan"})
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_update_keeping_own_username(client: AsyncClient, test_user):
    response = await client.patch(f"/api/v1/users/{test_user['id']}", json={"username": "fern_fan"})
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_update_invalid_email(client: AsyncClient, test_user):
    response = await client.patch(f"/api/v1/users/{test_user['id']}", json={"email": "not-an-email"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid email format"}


@pytest.mark.asyncio
async def test_update_missing_user(client: AsyncClient):
    response = await client.patch("/api/v1/users/42", json={"email": "x@example.com"})
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


@pytest.mark.asyncio
async def test_metrics_count_validation_outcomes(client: AsyncClient):
    await client.post("/api/v1/users/", json={"username": "x"})
    response = await client.get("/metrics")
    assert response.status_code == 200
    assert 'validation_results_total{entity="user",result="invalid"}' in response.text
