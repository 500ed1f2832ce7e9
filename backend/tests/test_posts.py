"""
Tests for social post and comment endpoints.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_post(client: AsyncClient, test_plant):
    response = await client.post("/api/v1/social/posts/", json={
        "title": "T",
        "content": "C",
        "plant_id": str(test_plant["plant_id"]),
    })
    assert response.status_code == 201
    data = response.json()
    assert data["plant_id"] == test_plant["plant_id"]
    assert data["photo"] is None
    assert data["comment_count"] == 0


@pytest.mark.asyncio
async def test_create_post_unknown_plant(client: AsyncClient):
    response = await client.post("/api/v1/social/posts/", json={
        "title": "Orphan", "content": "No plant here", "plant_id": 12,
    })
    assert response.status_code == 404
    assert response.json() == {"error": "Plant 12 not found"}


@pytest.mark.asyncio
async def test_create_post_title_too_long(client: AsyncClient, test_plant):
    response = await client.post("/api/v1/social/posts/", json={
        "title": "A" * 101, "content": "x", "plant_id": test_plant["plant_id"],
    })
    assert response.status_code == 400
    assert response.json() == {"error": "Title cannot exceed 100 characters"}


@pytest.mark.asyncio
async def test_update_post(client: AsyncClient, test_post):
    response = await client.patch(
        f"/api/v1/social/posts/{test_post['post_id']}",
        json={"title": "Updated Title"},
    )
    assert response.status_code == 200
    assert response.json()["title"] == "Updated Title"
    assert response.json()["content"] == test_post["content"]


@pytest.mark.asyncio
async def test_update_post_bad_photo(client: AsyncClient, test_post):
    response = await client.patch(f"/api/v1/social/posts/{test_post['post_id']}", json={"photo": 12345})
    assert response.status_code == 400
    assert response.json() == {"error": "Photo must be a string"}


@pytest.mark.asyncio
async def test_comment_on_post(client: AsyncClient, test_post):
    response = await client.post(
        f"/api/v1/social/posts/{test_post['post_id']}/comments",
        json={"content": "Nice plant!"},
    )
    assert response.status_code == 201
    assert response.json()["post_id"] == test_post["post_id"]

    post = await client.get(f"/api/v1/social/posts/{test_post['post_id']}")
    assert post.json()["comment_count"] == 1


@pytest.mark.asyncio
async def test_comment_on_missing_post(client: AsyncClient):
    response = await client.post("/api/v1/social/posts/5/comments", json={"content": "Hello?"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_comment_invalid_content(client: AsyncClient, test_post):
    response = await client.post(
        f"/api/v1/social/posts/{test_post['post_id']}/comments",
        json={"content": 12345},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Comment content must be a string"}


@pytest.mark.asyncio
async def test_comment_path_id_truncated(client: AsyncClient, test_post):
    """Path ids follow the same truncating parse as body ids."""
    response = await client.post(
        f"/api/v1/social/posts/{test_post['post_id']}abc/comments",
        json={"content": "Still found"},
    )
    assert response.status_code == 201
