"""
Social feed service: posts about plants and comments on posts.
"""

from datetime import datetime, timezone
from typing import Any

from fastapi import HTTPException, status

from plantcare.models.post import Comment, Post
from plantcare.schemas.post import ValidComment, ValidPost
from plantcare.services.store import Store
from plantcare.core.logging import get_logger

logger = get_logger(__name__)


def _require_plant(store: Store, plant_id: int) -> None:
    if plant_id not in store.plants:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Plant {plant_id} not found",
        )


async def create_post(store: Store, post_data: ValidPost) -> Post:
    """Publish a post about an existing plant."""
    _require_plant(store, post_data.plant_id)

    post = Post(
        post_id=store.next_id("posts"),
        title=post_data.title,
        content=post_data.content,
        plant_id=post_data.plant_id,
        photo=post_data.photo,
    )
    store.posts[post.post_id] = post

    logger.info("post_created", post_id=post.post_id, plant_id=post.plant_id, has_photo=bool(post.photo))
    return post


async def get_post(store: Store, post_id: int) -> Post:
    post = store.posts.get(post_id)
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Post {post_id} not found",
        )
    return post


async def update_post(store: Store, post_id: int, changes: dict[str, Any]) -> Post:
    post = await get_post(store, post_id)
    if "plant_id" in changes:
        _require_plant(store, changes["plant_id"])

    for name, value in changes.items():
        setattr(post, name, value)
    post.updated_at = datetime.now(timezone.utc)

    logger.info("post_updated", post_id=post_id, fields=sorted(changes))
    return post


async def add_comment(store: Store, post_id: int, comment_data: ValidComment) -> Comment:
    """Attach a comment to a post. Raises 404 if the post does not exist."""
    post = await get_post(store, post_id)

    comment = Comment(
        comment_id=store.next_id("comments"),
        post_id=post.post_id,
        content=comment_data.content,
        photo=comment_data.photo,
    )
    store.comments[comment.comment_id] = comment
    post.comments.append(comment)

    logger.info("comment_created", post_id=post_id, comment_id=comment.comment_id)
    return comment
