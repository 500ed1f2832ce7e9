"""
Social feed endpoints: posts and their comments.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from plantcare.api.dependencies import Store, get_store
from plantcare.api.error_handlers import reject
from plantcare.core.metrics import record_validation
from plantcare.schemas.post import CommentResponse, PostResponse
from plantcare.services.social_service import add_comment, create_post, get_post, update_post
from plantcare.validation import (
    ValidationError,
    is_validation_error,
    validate_comment,
    validate_id,
    validate_partial_post,
    validate_post,
)

router = APIRouter(prefix="/social/posts", tags=["Social"])


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post_endpoint(
    payload: dict[str, Any] = Body(...),
    store: Store = Depends(get_store),
):
    result = validate_post(payload)
    if is_validation_error(result):
        return reject("post", result)
    record_validation("post", valid=True)
    post = await create_post(store, result.value)
    return PostResponse.model_validate(post)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post_endpoint(post_id: str, store: Store = Depends(get_store)):
    parsed_id = validate_id(post_id)
    if is_validation_error(parsed_id):
        return reject("post", parsed_id)
    post = await get_post(store, parsed_id.value)
    return PostResponse.model_validate(post)


@router.patch("/{post_id}", response_model=PostResponse)
async def update_post_endpoint(
    post_id: str,
    payload: dict[str, Any] = Body(...),
    store: Store = Depends(get_store),
):
    parsed_id = validate_id(post_id)
    if is_validation_error(parsed_id):
        return reject("post", parsed_id)

    result = validate_partial_post(payload)
    if is_validation_error(result):
        return reject("post", result)

    changes = result.value.model_dump(exclude_unset=True)
    if not changes:
        return reject("post", ValidationError("No valid fields to update"))
    record_validation("post", valid=True)
    post = await update_post(store, parsed_id.value, changes)
    return PostResponse.model_validate(post)


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment_endpoint(
    post_id: str,
    payload: dict[str, Any] = Body(...),
    store: Store = Depends(get_store),
):
    """Comment on a post. Returns 404 if the post does not exist."""
    parsed_id = validate_id(post_id)
    if is_validation_error(parsed_id):
        return reject("comment", parsed_id)

    result = validate_comment(payload)
    if is_validation_error(result):
        return reject("comment", result)
    record_validation("comment", valid=True)
    comment = await add_comment(store, parsed_id.value, result.value)
    return CommentResponse.model_validate(comment)
