"""
User profile endpoints: registration and profile updates.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from plantcare.api.dependencies import Store, get_store
from plantcare.api.error_handlers import reject
from plantcare.core.metrics import record_validation
from plantcare.schemas.user import UserResponse
from plantcare.services.user_service import register_user, update_user
from plantcare.validation import (
    ValidationError,
    is_validation_error,
    validate_id,
    validate_partial_user,
    validate_user,
)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: dict[str, Any] = Body(...),
    store: Store = Depends(get_store),
):
    """Register a new user profile. Duplicate username or email returns 409."""
    result = validate_user(payload)
    if is_validation_error(result):
        return reject("user", result)
    record_validation("user", valid=True)
    user = await register_user(store, result.value)
    return UserResponse.model_validate(user)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_profile(
    user_id: str,
    payload: dict[str, Any] = Body(...),
    store: Store = Depends(get_store),
):
    parsed_id = validate_id(user_id)
    if is_validation_error(parsed_id):
        return reject("user", parsed_id)

    result = validate_partial_user(payload)
    if is_validation_error(result):
        return reject("user", result)

    changes = result.value.model_dump(exclude_unset=True)
    if not changes:
        return reject("user", ValidationError("No valid fields to update"))
    record_validation("user", valid=True)
    user = await update_user(store, parsed_id.value, changes)
    return UserResponse.model_validate(user)
