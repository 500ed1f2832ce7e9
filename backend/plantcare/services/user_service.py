"""
User profile service handling registration and profile updates.

Passwords are validated by the API layer and handed to the auth provider;
this service never stores them.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import HTTPException, status

from plantcare.models.user import UserProfile
from plantcare.schemas.user import ValidUser
from plantcare.services.store import Store
from plantcare.core.logging import get_logger

logger = get_logger(__name__)


def _find_by(store: Store, field: str, value: str) -> Optional[UserProfile]:
    for user in store.users.values():
        if getattr(user, field) == value:
            return user
    return None


async def register_user(store: Store, user_data: ValidUser) -> UserProfile:
    """
    Create a profile for a new user.
    Raises 409 if email or username already exists.
    """
    if _find_by(store, "email", user_data.email):
        logger.warning("registration_failed", reason="email_exists", email=user_data.email)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered",
        )

    if _find_by(store, "username", user_data.username):
        logger.warning("registration_failed", reason="username_exists", username=user_data.username)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username already in use",
        )

    user = UserProfile(
        id=store.next_id("users"),
        username=user_data.username,
        email=user_data.email,
    )
    store.users[user.id] = user

    logger.info("user_registered", user_id=user.id, username=user.username)
    return user


async def get_user(store: Store, user_id: int) -> UserProfile:
    user = store.users.get(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user


async def update_user(store: Store, user_id: int, changes: dict[str, Any]) -> UserProfile:
    """
    Update profile fields. A password change is accepted but not kept here.
    Raises 409 if the new username or email belongs to someone else.
    """
    user = await get_user(store, user_id)

    for field, detail in (("username", "Username already in use"), ("email", "Email already registered")):
        if field not in changes:
            continue
        owner = _find_by(store, field, changes[field])
        if owner and owner.id != user_id:
            logger.warning("profile_update_failed", reason=f"{field}_conflict", user_id=user_id)
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=detail)

    for field in ("username", "email"):
        if field in changes:
            setattr(user, field, changes[field])
    user.updated_at = datetime.now(timezone.utc)

    logger.info("user_updated", user_id=user_id, fields=sorted(changes))
    return user
