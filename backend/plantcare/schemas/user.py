"""
Pydantic schemas for user profiles.

Passwords pass through validation and on to the auth provider; they are
never part of a response.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class ValidUser(BaseModel):
    username: str
    email: str
    password: str = Field(repr=False)


class PartialUser(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)


class UserResponse(BaseModel):
    id: int
    username: str
    email: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
