"""
Pydantic schemas for social posts and their comments.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class ValidPost(BaseModel):
    title: str
    content: str
    plant_id: int
    photo: Optional[str] = None


class PartialPost(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    plant_id: Optional[int] = None
    photo: Optional[str] = None


class ValidComment(BaseModel):
    content: str
    photo: Optional[str] = None


class PostResponse(BaseModel):
    post_id: int
    title: str
    content: str
    plant_id: int
    photo: Optional[str]
    comment_count: int = 0
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class CommentResponse(BaseModel):
    comment_id: int
    post_id: int
    content: str
    photo: Optional[str]
    created_at: datetime

    model_config = {"from_attributes": True}
