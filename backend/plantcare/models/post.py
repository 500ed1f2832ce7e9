"""
Social feed records: posts about a plant and their comments.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


@dataclass
class Comment:
    comment_id: int
    post_id: int
    content: str
    photo: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class Post:
    post_id: int
    title: str
    content: str
    plant_id: int
    photo: Optional[str] = None
    comments: list[Comment] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = None

    @property
    def comment_count(self) -> int:
        return len(self.comments)

    def __repr__(self) -> str:
        return f"<Post(id={self.post_id}, title={self.title}, plant={self.plant_id})>"
