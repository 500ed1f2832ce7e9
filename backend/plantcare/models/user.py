"""
User profile record.

Credentials belong to the external auth provider; the profile keeps only
public identity fields.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


@dataclass
class UserProfile:
    id: int
    username: str
    email: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = None

    def __repr__(self) -> str:
        return f"<UserProfile(id={self.id}, username={self.username})>"
