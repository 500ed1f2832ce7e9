"""
Calendar event record.

Key design decisions:
- `plant_id` is optional; an event may be a reminder for a plant or stand alone
- Weekly and monthly repetition are mutually exclusive (enforced on create and update)
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from plantcare.core.calendar import is_all_day_event


@dataclass
class Event:
    id: int
    title: str
    start: datetime
    end: datetime
    plant_id: Optional[int] = None
    repeat_weekly: bool = False
    repeat_monthly: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = None

    @property
    def all_day(self) -> bool:
        return is_all_day_event(self.start, self.end)

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, title={self.title}, start={self.start.isoformat()})>"
