"""
Pydantic schemas for calendar events.

Request bodies use the web client's camelCase keys (``plantId``,
``repeatWeekly``); attributes are snake_case.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from plantcare.core.calendar import is_all_day_event

_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ValidEvent(BaseModel):
    model_config = _camel

    title: str
    start: datetime
    end: datetime
    plant_id: Optional[int] = None
    repeat_weekly: bool = False
    repeat_monthly: bool = False

    @property
    def all_day(self) -> bool:
        return is_all_day_event(self.start, self.end)


class PartialEvent(BaseModel):
    """Only the fields supplied in the update are set (see ``model_fields_set``)."""

    model_config = _camel

    title: Optional[str] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    plant_id: Optional[int] = None
    repeat_weekly: Optional[bool] = None
    repeat_monthly: Optional[bool] = None


class EventResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    title: str
    start: datetime
    end: datetime
    plant_id: Optional[int]
    repeat_weekly: bool
    repeat_monthly: bool
    all_day: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
