"""
Event service handling calendar CRUD operations.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import HTTPException, status

from plantcare.models.event import Event
from plantcare.schemas.event import ValidEvent
from plantcare.services.store import Store
from plantcare.validation.clock import Clock
from plantcare.validation.entities import REPEAT_CONFLICT
from plantcare.validation.fields import validate_date_range
from plantcare.core.logging import get_logger

logger = get_logger(__name__)


def _require_plant(store: Store, plant_id: Optional[int]) -> None:
    if plant_id is not None and plant_id not in store.plants:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Selected plant not found",
        )


async def create_event(store: Store, event_data: ValidEvent) -> Event:
    """Create a calendar event, optionally attached to one of the user's plants."""
    _require_plant(store, event_data.plant_id)

    event = Event(
        id=store.next_id("events"),
        title=event_data.title,
        start=event_data.start,
        end=event_data.end,
        plant_id=event_data.plant_id,
        repeat_weekly=event_data.repeat_weekly,
        repeat_monthly=event_data.repeat_monthly,
    )
    store.events[event.id] = event

    logger.info(
        "event_created",
        event_id=event.id,
        title=event.title,
        plant_id=event.plant_id,
        all_day=event.all_day,
    )
    return event


async def get_event(store: Store, event_id: int) -> Event:
    """Get a single event by ID."""
    event = store.events.get(event_id)
    if not event:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Event {event_id} not found",
        )
    return event


async def update_event(
    store: Store,
    event_id: int,
    changes: dict[str, Any],
    now: Optional[Clock] = None,
) -> Event:
    """
    Apply validated changes to an event.

    The partial validator only sees the fields sent in the request, so the
    date order and the repeat rule are checked again here against the merged
    record. Past start dates are allowed on update.
    """
    event = await get_event(store, event_id)

    start = changes.get("start", event.start)
    end = changes.get("end", event.end)
    error = validate_date_range(start, end, now, allow_past=True)
    if error:
        raise HTTPException(status_code=error.status, detail=error.error)

    repeat_weekly = changes.get("repeat_weekly", event.repeat_weekly)
    repeat_monthly = changes.get("repeat_monthly", event.repeat_monthly)
    if repeat_weekly and repeat_monthly:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=REPEAT_CONFLICT)

    if "plant_id" in changes:
        _require_plant(store, changes["plant_id"])

    for name, value in changes.items():
        setattr(event, name, value)
    event.updated_at = datetime.now(timezone.utc)

    logger.info("event_updated", event_id=event_id, fields=sorted(changes))
    return event
