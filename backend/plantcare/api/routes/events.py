"""
Calendar event endpoints.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from plantcare.api.dependencies import Store, get_clock, get_store
from plantcare.api.error_handlers import reject
from plantcare.core.metrics import record_validation
from plantcare.schemas.event import EventResponse
from plantcare.services.event_service import create_event, get_event, update_event
from plantcare.validation import (
    Clock,
    ValidationError,
    is_validation_error,
    validate_event,
    validate_id,
    validate_partial_event,
)

router = APIRouter(prefix="/events", tags=["Events"])


@router.post("/", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event_endpoint(
    payload: dict[str, Any] = Body(...),
    store: Store = Depends(get_store),
    clock: Clock = Depends(get_clock),
):
    """
    Create an event. The start may not fall on a day before today,
    and an event repeats weekly or monthly, never both.
    """
    result = validate_event(payload, now=clock)
    if is_validation_error(result):
        return reject("event", result)
    record_validation("event", valid=True)
    event = await create_event(store, result.value)
    return EventResponse.model_validate(event)


@router.get("/{event_id}", response_model=EventResponse)
async def get_event_endpoint(event_id: str, store: Store = Depends(get_store)):
    parsed_id = validate_id(event_id)
    if is_validation_error(parsed_id):
        return reject("event", parsed_id)
    event = await get_event(store, parsed_id.value)
    return EventResponse.model_validate(event)


@router.patch("/{event_id}", response_model=EventResponse)
async def update_event_endpoint(
    event_id: str,
    payload: dict[str, Any] = Body(...),
    store: Store = Depends(get_store),
    clock: Clock = Depends(get_clock),
):
    parsed_id = validate_id(event_id)
    if is_validation_error(parsed_id):
        return reject("event", parsed_id)

    result = validate_partial_event(payload, now=clock)
    if is_validation_error(result):
        return reject("event", result)

    changes = result.value.model_dump(exclude_unset=True)
    if not changes:
        return reject("event", ValidationError("No valid fields to update"))
    record_validation("event", valid=True)
    event = await update_event(store, parsed_id.value, changes, now=clock)
    return EventResponse.model_validate(event)
