"""
Plant endpoints.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from plantcare.api.dependencies import Store, get_store
from plantcare.api.error_handlers import reject
from plantcare.core.metrics import record_validation
from plantcare.schemas.plant import PlantResponse
from plantcare.services.plant_service import create_plant, get_plant, update_plant
from plantcare.validation import (
    ValidationError,
    is_validation_error,
    validate_id,
    validate_partial_plant,
    validate_plant,
)

router = APIRouter(prefix="/plants", tags=["Plants"])


@router.post("/", response_model=PlantResponse, status_code=status.HTTP_201_CREATED)
async def create_plant_endpoint(
    payload: dict[str, Any] = Body(...),
    store: Store = Depends(get_store),
):
    """Create a plant from a validated body."""
    result = validate_plant(payload)
    if is_validation_error(result):
        return reject("plant", result)
    record_validation("plant", valid=True)
    plant = await create_plant(store, result.value)
    return PlantResponse.model_validate(plant)


@router.get("/{plant_id}", response_model=PlantResponse)
async def get_plant_endpoint(plant_id: str, store: Store = Depends(get_store)):
    parsed_id = validate_id(plant_id)
    if is_validation_error(parsed_id):
        return reject("plant", parsed_id)
    plant = await get_plant(store, parsed_id.value)
    return PlantResponse.model_validate(plant)


@router.patch("/{plant_id}", response_model=PlantResponse)
async def update_plant_endpoint(
    plant_id: str,
    payload: dict[str, Any] = Body(...),
    store: Store = Depends(get_store),
):
    """Update any subset of name, type and photo."""
    parsed_id = validate_id(plant_id)
    if is_validation_error(parsed_id):
        return reject("plant", parsed_id)

    result = validate_partial_plant(payload)
    if is_validation_error(result):
        return reject("plant", result)

    changes = result.value.model_dump(exclude_unset=True)
    if not changes:
        return reject("plant", ValidationError("No valid fields to update"))
    record_validation("plant", valid=True)
    plant = await update_plant(store, parsed_id.value, changes)
    return PlantResponse.model_validate(plant)
