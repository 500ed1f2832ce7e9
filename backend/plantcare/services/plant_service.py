"""
Plant service handling create, read and update.
"""

from datetime import datetime, timezone
from typing import Any

from fastapi import HTTPException, status

from plantcare.models.plant import DEFAULT_PLANT_PHOTO, Plant
from plantcare.schemas.plant import ValidPlant
from plantcare.services.store import Store
from plantcare.core.logging import get_logger

logger = get_logger(__name__)


async def create_plant(store: Store, plant_data: ValidPlant) -> Plant:
    """Create a plant; plants without a photo get the default picture."""
    plant = Plant(
        plant_id=store.next_id("plants"),
        plant_name=plant_data.plant_name,
        plant_type_id=plant_data.plant_type_id,
        photo=plant_data.photo or DEFAULT_PLANT_PHOTO,
    )
    store.plants[plant.plant_id] = plant

    logger.info(
        "plant_created",
        plant_id=plant.plant_id,
        plant_type_id=plant.plant_type_id,
        has_photo=bool(plant_data.photo),
    )
    return plant


async def get_plant(store: Store, plant_id: int) -> Plant:
    plant = store.plants.get(plant_id)
    if not plant:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Plant {plant_id} not found",
        )
    return plant


async def update_plant(store: Store, plant_id: int, changes: dict[str, Any]) -> Plant:
    """Apply already-validated field changes to an existing plant."""
    plant = await get_plant(store, plant_id)
    for name, value in changes.items():
        setattr(plant, name, value)
    plant.updated_at = datetime.now(timezone.utc)

    logger.info("plant_updated", plant_id=plant_id, fields=sorted(changes))
    return plant
