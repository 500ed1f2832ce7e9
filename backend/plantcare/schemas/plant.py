"""
Pydantic schemas for plants.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class ValidPlant(BaseModel):
    plant_name: str
    plant_type_id: int
    photo: Optional[str] = None


class PartialPlant(BaseModel):
    plant_name: Optional[str] = None
    plant_type_id: Optional[int] = None
    photo: Optional[str] = None


class PlantResponse(BaseModel):
    plant_id: int
    plant_name: str
    plant_type_id: int
    photo: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
