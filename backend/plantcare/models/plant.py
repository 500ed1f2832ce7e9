"""
Plant record owned by a user.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

DEFAULT_PLANT_PHOTO = "default_plant.jpg"


@dataclass
class Plant:
    plant_id: int
    plant_name: str
    plant_type_id: int
    photo: str = DEFAULT_PLANT_PHOTO
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = None

    def __repr__(self) -> str:
        return f"<Plant(id={self.plant_id}, name={self.plant_name}, type={self.plant_type_id})>"
