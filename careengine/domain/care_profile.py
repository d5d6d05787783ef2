"""
PlantCareProfile - Physical and environmental plant attributes
==============================================================

Immutable input to every recommendation call. Collaborators read the plant
record and build one of these; the engine never reaches back into storage.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from careengine.constants import LARGE_POT_DIAMETER_INCHES
from careengine.enums import (
    CareEnvironment,
    FeedingLevel,
    FertilizerType,
    LightLevel,
    PotMaterial,
    Season,
    WateringCategory,
)


@dataclass(frozen=True)
class PlantCareProfile:
    """Container, placement and category of a plant."""

    diameter_inches: float
    category: WateringCategory = WateringCategory.FOLIAGE
    height_inches: float | None = None
    material: PotMaterial = PotMaterial.UNKNOWN
    light_level: LightLevel = LightLevel.MEDIUM
    season: Season = Season.SPRING
    environment: CareEnvironment = CareEnvironment.INDOOR
    fertilizer_type: FertilizerType = FertilizerType.LIQUID
    feeding_level: FeedingLevel = FeedingLevel.NORMAL

    @property
    def is_large_pot(self) -> bool:
        return self.diameter_inches > LARGE_POT_DIAMETER_INCHES

    def with_light_level(self, light_level: LightLevel) -> "PlantCareProfile":
        return replace(self, light_level=light_level)

    def to_dict(self) -> dict[str, Any]:
        return {
            "diameter_inches": self.diameter_inches,
            "height_inches": self.height_inches,
            "category": self.category.value,
            "material": self.material.value,
            "light_level": self.light_level.value,
            "season": self.season.value,
            "environment": self.environment.value,
            "fertilizer_type": self.fertilizer_type.value,
            "feeding_level": self.feeding_level.value,
        }
