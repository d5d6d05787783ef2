"""
Care Schemas
============

Input schemas for the collaborator seam: plant attributes, advice text,
current weather and the user's apply selection. Each model converts to the
immutable domain value the engine consumes.
"""

from collections.abc import Mapping
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from careengine.config import EngineConfig, load_config
from careengine.domain.apply_draft import ApplyFlags
from careengine.domain.care_plan import CareAdvice
from careengine.domain.care_profile import PlantCareProfile
from careengine.domain.plant_classifier import classify_plant
from careengine.enums import (
    CareEnvironment,
    FeedingLevel,
    FertilizerType,
    LightLevel,
    PotMaterial,
    Season,
    WateringCategory,
    WeatherCondition,
)


class PlantProfileRequest(BaseModel):
    """Plant attributes as read from a plant record or form."""

    diameter_inches: float = Field(..., description="Container diameter in inches")
    height_inches: Optional[float] = Field(default=None, description="Container height in inches")
    category: Optional[WateringCategory] = Field(
        default=None,
        description="Watering category; classified from the names when omitted",
    )
    common_names: List[str] = Field(default_factory=list, description="Common names")
    family: str = Field(default="", description="Botanical family")
    scientific_name: str = Field(default="", description="Scientific name")
    material: PotMaterial = Field(default=PotMaterial.UNKNOWN, description="Container material")
    light_level: LightLevel = Field(default=LightLevel.MEDIUM, description="Light exposure")
    season: Optional[Season] = Field(default=None, description="Season; current season when omitted")
    environment: Optional[CareEnvironment] = Field(default=None, description="Placement")
    fertilizer_type: Optional[FertilizerType] = Field(default=None, description="Fertilizer form")
    feeding_level: FeedingLevel = Field(default=FeedingLevel.NORMAL, description="Feeding level")

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, v):
        """Normalize category string to enum; blank means classify."""
        if isinstance(v, str):
            text = v.strip().lower()
            return WateringCategory(text) if text else None
        return v

    @field_validator("material", mode="before")
    @classmethod
    def normalize_material(cls, v):
        if v is None or isinstance(v, str):
            return PotMaterial.from_text(v)
        return v

    @field_validator("light_level", mode="before")
    @classmethod
    def normalize_light_level(cls, v):
        if v is None or isinstance(v, str):
            return LightLevel.from_text(v)
        return v

    @field_validator("season", mode="before")
    @classmethod
    def normalize_season(cls, v):
        if isinstance(v, str):
            return Season.from_text(v) if v.strip() else None
        return v

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v):
        if isinstance(v, str):
            return CareEnvironment.from_text(v) if v.strip() else None
        return v

    @field_validator("fertilizer_type", mode="before")
    @classmethod
    def normalize_fertilizer_type(cls, v):
        if isinstance(v, str):
            return FertilizerType.from_text(v) if v.strip() else None
        return v

    @field_validator("feeding_level", mode="before")
    @classmethod
    def normalize_feeding_level(cls, v):
        if isinstance(v, str):
            return FeedingLevel(v.strip().lower() or FeedingLevel.NORMAL.value)
        return v

    def to_profile(
        self,
        *,
        default_environment: CareEnvironment = CareEnvironment.INDOOR,
        default_fertilizer: FertilizerType = FertilizerType.LIQUID,
        hemisphere: str = "northern",
    ) -> PlantCareProfile:
        """Build the engine profile, filling gaps from the given defaults."""
        category = self.category or classify_plant(
            self.common_names,
            family=self.family,
            scientific_name=self.scientific_name,
        )
        return PlantCareProfile(
            diameter_inches=self.diameter_inches,
            height_inches=self.height_inches,
            category=category,
            material=self.material,
            light_level=self.light_level,
            season=self.season or Season.current(hemisphere=hemisphere),
            environment=self.environment or default_environment,
            fertilizer_type=self.fertilizer_type or default_fertilizer,
            feeding_level=self.feeding_level,
        )


class CareAdviceRequest(BaseModel):
    """Free-form advice text per care category from the advice generator."""

    watering_frequency: Optional[str] = Field(default=None, description="e.g. 'every 5-7 days'")
    fertilizing_frequency: Optional[str] = Field(default=None, description="e.g. 'monthly in spring'")
    repotting: Optional[str] = Field(default=None, description="e.g. 'every 1-2 years'")
    light_intensity: Optional[str] = Field(default=None, description="e.g. 'bright indirect'")
    humidity: Optional[str] = Field(default=None, description="e.g. '40-60%' or 'high humidity'")
    temperature: Optional[str] = Field(default=None, description="e.g. '65-75°F' or '18-24°C'")
    watering_amount: Optional[str] = Field(default=None, description="e.g. '250-300 ml'")
    seasonal_notes: Optional[str] = Field(default=None, description="Seasonal care notes")

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Treat empty strings as missing advice."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def to_domain(self) -> CareAdvice:
        return CareAdvice(**self.model_dump())


class WeatherConditionsRequest(BaseModel):
    """Current weather resolved by the weather collaborator."""

    temperature_f: float = Field(..., description="Ambient temperature in °F")
    humidity: float = Field(..., ge=0, le=1, description="Relative humidity as a fraction (0-1)")
    condition: WeatherCondition = Field(default=WeatherCondition.OTHER, description="Coarse condition")

    @field_validator("condition", mode="before")
    @classmethod
    def normalize_condition(cls, v):
        """Normalize condition string to enum; unknown conditions become 'other'."""
        if isinstance(v, str):
            text = v.strip().lower().replace(" ", "_")
            try:
                return WeatherCondition(text)
            except ValueError:
                return WeatherCondition.OTHER
        return v


class ApplySelectionRequest(BaseModel):
    """Which draft categories the user chose to apply."""

    schedule: bool = Field(default=True, description="Watering/fertilizing/repotting intervals")
    light: bool = Field(default=True, description="Light level")
    humidity: bool = Field(default=True, description="Humidity preference")
    temperature: bool = Field(default=True, description="Temperature range")
    water_amount: bool = Field(default=True, description="Water amount and unit")

    def to_flags(self) -> ApplyFlags:
        return ApplyFlags(**self.model_dump())


def build_profile(data: Mapping[str, Any], config: Optional[EngineConfig] = None) -> PlantCareProfile:
    """
    Validate raw plant attributes and build a PlantCareProfile.

    Args:
        data: Plant attributes, e.g. from a plant record
        config: Supplies the default placement, fertilizer and hemisphere

    Returns:
        PlantCareProfile
    """
    config = config or load_config()
    request = PlantProfileRequest.model_validate(dict(data))
    return request.to_profile(
        default_environment=config.care_environment,
        default_fertilizer=config.fertilizer_type,
        hemisphere=config.hemisphere,
    )
