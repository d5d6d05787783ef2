"""
Care Recommendation Engine
==========================

Deterministic watering and fertilizer recommendations, weather adjustment,
care plan text parsing and a reversible apply/undo protocol for plant care
settings.

Usage:
    from careengine import PlantCareProfile, WateringCategory, recommend_watering

    profile = PlantCareProfile(diameter_inches=6, category=WateringCategory.TROPICAL)
    recommendation = recommend_watering(profile)
"""

from careengine.domain import (
    ApplyDraft,
    ApplyFlags,
    CareAdvice,
    CarePlanRecord,
    CarePlanValues,
    FertilizerRecommendation,
    PlantCareProfile,
    PlantCareState,
    TemperatureRange,
    UndoSnapshot,
    WateringRecommendation,
    WeatherAdjustment,
    adjust_for_weather,
    apply_draft,
    build_apply_draft,
    classify_plant,
    estimate_soil_volume_ml,
    estimate_watering_frequency_days,
    recommend_fertilizer,
    recommend_watering,
    undo,
)
from careengine.domain.exceptions import (
    CareEngineError,
    ConfigurationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from careengine.enums import (
    CareEnvironment,
    FertilizerType,
    IntervalUnit,
    LightLevel,
    PotMaterial,
    Season,
    WaterUnit,
    WateringCategory,
    WeatherCondition,
)
from careengine.utils.plan_text import (
    parse_humidity,
    parse_interval,
    parse_light_level,
    parse_temperature_range,
    parse_water_amount,
)

__version__ = "1.0.0"

__all__ = [
    # Calculators
    "classify_plant",
    "estimate_soil_volume_ml",
    "recommend_watering",
    "recommend_fertilizer",
    "estimate_watering_frequency_days",
    "adjust_for_weather",
    # Parsers
    "parse_interval",
    "parse_humidity",
    "parse_temperature_range",
    "parse_light_level",
    "parse_water_amount",
    # Apply / undo
    "build_apply_draft",
    "apply_draft",
    "undo",
    # Values
    "PlantCareProfile",
    "WateringRecommendation",
    "FertilizerRecommendation",
    "WeatherAdjustment",
    "TemperatureRange",
    "CareAdvice",
    "CarePlanRecord",
    "CarePlanValues",
    "PlantCareState",
    "ApplyFlags",
    "ApplyDraft",
    "UndoSnapshot",
    # Enums
    "WateringCategory",
    "Season",
    "PotMaterial",
    "LightLevel",
    "CareEnvironment",
    "FertilizerType",
    "WaterUnit",
    "IntervalUnit",
    "WeatherCondition",
    # Errors
    "CareEngineError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "ConfigurationError",
]
