"""
Domain Package
==============
Immutable value objects and the pure calculators that operate on them.

Nothing in this package performs I/O; callers read plant state, pass it in
as values and persist whatever comes back.
"""

from .apply_draft import ApplyDraft, ApplyFlags, FieldChange, apply_draft, build_apply_draft
from .care_plan import (
    CareAdvice,
    CarePlanRecord,
    CarePlanValues,
    PlantCareState,
    TemperatureRange,
)
from .care_profile import PlantCareProfile
from .care_recommendation import (
    FertilizerRecommendation,
    WateringRecommendation,
    recommend_fertilizer,
    recommend_watering,
)
from .plant_classifier import classify_plant
from .soil_volume import estimate_soil_volume_ml
from .undo_snapshot import UndoSnapshot, capture_snapshot, undo
from .watering_frequency import estimate_watering_frequency_days
from .weather_adjustment import (
    DailyWeather,
    WeatherAdjustment,
    WeeklyCareWeather,
    adjust_for_weather,
    is_good_repotting_weather,
    summarize_weekly_weather,
)

__all__ = [
    # Plant input
    "PlantCareProfile",
    "classify_plant",
    "estimate_soil_volume_ml",
    # Recommendations
    "WateringRecommendation",
    "FertilizerRecommendation",
    "recommend_watering",
    "recommend_fertilizer",
    "estimate_watering_frequency_days",
    # Weather
    "WeatherAdjustment",
    "DailyWeather",
    "WeeklyCareWeather",
    "adjust_for_weather",
    "is_good_repotting_weather",
    "summarize_weekly_weather",
    # Care plan values
    "TemperatureRange",
    "CareAdvice",
    "CarePlanRecord",
    "CarePlanValues",
    "PlantCareState",
    # Apply / undo
    "ApplyFlags",
    "ApplyDraft",
    "FieldChange",
    "UndoSnapshot",
    "build_apply_draft",
    "apply_draft",
    "capture_snapshot",
    "undo",
]
