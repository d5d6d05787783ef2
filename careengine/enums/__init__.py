"""
Enums Module
============

This module provides enumeration types for the care recommendation engine.
Enums ensure type safety and consistency across the codebase.
"""

from careengine.enums.care import (
    ApplySessionState,
    CareEnvironment,
    CarePlanSource,
    DraftCategory,
    FeedingLevel,
    FertilizerType,
    IntervalUnit,
    LightAdjustment,
    LightLevel,
    PotMaterial,
    Season,
    WaterUnit,
    WateringCategory,
    WeatherCondition,
)

__all__ = [
    # Plant attributes
    "WateringCategory",
    "Season",
    "PotMaterial",
    "LightLevel",
    "CareEnvironment",
    # Fertilizer
    "FertilizerType",
    "FeedingLevel",
    # Units
    "WaterUnit",
    "IntervalUnit",
    # Weather
    "WeatherCondition",
    "LightAdjustment",
    # Care plan / apply protocol
    "CarePlanSource",
    "DraftCategory",
    "ApplySessionState",
]
