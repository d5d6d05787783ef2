"""
Schemas Module
==============

This module provides Pydantic models for validating collaborator input
before it is turned into engine value objects.
"""

from careengine.schemas.care import (
    ApplySelectionRequest,
    CareAdviceRequest,
    PlantProfileRequest,
    WeatherConditionsRequest,
    build_profile,
)

__all__ = [
    "PlantProfileRequest",
    "CareAdviceRequest",
    "WeatherConditionsRequest",
    "ApplySelectionRequest",
    "build_profile",
]
