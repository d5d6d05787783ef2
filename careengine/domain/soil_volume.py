"""Soil volume estimation for round containers."""

from __future__ import annotations

import math

from careengine.constants import SoilVolume


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def derived_height_inches(diameter_inches: float) -> float:
    """Height assumed for a container whose height is unknown."""
    diameter = max(SoilVolume.MIN_DIMENSION_INCHES, float(diameter_inches))
    return float(round_half_up(SoilVolume.DERIVED_HEIGHT_RATIO * diameter))


def estimate_soil_volume_ml(diameter_inches: float, height_inches: float | None = None) -> float:
    """
    Estimate usable soil volume in ml using a cylinder approximation.

    volume_in³ = π × (diameter / 2)² × height, converted at 16.387 ml/in³.
    Diameter and height are floored at 1 inch so degenerate input still
    yields a positive volume.

    Args:
        diameter_inches: Container diameter
        height_inches: Container height, derived as round(0.75 × diameter) if None

    Returns:
        Volume in milliliters
    """
    diameter = max(SoilVolume.MIN_DIMENSION_INCHES, float(diameter_inches))
    if height_inches is None:
        height = derived_height_inches(diameter)
    else:
        height = float(height_inches)
    height = max(SoilVolume.MIN_DIMENSION_INCHES, height)

    radius = diameter / 2.0
    cubic_inches = math.pi * radius * radius * height
    return cubic_inches * SoilVolume.ML_PER_CUBIC_INCH
