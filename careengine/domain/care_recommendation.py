"""
Care Recommendation Engine
==========================
Computes watering and fertilizer recommendations from a PlantCareProfile.

Water Amount Formula:
    volume_ml = estimate_soil_volume_ml(diameter, height)
    base_ml = volume_ml * BASE_FRACTION[category]

    amount = base_ml * category_factor * season_factor * material_factor
             * light_factor * environment_factor

    The final amount is truncated to an integer.

Fertilizer Formula:
    amount = amount_per_inch[form] * diameter * category_factor * feeding_factor

Technique, frequency, seasonal and soil-check text come from fixed tables in
``careengine.constants``; only the frequency range is widened for large pots.

Usage:
    recommendation = recommend_watering(profile)
    fertilizer = recommend_fertilizer(profile)
"""

import logging
from dataclasses import dataclass
from typing import Any

from careengine.constants import (
    FEEDING_LEVEL_MULTIPLIERS,
    FERTILIZER_CATEGORY_MULTIPLIERS,
    FERTILIZER_FREQUENCIES,
    FERTILIZER_SEASONAL_SCHEDULE,
    LARGE_POT_FREQUENCY_WIDENING_DAYS,
    SEASONAL_NOTES,
    SOIL_CHECK_GUIDANCE,
    WATERING_FREQUENCY_RANGES,
    WATERING_TECHNIQUES,
    FertilizerFormConfig,
    WateringFactors,
)
from careengine.domain.care_profile import PlantCareProfile
from careengine.domain.soil_volume import estimate_soil_volume_ml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WateringRecommendation:
    """Result of a watering calculation."""

    amount: int
    unit: str
    technique: str
    frequency: str
    seasonal_note: str
    soil_check: str
    light_adjustment: str | None = None
    reasoning: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "amount": self.amount,
            "unit": self.unit,
            "technique": self.technique,
            "frequency": self.frequency,
            "seasonal_note": self.seasonal_note,
            "soil_check": self.soil_check,
            "light_adjustment": self.light_adjustment,
            "reasoning": self.reasoning,
        }


@dataclass(frozen=True)
class FertilizerRecommendation:
    """Result of a fertilizer calculation."""

    amount: float
    unit: str
    dilution: str
    frequency: str
    seasonal_schedule: str
    instructions: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "amount": round(self.amount, 2),
            "unit": self.unit,
            "dilution": self.dilution,
            "frequency": self.frequency,
            "seasonal_schedule": self.seasonal_schedule,
            "instructions": self.instructions,
        }


def compute_water_amount(profile: PlantCareProfile) -> tuple[float, str]:
    """
    Compute the unrounded water amount in ml.

    Args:
        profile: Plant attributes

    Returns:
        Tuple of (amount_ml, reasoning_string)
    """
    factors = []

    volume_ml = estimate_soil_volume_ml(profile.diameter_inches, profile.height_inches)
    base_fraction = WateringFactors.BASE_FRACTION[profile.category]
    amount = volume_ml * base_fraction
    factors.append(f"volume={volume_ml:.0f}ml")
    factors.append(f"base_fraction={base_fraction:.2f} ({profile.category})")

    category_factor = WateringFactors.CATEGORY[profile.category]
    amount *= category_factor
    factors.append(f"category_factor={category_factor:.2f}")

    season_factor = WateringFactors.SEASON[profile.season]
    amount *= season_factor
    factors.append(f"season_factor={season_factor:.2f} ({profile.season})")

    material_factor = WateringFactors.MATERIAL.get(profile.material, 1.0)
    amount *= material_factor
    factors.append(f"material_factor={material_factor:.2f} ({profile.material})")

    light_factor = WateringFactors.LIGHT[profile.light_level]
    amount *= light_factor
    factors.append(f"light_factor={light_factor:.2f} ({profile.light_level})")

    environment_factor = WateringFactors.ENVIRONMENT[profile.environment]
    amount *= environment_factor
    factors.append(f"environment_factor={environment_factor:.2f} ({profile.environment})")

    amount = max(0.0, amount)
    reasoning = " × ".join(factors) + f" = {amount:.1f}ml"
    return amount, reasoning


def watering_frequency_text(profile: PlantCareProfile) -> str:
    """Descriptive watering interval, e.g. "Every 5-7 days"."""
    low, high = WATERING_FREQUENCY_RANGES[profile.category]
    # Larger pots dry out slower
    if profile.is_large_pot:
        low += LARGE_POT_FREQUENCY_WIDENING_DAYS
        high += LARGE_POT_FREQUENCY_WIDENING_DAYS
    return f"Every {low}-{high} days"


def recommend_watering(profile: PlantCareProfile) -> WateringRecommendation:
    """
    Full watering recommendation for a plant.

    Args:
        profile: Plant attributes

    Returns:
        WateringRecommendation with a non-negative integer amount in ml
    """
    amount, reasoning = compute_water_amount(profile)
    logger.debug("Watering amount: %s", reasoning)

    return WateringRecommendation(
        amount=int(amount),
        unit=WateringFactors.UNIT,
        technique=WATERING_TECHNIQUES[profile.category],
        frequency=watering_frequency_text(profile),
        seasonal_note=SEASONAL_NOTES[profile.season],
        soil_check=SOIL_CHECK_GUIDANCE[profile.category],
        reasoning=reasoning,
    )


def recommend_fertilizer(profile: PlantCareProfile) -> FertilizerRecommendation:
    """
    Fertilizer dose and schedule for a plant.

    Args:
        profile: Plant attributes; ``fertilizer_type`` and ``feeding_level``
                 select the form and dose scaling

    Returns:
        FertilizerRecommendation
    """
    form = FertilizerFormConfig.get(profile.fertilizer_type)
    diameter = max(0.0, float(profile.diameter_inches))

    amount = form.amount_per_inch * diameter
    amount *= FERTILIZER_CATEGORY_MULTIPLIERS[profile.category]
    amount *= FEEDING_LEVEL_MULTIPLIERS[profile.feeding_level]

    return FertilizerRecommendation(
        amount=amount,
        unit=form.unit,
        dilution=form.dilution_ratio,
        frequency=FERTILIZER_FREQUENCIES[profile.category],
        seasonal_schedule=FERTILIZER_SEASONAL_SCHEDULE,
        instructions=form.instructions,
    )
