"""
Watering Frequency Estimator
============================
Derives a single watering interval in days for schedule defaults.

This model is additive and independent of the multiplicative amount model
in ``care_recommendation``; the two answer different questions and their
tables are tuned separately.

    days = baseline[category]
           + volume_tier + material + light + season + environment

    result = clamp(round(days), 2, 28)
"""

import logging

from careengine.constants import FrequencyAdjustments
from careengine.domain.care_profile import PlantCareProfile
from careengine.domain.soil_volume import estimate_soil_volume_ml, round_half_up

logger = logging.getLogger(__name__)


def _volume_adjustment(volume_ml: float) -> int:
    if volume_ml > FrequencyAdjustments.LARGE_VOLUME_ML:
        return FrequencyAdjustments.LARGE_VOLUME_DAYS
    if volume_ml > FrequencyAdjustments.MEDIUM_VOLUME_ML:
        return FrequencyAdjustments.MEDIUM_VOLUME_DAYS
    if volume_ml < FrequencyAdjustments.SMALL_VOLUME_ML:
        return FrequencyAdjustments.SMALL_VOLUME_DAYS
    return 0


def estimate_watering_frequency_days(profile: PlantCareProfile) -> int:
    """
    Estimate how many days should pass between waterings.

    Args:
        profile: Plant attributes

    Returns:
        Interval in days, always within [2, 28]
    """
    days = float(FrequencyAdjustments.BASELINE_DAYS[profile.category])

    volume_ml = estimate_soil_volume_ml(profile.diameter_inches, profile.height_inches)
    days += _volume_adjustment(volume_ml)
    days += FrequencyAdjustments.MATERIAL.get(profile.material, 0)
    days += FrequencyAdjustments.LIGHT[profile.light_level]
    days += FrequencyAdjustments.SEASON[profile.season]
    days += FrequencyAdjustments.ENVIRONMENT[profile.environment]

    clamped = max(FrequencyAdjustments.MIN_DAYS, min(FrequencyAdjustments.MAX_DAYS, round_half_up(days)))
    logger.debug("Watering frequency for %s: %.1f days -> %d", profile.category, days, clamped)
    return clamped
