"""
Weather Adjustment
==================
Rescales a baseline watering recommendation using ambient conditions that the
weather collaborator has already resolved. When no weather is available the
caller simply keeps the unadjusted recommendation.

Multiplier:
    1.0
    + 0.3 if temperature > 80°F,  - 0.2 if temperature < 65°F
    + 0.2 if humidity < 0.3,      - 0.2 if humidity > 0.7
    (+ 0.1 bright/direct plant, - 0.1 low-light plant, when a light level is given)
    clamped to [0.5, 2.0]
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import Any

from careengine.constants import ADVISORY_SEPARATOR, WeatherThresholds, WeeklyWeatherThresholds
from careengine.domain.care_recommendation import WateringRecommendation
from careengine.domain.soil_volume import round_half_up
from careengine.enums import LightAdjustment, LightLevel, WeatherCondition

logger = logging.getLogger(__name__)

_EVERY_RE = re.compile(r"\bevery\b", re.IGNORECASE)


@dataclass(frozen=True)
class WeatherAdjustment:
    """Intermediate weather factors applied to a recommendation."""

    watering_multiplier: float = 1.0
    light_adjustment: LightAdjustment = LightAdjustment.NORMAL
    care_message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "watering_multiplier": round(self.watering_multiplier, 2),
            "light_adjustment": self.light_adjustment.value,
            "light_message": self.light_adjustment.message,
            "care_message": self.care_message,
        }


@dataclass(frozen=True)
class DailyWeather:
    """One forecast day."""

    high_temperature_f: float
    precipitation_inches: float = 0.0
    condition: WeatherCondition = WeatherCondition.OTHER
    humidity: float | None = None


@dataclass(frozen=True)
class WeeklyCareWeather:
    """Care-oriented summary of the coming week."""

    average_temperature_f: float
    total_precipitation_inches: float
    average_humidity: float
    sunny_days: int
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "average_temperature_f": round(self.average_temperature_f, 1),
            "total_precipitation_inches": round(self.total_precipitation_inches, 2),
            "average_humidity": round(self.average_humidity, 2),
            "sunny_days": self.sunny_days,
            "recommendations": list(self.recommendations),
        }


def calculate_watering_multiplier(
    temperature_f: float,
    humidity: float,
    light_level: LightLevel | None = None,
) -> float:
    """Weather multiplier for the watering amount, clamped to [0.5, 2.0]."""
    multiplier = 1.0

    if temperature_f > WeatherThresholds.HOT_TEMP_F:
        multiplier += WeatherThresholds.HOT_MULTIPLIER_DELTA
    elif temperature_f < WeatherThresholds.COOL_TEMP_F:
        multiplier += WeatherThresholds.COOL_MULTIPLIER_DELTA

    if humidity < WeatherThresholds.DRY_HUMIDITY:
        multiplier += WeatherThresholds.DRY_MULTIPLIER_DELTA
    elif humidity > WeatherThresholds.HUMID_HUMIDITY:
        multiplier += WeatherThresholds.HUMID_MULTIPLIER_DELTA

    if light_level in (LightLevel.BRIGHT, LightLevel.DIRECT):
        multiplier += WeatherThresholds.BRIGHT_PLANT_DELTA
    elif light_level is LightLevel.LOW:
        multiplier += WeatherThresholds.LOW_LIGHT_PLANT_DELTA

    return max(WeatherThresholds.MIN_MULTIPLIER, min(WeatherThresholds.MAX_MULTIPLIER, multiplier))


def light_adjustment_for(condition: WeatherCondition) -> LightAdjustment:
    if condition.is_clear:
        return LightAdjustment.INCREASE_INDOOR_LIGHT
    if condition.is_cloudy:
        return LightAdjustment.PROVIDE_SUPPLEMENTAL_LIGHT
    if condition.is_precipitation:
        return LightAdjustment.MAXIMIZE_AVAILABLE_LIGHT
    return LightAdjustment.NORMAL


def build_care_message(temperature_f: float, condition: WeatherCondition) -> str:
    """Advisory text from the temperature band and the condition band."""
    messages = []

    if temperature_f > WeatherThresholds.HOT_ADVISORY_F:
        messages.append("Hot weather - consider extra watering and humidity")
    elif temperature_f < WeatherThresholds.COOL_ADVISORY_F:
        messages.append("Cool weather - reduce watering frequency")

    if condition.is_clear:
        messages.append("Bright conditions - great for photosynthesis!")
    elif condition.is_cloudy:
        messages.append("Limited light - move plants closer to windows")
    elif condition is WeatherCondition.RAIN:
        messages.append("Rainy day - good time for indoor plant care")

    return ADVISORY_SEPARATOR.join(message for message in messages if message)


def adjust_frequency_text(frequency: str, multiplier: float) -> str:
    """Rewrite "every" in a frequency description for strong multipliers."""
    if multiplier > WeatherThresholds.MORE_FREQUENT_ABOVE:
        prefix = "more frequently than"
    elif multiplier < WeatherThresholds.LESS_FREQUENT_BELOW:
        prefix = "less frequently than"
    else:
        return frequency

    def _substitute(match: re.Match) -> str:
        word = match.group(0)
        phrase = f"{prefix} every"
        return phrase[0].upper() + phrase[1:] if word[0].isupper() else phrase

    return _EVERY_RE.sub(_substitute, frequency)


def get_weather_adjustment(
    temperature_f: float,
    humidity: float,
    condition: WeatherCondition,
    light_level: LightLevel | None = None,
) -> WeatherAdjustment:
    return WeatherAdjustment(
        watering_multiplier=calculate_watering_multiplier(temperature_f, humidity, light_level),
        light_adjustment=light_adjustment_for(condition),
        care_message=build_care_message(temperature_f, condition),
    )


def adjust_for_weather(
    recommendation: WateringRecommendation,
    temperature_f: float,
    humidity: float,
    condition: WeatherCondition,
    light_level: LightLevel | None = None,
) -> tuple[WateringRecommendation, WeatherAdjustment]:
    """
    Weather-adjust a baseline watering recommendation.

    Args:
        recommendation: Baseline from ``recommend_watering``
        temperature_f: Ambient temperature in °F
        humidity: Relative humidity as a fraction (0-1)
        condition: Coarse weather condition
        light_level: Plant light level, nudges the multiplier when given

    Returns:
        Tuple of (adjusted recommendation, adjustment applied)
    """
    adjustment = get_weather_adjustment(temperature_f, humidity, condition, light_level)
    multiplier = adjustment.watering_multiplier

    technique = recommendation.technique
    if multiplier > WeatherThresholds.MORE_THOROUGH_ABOVE:
        technique += " Water more thoroughly due to hot/dry conditions."
    elif multiplier < WeatherThresholds.LESS_WATER_BELOW:
        technique += " Water less due to cool/humid conditions."

    seasonal_note = recommendation.seasonal_note
    if adjustment.care_message:
        seasonal_note = ADVISORY_SEPARATOR.join(
            part for part in (adjustment.care_message, seasonal_note) if part
        )

    adjusted = replace(
        recommendation,
        amount=max(0, round_half_up(recommendation.amount * multiplier)),
        technique=technique,
        frequency=adjust_frequency_text(recommendation.frequency, multiplier),
        seasonal_note=seasonal_note,
        light_adjustment=adjustment.light_adjustment.message,
    )
    logger.debug(
        "Weather multiplier %.2f (%.0f°F, %.0f%% RH, %s): %d -> %d %s",
        multiplier,
        temperature_f,
        humidity * 100,
        condition,
        recommendation.amount,
        adjusted.amount,
        adjusted.unit,
    )
    return adjusted, adjustment


def is_good_repotting_weather(
    temperature_f: float | None = None,
    humidity: float | None = None,
    condition: WeatherCondition | None = None,
) -> bool:
    """Moderate, dry and precipitation-free; no weather at all counts as good."""
    if temperature_f is None or humidity is None or condition is None:
        return True
    return (
        WeatherThresholds.REPOT_MIN_F <= temperature_f <= WeatherThresholds.REPOT_MAX_F
        and humidity < WeatherThresholds.REPOT_MAX_HUMIDITY
        and not condition.is_precipitation
    )


def summarize_weekly_weather(
    forecast: Sequence[DailyWeather],
    current_humidity: float | None = None,
) -> WeeklyCareWeather | None:
    """
    Summarize up to seven forecast days for care planning.

    Args:
        forecast: Daily forecast, earliest first
        current_humidity: Used when the forecast carries no humidity

    Returns:
        WeeklyCareWeather, or None for an empty forecast
    """
    days = list(forecast)[: WeeklyWeatherThresholds.FORECAST_DAYS]
    if not days:
        return None

    average_temperature = sum(day.high_temperature_f for day in days) / len(days)
    total_precipitation = sum(max(0.0, day.precipitation_inches) for day in days)
    humidities = [day.humidity for day in days if day.humidity is not None]
    if humidities:
        average_humidity = sum(humidities) / len(humidities)
    elif current_humidity is not None:
        average_humidity = current_humidity
    else:
        average_humidity = WeeklyWeatherThresholds.DEFAULT_HUMIDITY
    sunny_days = sum(1 for day in days if day.condition.is_clear)

    recommendations = []
    if average_temperature > WeeklyWeatherThresholds.HOT_WEEK_F:
        recommendations.append("Hot week ahead - increase watering frequency")
    elif average_temperature < WeeklyWeatherThresholds.COOL_WEEK_F:
        recommendations.append("Cool week - reduce watering and fertilizing")

    if total_precipitation > WeeklyWeatherThresholds.RAINY_WEEK_INCHES:
        recommendations.append("Rainy week - watch for overwatering")
    elif total_precipitation < WeeklyWeatherThresholds.DRY_WEEK_INCHES:
        recommendations.append("Dry week - pay extra attention to soil moisture")

    if sunny_days >= WeeklyWeatherThresholds.SUNNY_WEEK_DAYS:
        recommendations.append("Lots of sun this week - great growing conditions!")
    elif sunny_days <= WeeklyWeatherThresholds.DULL_WEEK_DAYS:
        recommendations.append("Limited sun - consider grow lights for light-loving plants")

    return WeeklyCareWeather(
        average_temperature_f=average_temperature,
        total_precipitation_inches=total_precipitation,
        average_humidity=average_humidity,
        sunny_days=sunny_days,
        recommendations=recommendations,
    )
