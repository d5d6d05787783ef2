"""
Care Plan Values - Structured, diffable care settings
=====================================================

``CarePlanValues`` is produced both from a plant's stored state and from
parsed advice text, so the two can be compared field by field.

``PlantCareState`` is the slice of a plant record the apply step may
change; ``CarePlanRecord`` is the optional advice-derived plan attached to it.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, NamedTuple

from careengine.constants import CarePlanBounds, CareStateDefaults
from careengine.domain.care_profile import PlantCareProfile
from careengine.domain.care_recommendation import recommend_watering
from careengine.enums import CarePlanSource, LightLevel, WaterUnit


class TemperatureRange(NamedTuple):
    """Inclusive temperature range in °F."""

    min_f: int
    max_f: int

    def describe(self) -> str:
        return f"{self.min_f}-{self.max_f}°F"


DEFAULT_TEMPERATURE_RANGE = TemperatureRange(
    CareStateDefaults.TEMPERATURE_MIN_F,
    CareStateDefaults.TEMPERATURE_MAX_F,
)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def format_amount(amount: float) -> str:
    """250.0 -> "250", 1.50 -> "1.5"."""
    return f"{amount:.2f}".rstrip("0").rstrip(".")


@dataclass(frozen=True)
class CareAdvice:
    """Free-form advice strings, one per care category; any may be missing."""

    watering_frequency: str | None = None
    fertilizing_frequency: str | None = None
    repotting: str | None = None
    light_intensity: str | None = None
    humidity: str | None = None
    temperature: str | None = None
    watering_amount: str | None = None
    seasonal_notes: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "watering_frequency": self.watering_frequency,
            "fertilizing_frequency": self.fertilizing_frequency,
            "repotting": self.repotting,
            "light_intensity": self.light_intensity,
            "humidity": self.humidity,
            "temperature": self.temperature,
            "watering_amount": self.watering_amount,
            "seasonal_notes": self.seasonal_notes,
        }


@dataclass(frozen=True)
class CarePlanRecord:
    """Care plan attached to a plant."""

    source: CarePlanSource
    watering_interval: int
    fertilizing_interval: int
    light_requirements: str
    humidity_requirements: str
    temperature_requirements: str
    seasonal_notes: str
    created_at: datetime
    last_updated: datetime
    ai_explanation: str = ""
    user_approved: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source.value,
            "watering_interval": self.watering_interval,
            "fertilizing_interval": self.fertilizing_interval,
            "light_requirements": self.light_requirements,
            "humidity_requirements": self.humidity_requirements,
            "temperature_requirements": self.temperature_requirements,
            "seasonal_notes": self.seasonal_notes,
            "ai_explanation": self.ai_explanation,
            "created_at": self.created_at.isoformat(),
            "last_updated": self.last_updated.isoformat(),
            "user_approved": self.user_approved,
        }


@dataclass(frozen=True)
class PlantCareState:
    """
    Stored plant values the apply step is allowed to change.

    The light level lives on ``profile`` because the recommendation engine
    reads it from there.
    """

    plant_id: int | str
    profile: PlantCareProfile
    watering_interval_days: int = CareStateDefaults.WATERING_INTERVAL_DAYS
    fertilizing_interval_days: int = CareStateDefaults.FERTILIZING_INTERVAL_DAYS
    repot_interval_months: int | None = CarePlanBounds.DEFAULT_REPOT_MONTHS
    humidity_percent: int = CareStateDefaults.HUMIDITY_PERCENT
    temperature_range: TemperatureRange = DEFAULT_TEMPERATURE_RANGE
    water_amount: float = CareStateDefaults.WATER_AMOUNT
    water_unit: WaterUnit = WaterUnit.MILLILITERS
    care_plan: CarePlanRecord | None = None

    @property
    def light_level(self) -> LightLevel:
        return self.profile.light_level

    @property
    def has_care_plan(self) -> bool:
        return self.care_plan is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "plant_id": self.plant_id,
            "profile": self.profile.to_dict(),
            "watering_interval_days": self.watering_interval_days,
            "fertilizing_interval_days": self.fertilizing_interval_days,
            "repot_interval_months": self.repot_interval_months,
            "humidity_percent": self.humidity_percent,
            "temperature_range": list(self.temperature_range),
            "water_amount": self.water_amount,
            "water_unit": self.water_unit.value,
            "care_plan": self.care_plan.to_dict() if self.care_plan else None,
        }


@dataclass(frozen=True)
class CarePlanValues:
    """One side (current or proposed) of an apply draft."""

    watering_interval_days: int
    fertilizing_interval_days: int
    repot_interval_months: int
    light_level: LightLevel
    humidity_percent: int
    temperature_range: TemperatureRange
    water_amount: float
    water_unit: WaterUnit

    @classmethod
    def from_state(cls, state: PlantCareState) -> "CarePlanValues":
        """
        Current values of a plant.

        The water amount is re-derived from the plant's profile with the
        recommendation engine rather than read from storage. Humidity and
        temperature are held to the same bounds the advice parsers use.
        """
        recommendation = recommend_watering(state.profile)
        low, high = (
            _clamp(int(value), CarePlanBounds.TEMPERATURE_MIN_F, CarePlanBounds.TEMPERATURE_MAX_F)
            for value in state.temperature_range
        )
        return cls(
            watering_interval_days=state.watering_interval_days,
            fertilizing_interval_days=state.fertilizing_interval_days,
            repot_interval_months=state.repot_interval_months or CarePlanBounds.DEFAULT_REPOT_MONTHS,
            light_level=state.light_level,
            humidity_percent=_clamp(
                int(state.humidity_percent), CarePlanBounds.HUMIDITY_MIN, CarePlanBounds.HUMIDITY_MAX
            ),
            temperature_range=TemperatureRange(min(low, high), max(low, high)),
            water_amount=float(recommendation.amount),
            water_unit=WaterUnit.from_text(recommendation.unit),
        )

    def to_advice(self, seasonal_notes: str | None = None) -> CareAdvice:
        """Render the values as advice phrases the plan text parsers read back unchanged."""
        return CareAdvice(
            watering_frequency=f"Every {self.watering_interval_days} days",
            fertilizing_frequency=f"Every {self.fertilizing_interval_days} days",
            repotting=f"Every {self.repot_interval_months} months",
            light_intensity=self.light_level.label,
            humidity=f"{self.humidity_percent}%",
            temperature=self.temperature_range.describe(),
            watering_amount=f"{format_amount(self.water_amount)} {self.water_unit.value}",
            seasonal_notes=seasonal_notes,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "watering_interval_days": self.watering_interval_days,
            "fertilizing_interval_days": self.fertilizing_interval_days,
            "repot_interval_months": self.repot_interval_months,
            "light_level": self.light_level.value,
            "humidity_percent": self.humidity_percent,
            "temperature_range": list(self.temperature_range),
            "water_amount": self.water_amount,
            "water_unit": self.water_unit.value,
        }
