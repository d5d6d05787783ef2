"""
Undo Snapshot
=============
Immutable pre-apply copy of every plant field the apply step may change.

Undo restores the copied fields verbatim. A care plan the apply step
created is removed again; a care plan that already existed gets its prior
fields back.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

from careengine.domain.care_plan import CarePlanRecord, PlantCareState, TemperatureRange
from careengine.domain.exceptions import ValidationError
from careengine.enums import LightLevel, WaterUnit
from careengine.utils.time import utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UndoSnapshot:
    """State of one plant captured right before an apply."""

    plant_id: int | str
    watering_interval_days: int
    fertilizing_interval_days: int
    repot_interval_months: int | None
    light_level: LightLevel
    humidity_percent: int
    temperature_range: TemperatureRange
    water_amount: float
    water_unit: WaterUnit
    had_care_plan: bool
    care_plan: CarePlanRecord | None
    captured_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "plant_id": self.plant_id,
            "watering_interval_days": self.watering_interval_days,
            "fertilizing_interval_days": self.fertilizing_interval_days,
            "repot_interval_months": self.repot_interval_months,
            "light_level": self.light_level.value,
            "humidity_percent": self.humidity_percent,
            "temperature_range": list(self.temperature_range),
            "water_amount": self.water_amount,
            "water_unit": self.water_unit.value,
            "had_care_plan": self.had_care_plan,
            "care_plan": self.care_plan.to_dict() if self.care_plan else None,
            "captured_at": self.captured_at.isoformat(),
        }


def capture_snapshot(state: PlantCareState, now: datetime | None = None) -> UndoSnapshot:
    return UndoSnapshot(
        plant_id=state.plant_id,
        watering_interval_days=state.watering_interval_days,
        fertilizing_interval_days=state.fertilizing_interval_days,
        repot_interval_months=state.repot_interval_months,
        light_level=state.light_level,
        humidity_percent=state.humidity_percent,
        temperature_range=TemperatureRange(*state.temperature_range),
        water_amount=state.water_amount,
        water_unit=state.water_unit,
        had_care_plan=state.has_care_plan,
        care_plan=state.care_plan,
        captured_at=now or utc_now(),
    )


def undo(state: PlantCareState, snapshot: UndoSnapshot) -> PlantCareState:
    """
    Roll a plant back to its pre-apply values.

    Args:
        state: Current (post-apply) plant state
        snapshot: Snapshot returned by ``apply_draft`` for the same plant

    Returns:
        Restored PlantCareState

    Raises:
        ValidationError: If the snapshot belongs to another plant
    """
    if snapshot.plant_id != state.plant_id:
        raise ValidationError(
            "Undo snapshot belongs to a different plant",
            detail={"plant_id": state.plant_id, "snapshot_plant_id": snapshot.plant_id},
        )

    restored = replace(
        state,
        profile=state.profile.with_light_level(snapshot.light_level),
        watering_interval_days=snapshot.watering_interval_days,
        fertilizing_interval_days=snapshot.fertilizing_interval_days,
        repot_interval_months=snapshot.repot_interval_months,
        humidity_percent=snapshot.humidity_percent,
        temperature_range=snapshot.temperature_range,
        water_amount=snapshot.water_amount,
        water_unit=snapshot.water_unit,
        care_plan=snapshot.care_plan if snapshot.had_care_plan else None,
    )
    logger.debug(
        "Restored plant %s (care plan %s)",
        state.plant_id,
        "restored" if snapshot.had_care_plan else "removed",
    )
    return restored
