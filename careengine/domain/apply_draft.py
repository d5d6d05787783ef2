"""
Apply Draft
===========
Builds a reviewable current-vs-proposed diff from advice text and applies
the selected categories onto a plant's state.

Flow:
    draft = build_apply_draft(state, advice)      # all five flags on
    new_state, snapshot = apply_draft(state, draft, flags)
    restored = undo(new_state, snapshot)

Proposed values come from the plan text parsers; any field whose text is
missing or unparsable keeps the current value. Applying writes only the
fields of the selected categories whose proposed value differs from the
current one; everything else is left exactly as it was. The full new
state is computed before anything is returned, so a caller persists it in
one write.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, TypeVar

from careengine.domain.care_plan import (
    CareAdvice,
    CarePlanRecord,
    CarePlanValues,
    PlantCareState,
)
from careengine.domain.exceptions import ValidationError
from careengine.domain.undo_snapshot import UndoSnapshot, capture_snapshot
from careengine.enums import CarePlanSource, DraftCategory, IntervalUnit
from careengine.utils import plan_text
from careengine.utils.time import ensure_utc, utc_now

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Fields owned by each category, in display order
CATEGORY_FIELDS: dict[DraftCategory, tuple[str, ...]] = {
    DraftCategory.SCHEDULE: (
        "watering_interval_days",
        "fertilizing_interval_days",
        "repot_interval_months",
    ),
    DraftCategory.LIGHT: ("light_level",),
    DraftCategory.HUMIDITY: ("humidity_percent",),
    DraftCategory.TEMPERATURE: ("temperature_range",),
    DraftCategory.WATER_AMOUNT: ("water_amount", "water_unit"),
}

# Categories written as a whole when any of their fields changes
COUPLED_CATEGORIES = frozenset({DraftCategory.WATER_AMOUNT})


@dataclass(frozen=True)
class ApplyFlags:
    """Independent inclusion flags, one per draft category."""

    schedule: bool = True
    light: bool = True
    humidity: bool = True
    temperature: bool = True
    water_amount: bool = True

    def any(self) -> bool:
        return self.schedule or self.light or self.humidity or self.temperature or self.water_amount

    def includes(self, category: DraftCategory) -> bool:
        return bool(getattr(self, category.value))

    def included(self) -> list[DraftCategory]:
        return [category for category in DraftCategory if self.includes(category)]

    def to_dict(self) -> dict[str, bool]:
        return {category.value: self.includes(category) for category in DraftCategory}


@dataclass(frozen=True)
class FieldChange:
    """One field that differs between current and proposed values."""

    category: DraftCategory
    field_name: str
    current: Any
    proposed: Any

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category.value,
            "field": self.field_name,
            "current": _plain(self.current),
            "proposed": _plain(self.proposed),
        }


def _plain(value: Any) -> Any:
    if isinstance(value, tuple):
        return list(value)
    return getattr(value, "value", value)


@dataclass(frozen=True)
class ApplyDraft:
    """Current and proposed care values for one plant awaiting confirmation."""

    plant_id: int | str
    current: CarePlanValues
    proposed: CarePlanValues
    flags: ApplyFlags = field(default_factory=ApplyFlags)
    advice: CareAdvice = field(default_factory=CareAdvice)

    @property
    def is_appliable(self) -> bool:
        return self.flags.any()

    def with_flags(self, **flags: bool) -> "ApplyDraft":
        return replace(self, flags=replace(self.flags, **flags))

    def changes(self, category: DraftCategory | None = None) -> list[FieldChange]:
        """Fields whose proposed value differs from the current one."""
        categories = [category] if category is not None else list(DraftCategory)
        changes = []
        for draft_category in categories:
            for name in CATEGORY_FIELDS[draft_category]:
                current = getattr(self.current, name)
                proposed = getattr(self.proposed, name)
                if current != proposed:
                    changes.append(FieldChange(draft_category, name, current, proposed))
        return changes

    def to_dict(self) -> dict[str, Any]:
        return {
            "plant_id": self.plant_id,
            "current": self.current.to_dict(),
            "proposed": self.proposed.to_dict(),
            "flags": self.flags.to_dict(),
            "changes": [change.to_dict() for change in self.changes()],
        }


def _or_current(parsed: T | None, current: T) -> T:
    return current if parsed is None else parsed


def build_apply_draft(state: PlantCareState, advice: CareAdvice) -> ApplyDraft:
    """
    Build a draft from a plant's state and advice text.

    Args:
        state: Current plant state
        advice: Advice strings per care category

    Returns:
        ApplyDraft with every inclusion flag set
    """
    current = CarePlanValues.from_state(state)

    water = plan_text.parse_water_amount(advice.watering_amount)
    proposed = CarePlanValues(
        watering_interval_days=_or_current(
            plan_text.parse_interval(advice.watering_frequency, IntervalUnit.DAYS),
            current.watering_interval_days,
        ),
        fertilizing_interval_days=_or_current(
            plan_text.parse_interval(advice.fertilizing_frequency, IntervalUnit.DAYS),
            current.fertilizing_interval_days,
        ),
        repot_interval_months=_or_current(
            plan_text.parse_interval(advice.repotting, IntervalUnit.MONTHS),
            current.repot_interval_months,
        ),
        light_level=_or_current(plan_text.parse_light_level(advice.light_intensity), current.light_level),
        humidity_percent=_or_current(plan_text.parse_humidity(advice.humidity), current.humidity_percent),
        temperature_range=_or_current(
            plan_text.parse_temperature_range(advice.temperature),
            current.temperature_range,
        ),
        water_amount=water.amount if water else current.water_amount,
        water_unit=water.unit if water else current.water_unit,
    )

    draft = ApplyDraft(plant_id=state.plant_id, current=current, proposed=proposed, advice=advice)
    logger.debug("Draft for plant %s: %d changed field(s)", state.plant_id, len(draft.changes()))
    return draft


def _fields_to_write(draft: ApplyDraft, flags: ApplyFlags) -> dict[DraftCategory, tuple[str, ...]]:
    """Changed fields per selected category; amount and unit are written together."""
    fields: dict[DraftCategory, tuple[str, ...]] = {}
    for category in flags.included():
        changed = tuple(change.field_name for change in draft.changes(category))
        if not changed:
            continue
        if category in COUPLED_CATEGORIES:
            changed = CATEGORY_FIELDS[category]
        fields[category] = changed
    return fields


def _care_plan_after_apply(
    state: PlantCareState,
    draft: ApplyDraft,
    applied: set[DraftCategory],
    now: datetime,
) -> CarePlanRecord:
    """
    Care plan record for the post-apply state.

    Requirement text of an applied category comes from the advice; every
    other category describes the plant's values as they now stand.
    """
    advice = draft.advice
    values = CarePlanValues.from_state(state)

    if DraftCategory.LIGHT in applied and advice.light_intensity:
        light_text = advice.light_intensity
    else:
        light_text = values.light_level.label
    if DraftCategory.HUMIDITY in applied and advice.humidity:
        humidity_text = advice.humidity
    else:
        humidity_text = f"{values.humidity_percent}%"
    if DraftCategory.TEMPERATURE in applied and advice.temperature:
        temperature_text = advice.temperature
    else:
        temperature_text = values.temperature_range.describe()

    existing = state.care_plan
    if existing is None:
        return CarePlanRecord(
            source=CarePlanSource.AI,
            watering_interval=state.watering_interval_days,
            fertilizing_interval=state.fertilizing_interval_days,
            light_requirements=light_text,
            humidity_requirements=humidity_text,
            temperature_requirements=temperature_text,
            seasonal_notes=advice.seasonal_notes or "",
            created_at=now,
            last_updated=now,
        )

    updates: dict[str, Any] = {"last_updated": now}
    if DraftCategory.SCHEDULE in applied:
        updates["watering_interval"] = state.watering_interval_days
        updates["fertilizing_interval"] = state.fertilizing_interval_days
    if DraftCategory.LIGHT in applied:
        updates["light_requirements"] = light_text
    if DraftCategory.HUMIDITY in applied:
        updates["humidity_requirements"] = humidity_text
    if DraftCategory.TEMPERATURE in applied:
        updates["temperature_requirements"] = temperature_text
    if advice.seasonal_notes:
        updates["seasonal_notes"] = advice.seasonal_notes
    return replace(existing, **updates)


def apply_draft(
    state: PlantCareState,
    draft: ApplyDraft,
    flags: ApplyFlags | None = None,
    now: datetime | None = None,
) -> tuple[PlantCareState, UndoSnapshot]:
    """
    Apply the selected categories of a draft.

    Only fields whose proposed value differs from the current one are
    written. When no selected category changes anything the state comes
    back as it was, care plan record included.

    Args:
        state: Current plant state
        draft: Draft built for the same plant
        flags: Selection to apply, defaults to ``draft.flags``
        now: Timestamp for the care plan record (naive means UTC), defaults to UTC now

    Returns:
        Tuple of (new state, snapshot of the state before the apply)

    Raises:
        ValidationError: If no category is selected or the draft belongs to another plant
    """
    flags = flags or draft.flags
    if not flags.any():
        raise ValidationError(
            "Select at least one category to apply",
            detail={"plant_id": state.plant_id},
        )
    if draft.plant_id != state.plant_id:
        raise ValidationError(
            "Draft belongs to a different plant",
            detail={"plant_id": state.plant_id, "draft_plant_id": draft.plant_id},
        )

    now = ensure_utc(now) if now else utc_now()
    snapshot = capture_snapshot(state, now)
    proposed = draft.proposed

    fields = _fields_to_write(draft, flags)
    if not fields:
        logger.debug("Nothing to apply to plant %s", state.plant_id)
        return state, snapshot

    updates: dict[str, Any] = {}
    for names in fields.values():
        for name in names:
            if name == "light_level":
                updates["profile"] = state.profile.with_light_level(proposed.light_level)
            else:
                updates[name] = getattr(proposed, name)

    new_state = replace(state, **updates)
    new_state = replace(
        new_state,
        care_plan=_care_plan_after_apply(new_state, draft, set(fields), now),
    )
    logger.debug(
        "Applied %s to plant %s",
        ", ".join(category.value for category in fields),
        state.plant_id,
    )
    return new_state, snapshot
