"""
Care-related Enumerations
=========================

Closed value sets used by the recommendation engine, the plan text parser
and the apply/undo protocol.

The ``from_text`` constructors are tolerant of the free-form spellings that
arrive from imports and user input; they never raise.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum


def _clean(value: str | None) -> str:
    return (value or "").strip().lower().replace("_", " ")


class WateringCategory(str, Enum):
    """Watering-behavior category of a plant."""

    CACTUS = "cactus"
    SUCCULENT = "succulent"
    ORCHID = "orchid"
    FOLIAGE = "foliage"
    HERB = "herb"
    FLOWERING = "flowering"
    TROPICAL = "tropical"
    FERN = "fern"

    def __str__(self):
        return self.value


class Season(str, Enum):
    """Growing season"""

    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"

    def __str__(self):
        return self.value

    @classmethod
    def from_month(cls, month: int, hemisphere: str = "northern") -> "Season":
        """Map a calendar month (1-12) to a season.

        The southern hemisphere is shifted by six months.
        """
        if hemisphere == "southern":
            month = (month + 5) % 12 + 1
        if 3 <= month <= 5:
            return cls.SPRING
        if 6 <= month <= 8:
            return cls.SUMMER
        if 9 <= month <= 11:
            return cls.FALL
        return cls.WINTER

    @classmethod
    def current(cls, now: datetime | None = None, hemisphere: str = "northern") -> "Season":
        """Season for ``now`` (defaults to the local clock)."""
        now = now or datetime.now()
        return cls.from_month(now.month, hemisphere)

    @classmethod
    def from_text(cls, value: str | None, default: "Season | None" = None) -> "Season":
        text = _clean(value)
        if text == "autumn":
            return cls.FALL
        for season in cls:
            if season.value == text:
                return season
        return default or cls.current()


class PotMaterial(str, Enum):
    """Container material."""

    PLASTIC = "plastic"
    TERRACOTTA = "terracotta"
    CLAY = "clay"
    FABRIC = "fabric"
    GLAZED_CERAMIC = "glazed_ceramic"
    CERAMIC = "ceramic"
    CONCRETE = "concrete"
    METAL = "metal"
    WOOD = "wood"
    OTHER = "other"
    UNKNOWN = "unknown"

    def __str__(self):
        return self.value

    @classmethod
    def from_text(cls, value: str | None) -> "PotMaterial":
        """Coerce free text to a material; blank is unknown, unrecognized is other."""
        text = _clean(value)
        if not text:
            return cls.UNKNOWN
        aliases = {
            "terracota": cls.TERRACOTTA,
            "terracotta": cls.TERRACOTTA,
            "clay": cls.CLAY,
            "glazed ceramic": cls.GLAZED_CERAMIC,
            "glazed ceramics": cls.GLAZED_CERAMIC,
            "ceramics": cls.GLAZED_CERAMIC,
            "unknown": cls.UNKNOWN,
        }
        if text in aliases:
            return aliases[text]
        for material in cls:
            if material.value == text:
                return material
        return cls.OTHER


class LightLevel(str, Enum):
    """Light exposure level."""

    LOW = "low"
    MEDIUM = "medium"
    BRIGHT = "bright_indirect"
    DIRECT = "direct"

    def __str__(self):
        return self.value

    @property
    def label(self) -> str:
        return {
            LightLevel.LOW: "Low Light",
            LightLevel.MEDIUM: "Medium Light",
            LightLevel.BRIGHT: "Bright Indirect",
            LightLevel.DIRECT: "Direct Sun",
        }[self]

    @classmethod
    def from_text(cls, value: str | None) -> "LightLevel":
        """Exact-label coercion used for imports; defaults to medium."""
        text = _clean(value)
        mapping = {
            "low": cls.LOW,
            "low light": cls.LOW,
            "medium": cls.MEDIUM,
            "medium light": cls.MEDIUM,
            "bright": cls.BRIGHT,
            "bright indirect": cls.BRIGHT,
            "indirect": cls.BRIGHT,
            "direct": cls.DIRECT,
            "direct sun": cls.DIRECT,
            "full sun": cls.DIRECT,
        }
        return mapping.get(text, cls.MEDIUM)


class CareEnvironment(str, Enum):
    """Placement of the plant."""

    INDOOR = "indoor"
    OUTDOOR = "outdoor"
    GREENHOUSE = "greenhouse"
    BALCONY = "balcony"

    def __str__(self):
        return self.value

    @classmethod
    def from_text(cls, value: str | None, default: "CareEnvironment | None" = None) -> "CareEnvironment":
        text = _clean(value)
        for environment in cls:
            if environment.value == text:
                return environment
        return default or cls.INDOOR


class FertilizerType(str, Enum):
    """Fertilizer form."""

    LIQUID = "liquid"
    GRANULAR = "granular"
    SLOW_RELEASE = "slow_release"

    def __str__(self):
        return self.value

    @classmethod
    def from_text(cls, value: str | None, default: "FertilizerType | None" = None) -> "FertilizerType":
        text = _clean(value).replace("-", " ")
        if text in {"slow release", "slowrelease", "pellets"}:
            return cls.SLOW_RELEASE
        for form in cls:
            if form.value == text:
                return form
        return default or cls.LIQUID


class FeedingLevel(str, Enum):
    """How heavily a plant is fed relative to the standard dose."""

    LIGHT = "light"
    NORMAL = "normal"
    HEAVY = "heavy"

    def __str__(self):
        return self.value


class WaterUnit(str, Enum):
    """Liquid-volume units accepted for water amounts."""

    MILLILITERS = "ml"
    OUNCES = "fl oz"
    CUPS = "cups"
    LITERS = "L"

    def __str__(self):
        return self.value

    @classmethod
    def from_text(cls, value: str | None) -> "WaterUnit":
        text = _clean(value)
        mapping = {
            "ml": cls.MILLILITERS,
            "milliliter": cls.MILLILITERS,
            "milliliters": cls.MILLILITERS,
            "fl oz": cls.OUNCES,
            "floz": cls.OUNCES,
            "oz": cls.OUNCES,
            "ounce": cls.OUNCES,
            "ounces": cls.OUNCES,
            "cup": cls.CUPS,
            "cups": cls.CUPS,
            "l": cls.LITERS,
            "liter": cls.LITERS,
            "liters": cls.LITERS,
        }
        return mapping.get(text, cls.MILLILITERS)


class WeatherCondition(str, Enum):
    """Coarse weather condition supplied by the weather collaborator."""

    CLEAR = "clear"
    MOSTLY_CLEAR = "mostly_clear"
    CLOUDY = "cloudy"
    MOSTLY_CLOUDY = "mostly_cloudy"
    RAIN = "rain"
    SNOW = "snow"
    OTHER = "other"

    def __str__(self):
        return self.value

    @property
    def is_clear(self) -> bool:
        return self in (WeatherCondition.CLEAR, WeatherCondition.MOSTLY_CLEAR)

    @property
    def is_cloudy(self) -> bool:
        return self in (WeatherCondition.CLOUDY, WeatherCondition.MOSTLY_CLOUDY)

    @property
    def is_precipitation(self) -> bool:
        return self in (WeatherCondition.RAIN, WeatherCondition.SNOW)


class LightAdjustment(str, Enum):
    """Light advice derived from the current weather condition."""

    NORMAL = "normal"
    INCREASE_INDOOR_LIGHT = "increase_indoor_light"
    PROVIDE_SUPPLEMENTAL_LIGHT = "provide_supplemental_light"
    MAXIMIZE_AVAILABLE_LIGHT = "maximize_available_light"

    def __str__(self):
        return self.value

    @property
    def message(self) -> str:
        return {
            LightAdjustment.NORMAL: "Normal light conditions",
            LightAdjustment.INCREASE_INDOOR_LIGHT: "Move closer to bright windows",
            LightAdjustment.PROVIDE_SUPPLEMENTAL_LIGHT: "Consider grow lights today",
            LightAdjustment.MAXIMIZE_AVAILABLE_LIGHT: "Maximize available natural light",
        }[self]


class IntervalUnit(str, Enum):
    """Unit of an interval parsed from advice text."""

    DAYS = "days"
    MONTHS = "months"

    def __str__(self):
        return self.value


class CarePlanSource(str, Enum):
    """Origin of a care-plan record."""

    USER = "user"
    AI = "ai"
    EXPERT = "expert"

    def __str__(self):
        return self.value


class DraftCategory(str, Enum):
    """Independently selectable categories of an apply draft."""

    SCHEDULE = "schedule"
    LIGHT = "light"
    HUMIDITY = "humidity"
    TEMPERATURE = "temperature"
    WATER_AMOUNT = "water_amount"

    def __str__(self):
        return self.value


class ApplySessionState(str, Enum):
    """Per-plant apply session states.

    - IDLE: nothing pending
    - DRAFT_BUILT: a draft awaits confirmation
    - APPLIED: a draft was applied and its undo snapshot is retained
    - UNDONE: the last apply was reverted
    """

    IDLE = "idle"
    DRAFT_BUILT = "draft_built"
    APPLIED = "applied"
    UNDONE = "undone"

    def __str__(self):
        return self.value
