"""
Engine Constants
================

Centralized constants to replace magic numbers throughout the engine.
Organized by component for easy discovery and maintenance.

The watering and fertilizer category tables share the WateringCategory enum
but are tuned independently; keep them separate.

Usage:
    from careengine.constants import WateringFactors, FrequencyAdjustments
"""

from dataclasses import dataclass

from careengine.enums import (
    CareEnvironment,
    FeedingLevel,
    FertilizerType,
    LightLevel,
    PotMaterial,
    Season,
    WateringCategory,
)

# =============================================================================
# Plant Classification
# =============================================================================

# Ordered: first match wins. Flowering is tested before tropical on purpose.
CATEGORY_KEYWORDS: tuple[tuple[WateringCategory, tuple[str, ...]], ...] = (
    (WateringCategory.SUCCULENT, ("succulent", "echeveria", "sedum")),
    (WateringCategory.CACTUS, ("cactus", "cactaceae")),
    (WateringCategory.FERN, ("fern", "pteridaceae")),
    (WateringCategory.ORCHID, ("orchid", "orchidaceae")),
    (WateringCategory.HERB, ("herb", "basil", "mint")),
    (WateringCategory.FLOWERING, ("flower", "bloom", "flowering")),
    (WateringCategory.TROPICAL, ("tropical", "monstera", "philodendron")),
)

DEFAULT_CATEGORY = WateringCategory.FOLIAGE


# =============================================================================
# Soil Volume
# =============================================================================

class SoilVolume:
    """Cylinder approximation of container soil volume."""
    ML_PER_CUBIC_INCH = 16.387
    DERIVED_HEIGHT_RATIO = 0.75  # height = round(0.75 * diameter) when unknown
    MIN_DIMENSION_INCHES = 1.0


# =============================================================================
# Watering Amount (multiplicative model)
# =============================================================================

class WateringFactors:
    """Multipliers applied in order to the soil-volume base amount."""

    # Fraction of soil volume per watering
    BASE_FRACTION: dict[WateringCategory, float] = {
        WateringCategory.CACTUS: 0.04,
        WateringCategory.SUCCULENT: 0.05,
        WateringCategory.ORCHID: 0.06,
        WateringCategory.FOLIAGE: 0.08,
        WateringCategory.HERB: 0.08,
        WateringCategory.FLOWERING: 0.10,
        WateringCategory.TROPICAL: 0.11,
        WateringCategory.FERN: 0.12,
    }

    CATEGORY: dict[WateringCategory, float] = {
        WateringCategory.CACTUS: 0.2,
        WateringCategory.SUCCULENT: 0.3,
        WateringCategory.ORCHID: 0.8,
        WateringCategory.FOLIAGE: 1.0,
        WateringCategory.HERB: 1.1,
        WateringCategory.FLOWERING: 1.1,
        WateringCategory.TROPICAL: 1.2,
        WateringCategory.FERN: 1.3,
    }

    SEASON: dict[Season, float] = {
        Season.SPRING: 1.1,
        Season.SUMMER: 1.2,
        Season.FALL: 0.9,
        Season.WINTER: 0.7,
    }

    # Porous containers dry faster; anything not listed is 1.0
    MATERIAL: dict[PotMaterial, float] = {
        PotMaterial.TERRACOTTA: 1.15,
        PotMaterial.CLAY: 1.15,
        PotMaterial.FABRIC: 1.2,
        PotMaterial.PLASTIC: 0.95,
    }

    LIGHT: dict[LightLevel, float] = {
        LightLevel.LOW: 0.9,
        LightLevel.MEDIUM: 1.0,
        LightLevel.BRIGHT: 1.1,
        LightLevel.DIRECT: 1.2,
    }

    ENVIRONMENT: dict[CareEnvironment, float] = {
        CareEnvironment.INDOOR: 1.0,
        CareEnvironment.OUTDOOR: 1.3,
        CareEnvironment.GREENHOUSE: 1.1,
        CareEnvironment.BALCONY: 1.2,
    }

    UNIT = "ml"


# Descriptive interval (days) per category; widened for large containers
WATERING_FREQUENCY_RANGES: dict[WateringCategory, tuple[int, int]] = {
    WateringCategory.SUCCULENT: (10, 14),
    WateringCategory.CACTUS: (14, 21),
    WateringCategory.TROPICAL: (5, 7),
    WateringCategory.FLOWERING: (3, 5),
    WateringCategory.FOLIAGE: (7, 10),
    WateringCategory.FERN: (3, 5),
    WateringCategory.HERB: (2, 4),
    WateringCategory.ORCHID: (7, 10),
}
LARGE_POT_DIAMETER_INCHES = 8
LARGE_POT_FREQUENCY_WIDENING_DAYS = 2


# =============================================================================
# Watering Prose
# =============================================================================

WATERING_TECHNIQUES: dict[WateringCategory, str] = {
    WateringCategory.SUCCULENT: "Deep, infrequent watering. Soak thoroughly then let dry completely.",
    WateringCategory.CACTUS: "Deep, infrequent watering. Soak thoroughly then let dry completely.",
    WateringCategory.TROPICAL: "Keep soil consistently moist but not waterlogged. Water when top inch is dry.",
    WateringCategory.FERN: "Keep soil consistently moist but not waterlogged. Water when top inch is dry.",
    WateringCategory.FLOWERING: "Regular watering during growing season. Water at soil level to avoid wet leaves.",
    WateringCategory.FOLIAGE: "Water when top 1-2 inches of soil are dry. Water thoroughly until draining.",
    WateringCategory.HERB: "Keep evenly moist during growing season. Morning watering preferred.",
    WateringCategory.ORCHID: "Water weekly with lukewarm water. Allow excess to drain completely.",
}

SOIL_CHECK_GUIDANCE: dict[WateringCategory, str] = {
    WateringCategory.SUCCULENT: "Check soil 2-3 inches deep. Should be completely dry before watering.",
    WateringCategory.CACTUS: "Check soil 2-3 inches deep. Should be completely dry before watering.",
    WateringCategory.TROPICAL: "Check top inch of soil. Should be slightly dry but not completely.",
    WateringCategory.FERN: "Check top inch of soil. Should be slightly dry but not completely.",
    WateringCategory.FLOWERING: "Check top 1-2 inches. Water when dry to touch.",
    WateringCategory.HERB: "Check top 1-2 inches. Water when dry to touch.",
    WateringCategory.FOLIAGE: "Finger test: top inch should be dry, deeper soil slightly moist.",
    WateringCategory.ORCHID: "Check bark/moss medium. Should be nearly dry but not dusty.",
}

SEASONAL_NOTES: dict[Season, str] = {
    Season.SPRING: "Growing season - plants may need more frequent watering as they actively grow.",
    Season.SUMMER: "Peak growing season - monitor closely as soil dries faster in heat.",
    Season.FALL: "Growth slowing - reduce watering frequency as plants prepare for dormancy.",
    Season.WINTER: "Dormant period - reduce watering significantly, plants need less water.",
}


# =============================================================================
# Fertilizer
# =============================================================================

@dataclass(frozen=True)
class FertilizerFormProperties:
    """Dosing properties of a fertilizer form."""

    name: str
    amount_per_inch: float  # per inch of container diameter
    unit: str
    dilution_ratio: str
    instructions: str


class FertilizerFormConfig:
    """Fertilizer form configurations for dose calculations."""

    LIQUID = FertilizerFormProperties(
        name="liquid",
        amount_per_inch=0.5,
        unit="ml",
        dilution_ratio="1:4 (1 part fertilizer to 4 parts water)",
        instructions="Dilute according to package directions, typically 1/4 to 1/2 strength. Apply to moist soil.",
    )

    GRANULAR = FertilizerFormProperties(
        name="granular",
        amount_per_inch=0.25,
        unit="g",
        dilution_ratio="Apply directly as directed",
        instructions="Sprinkle evenly on soil surface, water thoroughly. Keep away from stem.",
    )

    SLOW_RELEASE = FertilizerFormProperties(
        name="slow_release",
        amount_per_inch=0.1,
        unit="pellets",
        dilution_ratio="No dilution needed",
        instructions="Mix into top inch of soil or place on surface. Water normally, releases over 3-6 months.",
    )

    @classmethod
    def get(cls, form: FertilizerType) -> FertilizerFormProperties:
        return {
            FertilizerType.LIQUID: cls.LIQUID,
            FertilizerType.GRANULAR: cls.GRANULAR,
            FertilizerType.SLOW_RELEASE: cls.SLOW_RELEASE,
        }[form]


FERTILIZER_CATEGORY_MULTIPLIERS: dict[WateringCategory, float] = {
    WateringCategory.SUCCULENT: 0.5,
    WateringCategory.CACTUS: 0.5,
    WateringCategory.TROPICAL: 1.2,
    WateringCategory.FLOWERING: 1.2,
    WateringCategory.FOLIAGE: 1.0,
    WateringCategory.HERB: 1.0,
    WateringCategory.FERN: 0.8,
    WateringCategory.ORCHID: 0.6,
}

FEEDING_LEVEL_MULTIPLIERS: dict[FeedingLevel, float] = {
    FeedingLevel.LIGHT: 0.5,
    FeedingLevel.NORMAL: 1.0,
    FeedingLevel.HEAVY: 1.5,
}

FERTILIZER_FREQUENCIES: dict[WateringCategory, str] = {
    WateringCategory.SUCCULENT: "Every 6-8 weeks during growing season",
    WateringCategory.CACTUS: "Every 6-8 weeks during growing season",
    WateringCategory.TROPICAL: "Every 2-3 weeks during growing season",
    WateringCategory.FLOWERING: "Every 2-3 weeks during growing season",
    WateringCategory.HERB: "Every 2-3 weeks during growing season",
    WateringCategory.FOLIAGE: "Every 4 weeks during growing season",
    WateringCategory.FERN: "Every 6 weeks with diluted fertilizer",
    WateringCategory.ORCHID: "Weekly with orchid-specific fertilizer (heavily diluted)",
}

FERTILIZER_SEASONAL_SCHEDULE = (
    "Spring-Summer: Regular feeding. Fall: Reduced feeding. Winter: Minimal to no feeding."
)


# =============================================================================
# Watering Frequency (additive model, days)
# =============================================================================

class FrequencyAdjustments:
    """Additive day adjustments for the schedule-default watering interval."""

    BASELINE_DAYS: dict[WateringCategory, int] = {
        WateringCategory.CACTUS: 16,
        WateringCategory.SUCCULENT: 14,
        WateringCategory.ORCHID: 10,
        WateringCategory.FERN: 4,
        WateringCategory.FLOWERING: 5,
        WateringCategory.HERB: 4,
        WateringCategory.TROPICAL: 6,
        WateringCategory.FOLIAGE: 7,
    }

    # (exclusive lower bound in ml, days) checked top-down
    LARGE_VOLUME_ML = 1500
    LARGE_VOLUME_DAYS = 2
    MEDIUM_VOLUME_ML = 900
    MEDIUM_VOLUME_DAYS = 1
    SMALL_VOLUME_ML = 600
    SMALL_VOLUME_DAYS = -1

    MATERIAL: dict[PotMaterial, int] = {
        PotMaterial.TERRACOTTA: -1,
        PotMaterial.CLAY: -1,
        PotMaterial.FABRIC: -1,
        PotMaterial.PLASTIC: 1,
    }

    LIGHT: dict[LightLevel, int] = {
        LightLevel.LOW: 1,
        LightLevel.MEDIUM: 0,
        LightLevel.BRIGHT: -1,
        LightLevel.DIRECT: -2,
    }

    SEASON: dict[Season, int] = {
        Season.SPRING: 0,
        Season.SUMMER: -1,
        Season.FALL: 1,
        Season.WINTER: 2,
    }

    ENVIRONMENT: dict[CareEnvironment, int] = {
        CareEnvironment.INDOOR: 0,
        CareEnvironment.OUTDOOR: -1,
        CareEnvironment.GREENHOUSE: 0,
        CareEnvironment.BALCONY: -1,
    }

    MIN_DAYS = 2
    MAX_DAYS = 28


# =============================================================================
# Weather
# =============================================================================

class WeatherThresholds:
    """Weather multiplier and advisory bands (temperatures in °F, humidity 0-1)."""
    HOT_TEMP_F = 80.0
    COOL_TEMP_F = 65.0
    HOT_MULTIPLIER_DELTA = 0.3
    COOL_MULTIPLIER_DELTA = -0.2

    DRY_HUMIDITY = 0.3
    HUMID_HUMIDITY = 0.7
    DRY_MULTIPLIER_DELTA = 0.2
    HUMID_MULTIPLIER_DELTA = -0.2

    BRIGHT_PLANT_DELTA = 0.1
    LOW_LIGHT_PLANT_DELTA = -0.1

    MIN_MULTIPLIER = 0.5
    MAX_MULTIPLIER = 2.0

    # Frequency text rewrite
    MORE_FREQUENT_ABOVE = 1.3
    LESS_FREQUENT_BELOW = 0.7

    # Technique text enhancement
    MORE_THOROUGH_ABOVE = 1.2
    LESS_WATER_BELOW = 0.8

    # Advisory bands
    HOT_ADVISORY_F = 85.0
    COOL_ADVISORY_F = 55.0

    # Repotting window
    REPOT_MIN_F = 65.0
    REPOT_MAX_F = 80.0
    REPOT_MAX_HUMIDITY = 0.7


class WeeklyWeatherThresholds:
    """Bands for the weekly care summary."""
    HOT_WEEK_F = 80.0
    COOL_WEEK_F = 60.0
    RAINY_WEEK_INCHES = 0.5
    DRY_WEEK_INCHES = 0.1
    SUNNY_WEEK_DAYS = 5
    DULL_WEEK_DAYS = 2
    FORECAST_DAYS = 7
    DEFAULT_HUMIDITY = 0.5


ADVISORY_SEPARATOR = " • "


# =============================================================================
# Care Plan Bounds
# =============================================================================

class CarePlanBounds:
    """Clamping ranges for structured care-plan values."""
    HUMIDITY_MIN = 20
    HUMIDITY_MAX = 90
    TEMPERATURE_MIN_F = 40
    TEMPERATURE_MAX_F = 95
    MIN_INTERVAL = 1

    # Band synthesized around a single temperature value
    SINGLE_TEMPERATURE_BAND_F = 5

    # Values above this (with no explicit Fahrenheit marker) are read as °F
    CELSIUS_MAGNITUDE_LIMIT = 45

    DEFAULT_REPOT_MONTHS = 12


class CareStateDefaults:
    """Stored plant values used when a plant record leaves them unset."""
    WATERING_INTERVAL_DAYS = 7
    FERTILIZING_INTERVAL_DAYS = 30
    HUMIDITY_PERCENT = 50
    TEMPERATURE_MIN_F = 65
    TEMPERATURE_MAX_F = 80
    WATER_AMOUNT = 250.0


HUMIDITY_WORD_LEVELS: tuple[tuple[tuple[str, ...], int], ...] = (
    (("high", "humid"), 70),
    (("medium", "moderate"), 50),
    (("low", "dry"), 35),
)

# Shared by the interval and water-amount parsers
WORD_NUMBERS: dict[str, int] = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "couple": 2,
    "few": 3,
    "several": 4,
}

RATE_WORDS: dict[str, int] = {
    "once": 1,
    "twice": 2,
    "thrice": 3,
}
