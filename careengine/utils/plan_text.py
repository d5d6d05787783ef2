"""
Care Plan Text Parsing
======================

Pure functions that turn free-form care advice into typed, clamped values.

Functions:
- parse_interval: "every 5-7 days", "twice a week", "quarterly" -> int days/months
- parse_humidity: "40-60%", "high humidity" -> int percent (20-90)
- parse_temperature_range: "18-24°C", "65-75°F" -> (min_f, max_f) within 40-95°F
- parse_light_level: "bright indirect" -> LightLevel
- parse_water_amount: "1 1/2 cups", "250-300 ml" -> WaterAmount

Every parser fails soft: unrecognized text yields ``None``, never an
exception. Input is normalized first (lowercase, en/em dashes to "-").

Interval rules are tried in a fixed order and the first hit wins:
idiom -> rate phrase -> fixed cadence -> numeric with unit -> word number
with unit -> bare number.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable

from careengine.constants import (
    HUMIDITY_WORD_LEVELS,
    RATE_WORDS,
    WORD_NUMBERS,
    CarePlanBounds,
)
from careengine.domain.care_plan import TemperatureRange
from careengine.domain.soil_volume import round_half_up
from careengine.enums import IntervalUnit, LightLevel, WaterUnit

logger = logging.getLogger(__name__)


# =============================================================================
# Shared helpers
# =============================================================================

_DASHES = str.maketrans({"‒": "-", "–": "-", "—": "-", "―": "-", "−": "-"})
_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")
_RANGE_MARKERS = ("-", " to ", " through ", "between")
_WORD_NUMBER_RE = re.compile(r"\b(" + "|".join(WORD_NUMBERS) + r")\b")

_COUNT = "|".join([*RATE_WORDS, *WORD_NUMBERS, r"\d+(?:\.\d+)?"])
_RATE_RE = re.compile(
    rf"\b(?P<count>{_COUNT})(?:\s*(?:-|to|or)\s*(?P<count2>{_COUNT}))?\s*(?:x|(?:of\s+)?times?)?\s*(?:a|an|per|each|every|/)\s*"
    r"(?P<unit>day|week|month|year)\b"
)
_RATE_CADENCE_RE = re.compile(
    rf"\b(?P<count>{_COUNT})(?:\s*(?:-|to|or)\s*(?P<count2>{_COUNT}))?\s*(?:x|(?:of\s+)?times?)?\s*(?P<unit>daily|weekly|monthly|yearly|annually)\b"
)
_CADENCE_UNITS = {
    "daily": "day",
    "weekly": "week",
    "monthly": "month",
    "yearly": "year",
    "annually": "year",
}


def normalize_text(text: Any) -> str:
    """Lowercase, unify dashes and collapse whitespace."""
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)
    return " ".join(text.translate(_DASHES).lower().split())


def extract_numbers(text: str) -> list[float]:
    return [float(match) for match in _NUMBER_RE.findall(text)]


def has_range_marker(text: str) -> bool:
    return any(marker in text for marker in _RANGE_MARKERS)


def representative_value(text: str, numbers: list[float]) -> float:
    """Average of the first two numbers when the text reads as a range, else the first."""
    if len(numbers) >= 2 and has_range_marker(text):
        return (numbers[0] + numbers[1]) / 2.0
    return numbers[0]


def _count_value(token: str) -> float:
    if token in RATE_WORDS:
        return float(RATE_WORDS[token])
    if token in WORD_NUMBERS:
        return float(WORD_NUMBERS[token])
    return float(token)


def _unit_scale(text: str, scales: tuple[tuple[str, float], ...]) -> float | None:
    for keyword, scale in scales:
        if keyword in text:
            return scale
    return None


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


# =============================================================================
# Intervals
# =============================================================================

@dataclass(frozen=True)
class _IntervalRules:
    """Rule tables for one interval unit."""

    idioms: tuple[tuple[str, int], ...]
    cadences: tuple[tuple[re.Pattern, int], ...]
    unit_sizes: dict[str, float]  # rate-phrase unit -> length in result units
    scales: tuple[tuple[str, float], ...]  # keyword -> multiplier, checked in order


_DAY_RULES = _IntervalRules(
    idioms=(
        ("every other day", 2),
        ("every other week", 14),
        ("every other month", 60),
        ("fortnight", 14),
        ("biweekly", 14),
        ("bi-weekly", 14),
    ),
    cadences=(
        (re.compile(r"\bdaily\b|\b(?:every|each) day\b"), 1),
        (re.compile(r"\bweekly\b|\b(?:every|each) week\b"), 7),
        (re.compile(r"\bmonthly\b|\b(?:every|each) month\b"), 30),
        (re.compile(r"\b(?:yearly|annually)\b|\b(?:every|each) year\b"), 365),
    ),
    unit_sizes={"day": 1.0, "week": 7.0, "month": 30.0, "year": 365.0},
    scales=(("week", 7.0), ("month", 30.0), ("year", 365.0), ("day", 1.0)),
)

_MONTH_RULES = _IntervalRules(
    idioms=(
        ("every other month", 2),
        ("every other year", 24),
        ("semiannual", 6),
        ("semi-annual", 6),
        ("biannual", 6),
        ("biennial", 24),
        ("quarterly", 3),
    ),
    cadences=(
        (re.compile(r"\b(?:yearly|annually|annual)\b|\b(?:every|each) year\b"), 12),
        (re.compile(r"\bmonthly\b|\b(?:every|each) month\b"), 1),
    ),
    unit_sizes={"day": 1.0 / 30.0, "week": 7.0 / 30.0, "month": 1.0, "year": 12.0},
    scales=(("year", 12.0), ("month", 1.0), ("week", 7.0 / 30.0), ("day", 1.0 / 30.0)),
)


def _match_idiom(text: str, rules: _IntervalRules) -> float | None:
    for phrase, value in rules.idioms:
        if phrase in text:
            return float(value)
    return None


def _match_rate(text: str, rules: _IntervalRules) -> float | None:
    match = _RATE_RE.search(text)
    unit = match.group("unit") if match else None
    if match is None:
        match = _RATE_CADENCE_RE.search(text)
        unit = _CADENCE_UNITS[match.group("unit")] if match else None
    if match is None:
        return None
    rate = _count_value(match.group("count"))
    if match.group("count2"):
        rate = (rate + _count_value(match.group("count2"))) / 2.0
    if rate <= 0:
        return None
    return rules.unit_sizes[unit] / rate


def _match_cadence(text: str, rules: _IntervalRules) -> float | None:
    for pattern, value in rules.cadences:
        if pattern.search(text):
            return float(value)
    return None


def _match_numeric(text: str, rules: _IntervalRules) -> float | None:
    numbers = extract_numbers(text)
    scale = _unit_scale(text, rules.scales)
    if not numbers or scale is None:
        return None
    return representative_value(text, numbers) * scale


def _match_word_number(text: str, rules: _IntervalRules) -> float | None:
    if _NUMBER_RE.search(text):
        return None
    match = _WORD_NUMBER_RE.search(text)
    scale = _unit_scale(text, rules.scales)
    if match is None or scale is None:
        return None
    return WORD_NUMBERS[match.group(1)] * scale


def _match_bare_number(text: str, rules: _IntervalRules) -> float | None:
    numbers = extract_numbers(text)
    if not numbers:
        return None
    return representative_value(text, numbers)


_INTERVAL_STEPS: tuple[Callable[[str, _IntervalRules], float | None], ...] = (
    _match_idiom,
    _match_rate,
    _match_cadence,
    _match_numeric,
    _match_word_number,
    _match_bare_number,
)


def parse_interval(text: Any, unit: IntervalUnit | str = IntervalUnit.DAYS) -> int | None:
    """
    Parse a care interval from advice text.

    Args:
        text: Free-form phrase, e.g. "water every 5-7 days"
        unit: IntervalUnit.DAYS or IntervalUnit.MONTHS

    Returns:
        Interval (>= 1) in the requested unit, or None when nothing is recognized
    """
    normalized = normalize_text(text)
    if not normalized:
        return None

    rules = _MONTH_RULES if IntervalUnit(unit) is IntervalUnit.MONTHS else _DAY_RULES
    for step in _INTERVAL_STEPS:
        value = step(normalized, rules)
        if value is not None:
            return max(CarePlanBounds.MIN_INTERVAL, round_half_up(value))

    logger.debug("No %s interval in %r", unit, text)
    return None


def parse_interval_days(text: Any) -> int | None:
    return parse_interval(text, IntervalUnit.DAYS)


def parse_interval_months(text: Any) -> int | None:
    return parse_interval(text, IntervalUnit.MONTHS)


# =============================================================================
# Humidity
# =============================================================================

def parse_humidity(text: Any) -> int | None:
    """
    Parse a humidity preference in percent.

    Explicit numbers win (a range is averaged); otherwise qualitative words
    map to fixed levels (high/humid 70, medium/moderate 50, low/dry 35).

    Returns:
        Percent clamped to [20, 90], or None
    """
    normalized = normalize_text(text)
    if not normalized:
        return None

    numbers = extract_numbers(normalized)
    if numbers:
        value = round_half_up(representative_value(normalized, numbers))
        return _clamp(value, CarePlanBounds.HUMIDITY_MIN, CarePlanBounds.HUMIDITY_MAX)

    for words, level in HUMIDITY_WORD_LEVELS:
        if any(re.search(rf"\b{word}\b", normalized) for word in words):
            return level

    logger.debug("No humidity in %r", text)
    return None


# =============================================================================
# Temperature
# =============================================================================

_CELSIUS_RE = re.compile(r"celsius|°\s*c\b|\d\s*c\b|\bdeg(?:rees)?\s*c\b")
_FAHRENHEIT_RE = re.compile(r"fahrenheit|°\s*f\b|\d\s*f\b|\bdeg(?:rees)?\s*f\b")


def _is_celsius(text: str, values: list[float]) -> bool:
    celsius = _CELSIUS_RE.search(text)
    fahrenheit = _FAHRENHEIT_RE.search(text)
    if celsius and fahrenheit:
        # Whichever unit is written first labels the leading numbers
        return celsius.start() < fahrenheit.start()
    if celsius:
        return True
    if fahrenheit:
        return False
    return all(value <= CarePlanBounds.CELSIUS_MAGNITUDE_LIMIT for value in values)


def celsius_to_fahrenheit(value: float) -> float:
    return value * 9.0 / 5.0 + 32.0


def parse_temperature_range(text: Any) -> TemperatureRange | None:
    """
    Parse a temperature range in °F.

    Celsius is assumed when the text says so, or when it carries no
    Fahrenheit marker and every value is <= 45. A single value becomes a
    ±5°F band.

    Returns:
        TemperatureRange with both ends clamped to [40, 95] and min <= max, or None
    """
    normalized = normalize_text(text)
    if not normalized:
        return None

    numbers = extract_numbers(normalized)[:2]
    if not numbers:
        logger.debug("No temperature in %r", text)
        return None

    if _is_celsius(normalized, numbers):
        numbers = [celsius_to_fahrenheit(value) for value in numbers]

    if len(numbers) == 1:
        band = CarePlanBounds.SINGLE_TEMPERATURE_BAND_F
        low, high = numbers[0] - band, numbers[0] + band
    else:
        low, high = min(numbers), max(numbers)

    low_f = _clamp(round_half_up(low), CarePlanBounds.TEMPERATURE_MIN_F, CarePlanBounds.TEMPERATURE_MAX_F)
    high_f = _clamp(round_half_up(high), CarePlanBounds.TEMPERATURE_MIN_F, CarePlanBounds.TEMPERATURE_MAX_F)
    return TemperatureRange(min(low_f, high_f), max(low_f, high_f))


# =============================================================================
# Light
# =============================================================================

def parse_light_level(text: Any) -> LightLevel | None:
    """
    Parse a light level.

    Priority: direct > bright/indirect > low > medium/moderate, so
    "bright direct sun" is direct while "bright indirect" is bright.
    """
    normalized = normalize_text(text)
    if not normalized:
        return None

    if re.search(r"\bdirect\b", normalized) or "full sun" in normalized:
        return LightLevel.DIRECT
    if "bright" in normalized or "indirect" in normalized:
        return LightLevel.BRIGHT
    if re.search(r"\blow\b", normalized):
        return LightLevel.LOW
    if "medium" in normalized or "moderate" in normalized:
        return LightLevel.MEDIUM

    logger.debug("No light level in %r", text)
    return None


# =============================================================================
# Water amount
# =============================================================================

@dataclass(frozen=True)
class WaterAmount:
    """A parsed water volume."""

    amount: float
    unit: WaterUnit


_QUANTITY = r"\d+\s+\d+\s*/\s*\d+|\d+\s*/\s*\d+|\d+(?:\.\d+)?"
_UNIT = (
    r"(?P<unit>fl\.?\s*oz\b|fluid\s+ounces?\b|ounces?\b|oz\b|"
    r"millilit(?:er|re)s?\b|ml\b|cups?\b|lit(?:er|re)s?\b|l\b)"
)
_AMOUNT_RE = re.compile(
    rf"(?P<first>{_QUANTITY})(?:\s*(?:-|to)\s*(?P<second>{_QUANTITY}))?\s*{_UNIT}"
)
_FRACTION_WORDS = {"half": 0.5, "quarter": 0.25, "a": 1.0, "an": 1.0}
_WORD_AMOUNT_RE = re.compile(
    r"\b(?P<word>" + "|".join([*_FRACTION_WORDS, *WORD_NUMBERS]) + r")\s+(?:of\s+)?(?:an?\s+)?" + _UNIT
)


def _unit_from_match(token: str) -> WaterUnit:
    token = token.replace(" ", "").replace(".", "")
    if token.startswith("fl") or token.startswith("ounce") or token.startswith("oz"):
        return WaterUnit.OUNCES
    if token.startswith("m"):
        return WaterUnit.MILLILITERS
    if token.startswith("cup"):
        return WaterUnit.CUPS
    return WaterUnit.LITERS


def _quantity_value(token: str) -> float | None:
    token = token.strip()
    if "/" not in token:
        return float(token)
    head, _, denominator = token.rpartition("/")
    parts = head.split()
    whole = float(parts[0]) if len(parts) == 2 else 0.0
    numerator = float(parts[-1])
    if float(denominator) == 0:
        return None
    return whole + numerator / float(denominator)


def parse_water_amount(text: Any) -> WaterAmount | None:
    """
    Parse a water volume bound to a unit.

    Accepts ranges ("250-300 ml" averages to 275), fractions ("1/2 cup",
    "1 1/2 cups"), decimals and word amounts ("half a cup", "two cups").

    Returns:
        WaterAmount, or None when no quantity is attached to a known unit
    """
    normalized = normalize_text(text)
    if not normalized:
        return None

    match = _AMOUNT_RE.search(normalized)
    if match:
        first = _quantity_value(match.group("first"))
        second = _quantity_value(match.group("second")) if match.group("second") else None
        if first is not None:
            amount = (first + second) / 2.0 if second is not None else first
            return WaterAmount(round(amount, 2), _unit_from_match(match.group("unit")))

    match = _WORD_AMOUNT_RE.search(normalized)
    if match:
        word = match.group("word")
        amount = _FRACTION_WORDS.get(word, WORD_NUMBERS.get(word))
        return WaterAmount(float(amount), _unit_from_match(match.group("unit")))

    logger.debug("No water amount in %r", text)
    return None
