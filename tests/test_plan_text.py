"""
Plan Text Parsing Tests
=======================
Tests for the soft-failing care plan text parsers.
"""

import pytest

from careengine.enums import IntervalUnit, LightLevel, WaterUnit
from careengine.utils.plan_text import (
    normalize_text,
    parse_humidity,
    parse_interval,
    parse_interval_days,
    parse_interval_months,
    parse_light_level,
    parse_temperature_range,
    parse_water_amount,
)


class TestNormalizeText:
    """Tests for normalize_text."""

    def test_lowercases_and_unifies_dashes(self):
        assert normalize_text("Every 5–7 Days") == "every 5-7 days"
        assert normalize_text("18—24°C") == "18-24°c"

    def test_collapses_whitespace(self):
        assert normalize_text("  twice   a\nweek ") == "twice a week"

    def test_none_is_empty(self):
        assert normalize_text(None) == ""


class TestParseIntervalDays:
    """Tests for parse_interval in days."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            # Idioms
            ("every other day", 2),
            ("Water every other week", 14),
            ("every other month", 60),
            ("once a fortnight", 14),
            ("fortnightly", 14),
            ("biweekly", 14),
            ("bi-weekly", 14),
            # Rate phrases
            ("twice a week", 4),
            ("3 times a month", 10),
            ("three times per week", 2),
            ("once a week", 7),
            ("once every week", 7),
            ("a few times a week", 2),
            ("a couple of times a month", 15),
            ("twice weekly", 4),
            ("2x a week", 4),
            ("1-2 times a week", 5),
            ("twice daily", 1),
            # Fixed cadence
            ("daily", 1),
            ("every day", 1),
            ("weekly", 7),
            ("fertilize monthly", 30),
            # Numeric
            ("water every 5-7 days", 6),
            ("every 5–7 days", 6),
            ("every 2-3 weeks", 18),
            ("every 10 to 14 days", 12),
            ("between 7 and 10 days", 9),
            ("every 2 weeks", 14),
            ("every 3 months", 90),
            ("every 6 days, less in winter", 6),
            # Word numbers
            ("once every two weeks", 14),
            ("every three days", 3),
            ("every few weeks", 21),
            # Bare number
            ("10", 10),
            ("7.4", 7),
        ],
    )
    def test_phrases(self, text, expected):
        assert parse_interval(text, IntervalUnit.DAYS) == expected

    def test_idiom_wins_over_numbers(self):
        assert parse_interval("every other day, about 2 weeks in winter") == 2

    def test_rate_wins_over_cadence(self):
        assert parse_interval("twice a week, weekly in winter") == 4

    def test_floored_at_one(self):
        assert parse_interval("0 days") == 1
        assert parse_interval("4 times a day") == 1

    def test_accepts_string_unit(self):
        assert parse_interval("weekly", "days") == 7

    def test_days_helper(self):
        assert parse_interval_days("every 2 weeks") == 14

    @pytest.mark.parametrize("text", [None, "", "   ", "when the soil feels dry", "as needed"])
    def test_unrecognized_text_returns_none(self, text):
        assert parse_interval(text) is None


class TestParseIntervalMonths:
    """Tests for parse_interval in months."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("every other month", 2),
            ("every other year", 24),
            ("quarterly", 3),
            ("biannually", 6),
            ("semiannual", 6),
            ("semi-annually", 6),
            ("twice a year", 6),
            ("once a year", 12),
            ("annually", 12),
            ("yearly", 12),
            ("every year in spring", 12),
            ("monthly", 1),
            ("every 1-2 years", 18),
            ("every 2 years", 24),
            ("every 18 months", 18),
            ("every 12-18 months", 15),
            ("every 6 weeks", 1),
            ("every two years", 24),
            ("24", 24),
        ],
    )
    def test_phrases(self, text, expected):
        assert parse_interval(text, IntervalUnit.MONTHS) == expected

    def test_helper_matches_generic_parser(self):
        assert parse_interval_months("every 2 years") == parse_interval("every 2 years", IntervalUnit.MONTHS)

    def test_unrecognized_text_returns_none(self):
        assert parse_interval("when roots fill the pot", IntervalUnit.MONTHS) is None


class TestParseHumidity:
    """Tests for parse_humidity."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("40-60%", 50),
            ("50%", 50),
            ("Humidity between 55 and 70 percent", 63),
            ("above 60% humidity", 60),
            ("high humidity", 70),
            ("likes it humid", 70),
            ("moderate", 50),
            ("Medium humidity", 50),
            ("low humidity", 35),
            ("tolerates dry air", 35),
        ],
    )
    def test_phrases(self, text, expected):
        assert parse_humidity(text) == expected

    def test_numbers_are_clamped(self):
        assert parse_humidity("95%") == 90
        assert parse_humidity("10%") == 20

    def test_humidity_word_alone_is_not_humid(self):
        assert parse_humidity("average humidity") is None

    @pytest.mark.parametrize("text", [None, "", "mist occasionally"])
    def test_unrecognized_text_returns_none(self, text):
        assert parse_humidity(text) is None


class TestParseTemperatureRange:
    """Tests for parse_temperature_range."""

    def test_celsius_range(self):
        assert parse_temperature_range("18-24°C") == (64, 75)

    def test_fahrenheit_range(self):
        assert parse_temperature_range("65-75°F") == (65, 75)

    def test_named_units(self):
        assert parse_temperature_range("18 to 24 degrees Celsius") == (64, 75)
        assert parse_temperature_range("between 60 and 80 fahrenheit") == (60, 80)

    def test_unmarked_small_values_are_celsius(self):
        assert parse_temperature_range("18-24") == (64, 75)

    def test_unmarked_large_values_are_fahrenheit(self):
        assert parse_temperature_range("Keep between 65 and 75 degrees") == (65, 75)

    def test_explicit_fahrenheit_overrides_magnitude(self):
        assert parse_temperature_range("40-45F") == (40, 45)

    def test_first_unit_mentioned_labels_the_range(self):
        assert parse_temperature_range("65-75°F (18-24°C)") == (65, 75)
        assert parse_temperature_range("18-24°C (65-75°F)") == (64, 75)

    def test_single_value_becomes_band(self):
        assert parse_temperature_range("70°F") == (65, 75)
        assert parse_temperature_range("around 20°C") == (63, 73)

    def test_reversed_range_is_ordered(self):
        assert parse_temperature_range("75-65°F") == (65, 75)

    def test_clamped_to_bounds(self):
        assert parse_temperature_range("100-110°F") == (95, 95)
        assert parse_temperature_range("20-35°F") == (40, 40)
        assert parse_temperature_range("0-40°C") == (40, 95)

    def test_result_has_named_fields(self):
        result = parse_temperature_range("65-75°F")
        assert result.min_f == 65
        assert result.max_f == 75

    @pytest.mark.parametrize("text", [None, "", "warm and cozy"])
    def test_unrecognized_text_returns_none(self, text):
        assert parse_temperature_range(text) is None


class TestParseLightLevel:
    """Tests for parse_light_level."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("bright indirect", LightLevel.BRIGHT),
            ("Bright Indirect", LightLevel.BRIGHT),
            ("indirect light", LightLevel.BRIGHT),
            ("bright light", LightLevel.BRIGHT),
            ("bright direct sun", LightLevel.DIRECT),
            ("Direct Sun", LightLevel.DIRECT),
            ("full sun", LightLevel.DIRECT),
            ("low light", LightLevel.LOW),
            ("Low Light", LightLevel.LOW),
            ("medium light", LightLevel.MEDIUM),
            ("moderate light", LightLevel.MEDIUM),
        ],
    )
    def test_phrases(self, text, expected):
        assert parse_light_level(text) == expected

    def test_low_must_be_a_word(self):
        assert parse_light_level("a yellow window") is None

    @pytest.mark.parametrize("text", [None, "", "partial shade"])
    def test_unrecognized_text_returns_none(self, text):
        assert parse_light_level(text) is None


class TestParseWaterAmount:
    """Tests for parse_water_amount."""

    @pytest.mark.parametrize(
        "text, amount, unit",
        [
            ("250 ml", 250.0, WaterUnit.MILLILITERS),
            ("250-300 ml", 275.0, WaterUnit.MILLILITERS),
            ("about 500ml for a 6-inch pot", 500.0, WaterUnit.MILLILITERS),
            ("200 milliliters", 200.0, WaterUnit.MILLILITERS),
            ("1/2 cup", 0.5, WaterUnit.CUPS),
            ("1 1/2 cups", 1.5, WaterUnit.CUPS),
            ("1 to 2 cups", 1.5, WaterUnit.CUPS),
            ("1.5 L", 1.5, WaterUnit.LITERS),
            ("1 liter", 1.0, WaterUnit.LITERS),
            ("2 litres", 2.0, WaterUnit.LITERS),
            ("8 fl oz", 8.0, WaterUnit.OUNCES),
            ("6 ounces", 6.0, WaterUnit.OUNCES),
            ("half a cup", 0.5, WaterUnit.CUPS),
            ("a cup of water", 1.0, WaterUnit.CUPS),
            ("two cups", 2.0, WaterUnit.CUPS),
        ],
    )
    def test_phrases(self, text, amount, unit):
        result = parse_water_amount(text)
        assert result is not None
        assert result.amount == pytest.approx(amount)
        assert result.unit == unit

    @pytest.mark.parametrize("text", [None, "", "water thoroughly until it drains", "6-inch pot"])
    def test_unrecognized_text_returns_none(self, text):
        assert parse_water_amount(text) is None
