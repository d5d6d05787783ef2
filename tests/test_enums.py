"""
Enum Tests
==========
Tests for season resolution and the tolerant ``from_text`` constructors.
"""

from datetime import datetime

import pytest

from careengine.enums import (
    CareEnvironment,
    FertilizerType,
    LightLevel,
    PotMaterial,
    Season,
    WaterUnit,
    WeatherCondition,
)


class TestSeason:
    """Tests for Season helpers."""

    @pytest.mark.parametrize(
        "month, hemisphere, expected",
        [
            (1, "northern", Season.WINTER),
            (4, "northern", Season.SPRING),
            (7, "northern", Season.SUMMER),
            (10, "northern", Season.FALL),
            (12, "northern", Season.WINTER),
            (1, "southern", Season.SUMMER),
            (4, "southern", Season.FALL),
            (7, "southern", Season.WINTER),
            (10, "southern", Season.SPRING),
        ],
    )
    def test_from_month(self, month, hemisphere, expected):
        assert Season.from_month(month, hemisphere) == expected

    def test_current_uses_given_time(self):
        july = datetime(2024, 7, 15)
        assert Season.current(july) == Season.SUMMER
        assert Season.current(july, hemisphere="southern") == Season.WINTER

    def test_from_text(self):
        assert Season.from_text("Autumn") == Season.FALL
        assert Season.from_text(" Summer ") == Season.SUMMER
        assert Season.from_text("monsoon", default=Season.WINTER) == Season.WINTER

    def test_str_is_value(self):
        assert str(Season.SPRING) == "spring"


class TestFromText:
    """Tests for the tolerant text constructors."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            (None, PotMaterial.UNKNOWN),
            ("", PotMaterial.UNKNOWN),
            ("Terracota", PotMaterial.TERRACOTTA),
            ("clay", PotMaterial.CLAY),
            ("Glazed Ceramic", PotMaterial.GLAZED_CERAMIC),
            ("glazed_ceramic", PotMaterial.GLAZED_CERAMIC),
            ("Fabric", PotMaterial.FABRIC),
            ("granite", PotMaterial.OTHER),
        ],
    )
    def test_pot_material(self, text, expected):
        assert PotMaterial.from_text(text) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Low Light", LightLevel.LOW),
            ("bright indirect", LightLevel.BRIGHT),
            ("Direct Sun", LightLevel.DIRECT),
            ("full sun", LightLevel.DIRECT),
            ("somewhere sunny", LightLevel.MEDIUM),
            (None, LightLevel.MEDIUM),
        ],
    )
    def test_light_level(self, text, expected):
        assert LightLevel.from_text(text) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("ml", WaterUnit.MILLILITERS),
            ("Cups", WaterUnit.CUPS),
            ("L", WaterUnit.LITERS),
            ("fl oz", WaterUnit.OUNCES),
            ("gallons", WaterUnit.MILLILITERS),
        ],
    )
    def test_water_unit(self, text, expected):
        assert WaterUnit.from_text(text) == expected

    def test_fertilizer_type(self):
        assert FertilizerType.from_text("Slow-Release") == FertilizerType.SLOW_RELEASE
        assert FertilizerType.from_text("granular") == FertilizerType.GRANULAR
        assert FertilizerType.from_text("") == FertilizerType.LIQUID
        assert FertilizerType.from_text("", default=FertilizerType.GRANULAR) == FertilizerType.GRANULAR

    def test_care_environment(self):
        assert CareEnvironment.from_text("Greenhouse") == CareEnvironment.GREENHOUSE
        assert CareEnvironment.from_text("attic") == CareEnvironment.INDOOR
        assert CareEnvironment.from_text("attic", default=CareEnvironment.BALCONY) == CareEnvironment.BALCONY


class TestWeatherCondition:
    """Tests for WeatherCondition groupings."""

    def test_groupings(self):
        assert WeatherCondition.MOSTLY_CLEAR.is_clear
        assert WeatherCondition.MOSTLY_CLOUDY.is_cloudy
        assert WeatherCondition.SNOW.is_precipitation
        assert not WeatherCondition.OTHER.is_clear
        assert not WeatherCondition.OTHER.is_precipitation
