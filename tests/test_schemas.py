"""
Schema Tests
============
Tests for the pydantic input models and profile building.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from careengine.config import EngineConfig
from careengine.domain.apply_draft import ApplyFlags
from careengine.domain.care_plan import CareAdvice
from careengine.enums import (
    CareEnvironment,
    FeedingLevel,
    FertilizerType,
    LightLevel,
    PotMaterial,
    Season,
    WateringCategory,
    WeatherCondition,
)
from careengine.schemas import (
    ApplySelectionRequest,
    CareAdviceRequest,
    PlantProfileRequest,
    WeatherConditionsRequest,
    build_profile,
)


class TestPlantProfileRequest:
    """Tests for PlantProfileRequest coercion."""

    def test_free_text_fields_are_coerced(self):
        request = PlantProfileRequest(
            diameter_inches=6,
            common_names=["Boston Fern"],
            material="clay",
            light_level="bright indirect",
            season="Autumn",
            environment="Outdoor",
            fertilizer_type="slow-release",
            feeding_level="Heavy",
        )

        assert request.category is None
        assert request.material == PotMaterial.CLAY
        assert request.light_level == LightLevel.BRIGHT
        assert request.season == Season.FALL
        assert request.environment == CareEnvironment.OUTDOOR
        assert request.fertilizer_type == FertilizerType.SLOW_RELEASE
        assert request.feeding_level == FeedingLevel.HEAVY

    def test_missing_category_is_classified(self):
        request = PlantProfileRequest(diameter_inches=6, common_names=["Boston Fern"], season="summer")
        profile = request.to_profile()

        assert profile.category == WateringCategory.FERN
        assert profile.environment == CareEnvironment.INDOOR
        assert profile.fertilizer_type == FertilizerType.LIQUID

    def test_explicit_category_wins(self):
        request = PlantProfileRequest(
            diameter_inches=6,
            category="Cactus",
            common_names=["Boston Fern"],
            season="summer",
        )
        assert request.to_profile().category == WateringCategory.CACTUS

    def test_blank_category_means_classify(self):
        request = PlantProfileRequest(diameter_inches=6, category=" ", scientific_name="Monstera deliciosa")
        assert request.category is None
        assert request.to_profile().category == WateringCategory.TROPICAL

    def test_diameter_is_required(self):
        with pytest.raises(PydanticValidationError):
            PlantProfileRequest(common_names=["Boston Fern"])

    def test_to_profile_defaults(self):
        request = PlantProfileRequest(diameter_inches=8, height_inches=7, season="winter")
        profile = request.to_profile(
            default_environment=CareEnvironment.GREENHOUSE,
            default_fertilizer=FertilizerType.GRANULAR,
        )

        assert profile.height_inches == 7
        assert profile.environment == CareEnvironment.GREENHOUSE
        assert profile.fertilizer_type == FertilizerType.GRANULAR
        assert profile.season == Season.WINTER


class TestBuildProfile:
    """Tests for build_profile."""

    def test_config_supplies_defaults(self):
        config = EngineConfig(default_environment="balcony", default_fertilizer="granular", hemisphere="northern")
        profile = build_profile({"diameter_inches": 5, "common_names": ["Sweet Basil"], "season": "spring"}, config)

        assert profile.category == WateringCategory.HERB
        assert profile.environment == CareEnvironment.BALCONY
        assert profile.fertilizer_type == FertilizerType.GRANULAR
        assert profile.season == Season.SPRING

    def test_record_values_override_config(self):
        config = EngineConfig(default_environment="balcony")
        profile = build_profile({"diameter_inches": 5, "environment": "indoor", "season": "fall"}, config)
        assert profile.environment == CareEnvironment.INDOOR


class TestCareAdviceRequest:
    """Tests for CareAdviceRequest."""

    def test_blank_strings_become_none(self):
        request = CareAdviceRequest(watering_frequency="every 5-7 days", humidity="", temperature="   ")

        assert request.humidity is None
        assert request.temperature is None
        assert request.watering_frequency == "every 5-7 days"

    def test_to_domain(self):
        advice = CareAdviceRequest(light_intensity="bright indirect").to_domain()
        assert advice == CareAdvice(light_intensity="bright indirect")


class TestWeatherConditionsRequest:
    """Tests for WeatherConditionsRequest."""

    def test_condition_text_is_normalized(self):
        request = WeatherConditionsRequest(temperature_f=70, humidity=0.5, condition="Mostly Cloudy")
        assert request.condition == WeatherCondition.MOSTLY_CLOUDY

    def test_unknown_condition_is_other(self):
        request = WeatherConditionsRequest(temperature_f=70, humidity=0.5, condition="hail")
        assert request.condition == WeatherCondition.OTHER

    def test_condition_defaults_to_other(self):
        assert WeatherConditionsRequest(temperature_f=70, humidity=0.5).condition == WeatherCondition.OTHER

    @pytest.mark.parametrize("humidity", [-0.1, 1.5])
    def test_humidity_must_be_a_fraction(self, humidity):
        with pytest.raises(PydanticValidationError):
            WeatherConditionsRequest(temperature_f=70, humidity=humidity)


class TestApplySelectionRequest:
    """Tests for ApplySelectionRequest."""

    def test_defaults_select_everything(self):
        assert ApplySelectionRequest().to_flags() == ApplyFlags()

    def test_to_flags(self):
        flags = ApplySelectionRequest(light=False, water_amount=False).to_flags()

        assert flags == ApplyFlags(light=False, water_amount=False)
        assert flags.any()
