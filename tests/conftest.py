"""
Shared test fixtures for the care engine test suite.

Provides:
- Plant profiles for common containers
- Plant care states with and without a care plan
- A mock store for the apply session service

Usage:
    def test_example(tropical_profile):
        assert recommend_watering(tropical_profile).amount > 0
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from careengine.domain.care_plan import CareAdvice, CarePlanRecord, PlantCareState, TemperatureRange
from careengine.domain.care_profile import PlantCareProfile
from careengine.domain.care_recommendation import recommend_watering
from careengine.enums import (
    CareEnvironment,
    CarePlanSource,
    LightLevel,
    PotMaterial,
    Season,
    WaterUnit,
    WateringCategory,
)

# ---------------------------------------------------------------------------
# Logging - keep test output clean
# ---------------------------------------------------------------------------
logging.getLogger("careengine").setLevel(logging.WARNING)


# ========================== Profile Fixtures ===============================


@pytest.fixture
def tropical_profile():
    """10-inch tropical plant in summer, bright indirect light, indoors."""
    return PlantCareProfile(
        diameter_inches=10,
        category=WateringCategory.TROPICAL,
        material=PotMaterial.UNKNOWN,
        light_level=LightLevel.BRIGHT,
        season=Season.SUMMER,
        environment=CareEnvironment.INDOOR,
    )


@pytest.fixture
def small_profile():
    """6-inch tropical plant, medium light, summer."""
    return PlantCareProfile(
        diameter_inches=6,
        category=WateringCategory.TROPICAL,
        season=Season.SUMMER,
    )


# ========================== State Fixtures =================================


@pytest.fixture
def plant_state(small_profile):
    """Stored state whose water amount matches the engine's recommendation."""
    return PlantCareState(
        plant_id=1,
        profile=small_profile,
        watering_interval_days=7,
        fertilizing_interval_days=30,
        repot_interval_months=12,
        humidity_percent=50,
        temperature_range=TemperatureRange(65, 80),
        water_amount=float(recommend_watering(small_profile).amount),
        water_unit=WaterUnit.MILLILITERS,
        care_plan=None,
    )


@pytest.fixture
def existing_care_plan():
    """User-created care plan record."""
    created = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return CarePlanRecord(
        source=CarePlanSource.USER,
        watering_interval=7,
        fertilizing_interval=30,
        light_requirements="Medium light",
        humidity_requirements="Average room humidity",
        temperature_requirements="65-80°F",
        seasonal_notes="Water less in winter",
        created_at=created,
        last_updated=created,
        user_approved=True,
    )


@pytest.fixture
def plant_state_with_plan(plant_state, existing_care_plan):
    return PlantCareState(
        plant_id=plant_state.plant_id,
        profile=plant_state.profile,
        watering_interval_days=plant_state.watering_interval_days,
        fertilizing_interval_days=plant_state.fertilizing_interval_days,
        repot_interval_months=plant_state.repot_interval_months,
        humidity_percent=plant_state.humidity_percent,
        temperature_range=plant_state.temperature_range,
        water_amount=plant_state.water_amount,
        water_unit=plant_state.water_unit,
        care_plan=existing_care_plan,
    )


@pytest.fixture
def advice():
    """Typical advice text covering every category."""
    return CareAdvice(
        watering_frequency="Water every 5-7 days",
        fertilizing_frequency="Fertilize monthly during spring and summer",
        repotting="Repot every 1-2 years",
        light_intensity="Bright indirect light",
        humidity="High humidity",
        temperature="18-24°C",
        watering_amount="1 1/2 cups",
        seasonal_notes="Reduce watering in winter",
    )


# ========================== Service Fixtures ===============================


@pytest.fixture
def mock_store(plant_state):
    """Store mock that returns ``plant_state`` until told otherwise."""
    store = Mock()
    store.get_state.return_value = plant_state
    store.save_state.return_value = None
    return store
