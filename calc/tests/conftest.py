"""Shared test fixtures for the calculator test suite."""

import sys
from pathlib import Path

import pytest

# Ensure calc/ is on the path so `rr_calc` imports work
CALC_ROOT = Path(__file__).parent.parent
if str(CALC_ROOT) not in sys.path:
    sys.path.insert(0, str(CALC_ROOT))

from rr_calc.models import (
    BuildingLevels, PlayerStats, Profile, ResourceType, TaxInputs, WarInputs, WorkInputs,
)


@pytest.fixture
def sample_work():
    """Work inputs from the dashboard defaults."""
    return WorkInputs(
        user_level=20,
        resource_koef=80,
        factory_level=10,
        work_exp=50,
        dep_of_res=10,
        resource_type=ResourceType.STANDARD,
    )


@pytest.fixture
def sample_buildings():
    return BuildingLevels(
        hospital=5, military_base=6, school=5, sea_port=4, missile_system=6,
        power_plant=7, spaceport=0, airport=6, refill_station=0,
    )


@pytest.fixture
def sample_stats():
    return PlayerStats(level=20, strength=50, knowledge=30, endurance=40, nation_bonus=0.05)


@pytest.fixture
def plain_war():
    """War inputs with both the distance penalty and the jitter switched off."""
    return WarInputs(
        military_index=10,
        missile_system_diff=-100,
        sea_port=4,
        airport=6,
        military_academy=5,
        troops_alpha=150000,
        apply_distance_penalty=False,
        distance_penalty_pct=15,
        randomness=False,
    )


@pytest.fixture
def default_profile():
    return Profile()


@pytest.fixture
def gold_profile():
    return Profile(
        name="Gold Miner",
        active_region="Berlin",
        work=WorkInputs(resource_type=ResourceType.GOLD),
        tax=TaxInputs(tax_rate=10),
    )
