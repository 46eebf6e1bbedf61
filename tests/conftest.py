"""Shared test fixtures and configuration."""
import pytest
from datetime import date
from pathlib import Path

from estimator.config import AuditConfig
from estimator.efficiency_db import get_database
from schemas.enums import AgeRange, ClimateZone, EquipmentType
from schemas.home import EnergyBill, Equipment, Home, Room


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config():
    return AuditConfig()


@pytest.fixture
def db():
    """Efficiency database built from the packaged YAML tables."""
    return get_database()


@pytest.fixture
def sample_home():
    """Moderate-climate 1500 sq ft home with aging HVAC and one bill."""
    return Home(
        name="Maple Street",
        address="12 Maple St",
        climate_zone=ClimateZone.MODERATE,
        rooms=[
            Room(name="Living Room", square_footage=900),
            Room(name="Bedroom", square_footage=600),
        ],
        equipment=[
            Equipment(type=EquipmentType.CENTRAL_AC, age_range=AgeRange.YEARS_15_TO_20),
            Equipment(type=EquipmentType.FURNACE, age_range=AgeRange.YEARS_20_PLUS),
        ],
        energy_bills=[
            EnergyBill(
                billing_period_start=date(2026, 1, 1),
                billing_period_end=date(2026, 1, 31),
                total_kwh=600,
                total_cost=90,
            ),
        ],
    )
