"""
Shared test fixtures.

Every test runs against default settings: ``RIDEFARE_*`` variables are
removed, the module-level ``settings`` objects are replaced with a fresh
``Settings`` built without a ``.env`` file, and the cached pricing engine
is rebuilt from them.
"""

import os

import pytest

from ridefare import config, demo
from ridefare.config import Settings
from ridefare.domain.entities import Ride
from ridefare.domain.enums import RideType
from ridefare.domain.pricing import PricingEngine, get_pricing_engine


@pytest.fixture(autouse=True)
def default_settings(monkeypatch) -> Settings:
    for name in list(os.environ):
        if name.upper().startswith("RIDEFARE_"):
            monkeypatch.delenv(name)

    fresh = Settings(_env_file=None)
    monkeypatch.setattr(config, "settings", fresh)
    monkeypatch.setattr(demo, "settings", fresh)
    get_pricing_engine.cache_clear()
    yield fresh
    get_pricing_engine.cache_clear()


@pytest.fixture
def engine(default_settings) -> PricingEngine:
    return PricingEngine.from_settings(default_settings)


@pytest.fixture
def standard_ride() -> Ride:
    return Ride(101, "Downtown", "Airport", 12.3, RideType.STANDARD)


@pytest.fixture
def premium_ride() -> Ride:
    return Ride(102, "Home", "Office", 5.5, RideType.PREMIUM)


@pytest.fixture
def sample_rides() -> list[Ride]:
    return [
        Ride(101, "Downtown", "Airport", 12.3, RideType.STANDARD),
        Ride(102, "Home", "Office", 5.5, RideType.PREMIUM),
        Ride(103, "Mall", "Train Station", 3.2, RideType.STANDARD),
        Ride(104, "Hotel", "Beach", 8.75, RideType.PREMIUM),
    ]
