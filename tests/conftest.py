import pytest

from rideplan.catalog import VehicleTier
from rideplan.geo.models import Destination, GeoPoint
from rideplan.planner import TripPlanner
from rideplan.settings import Settings
from tests.factories import make_directions


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def origin() -> GeoPoint:
    return GeoPoint(latitude=41.0082, longitude=28.9784)


@pytest.fixture
def destination() -> Destination:
    return Destination(latitude=41.0422, longitude=29.0083, label="Beşiktaş, İstanbul")


@pytest.fixture
def directions() -> dict:
    return make_directions()


@pytest.fixture
def planner(settings: Settings) -> TripPlanner:
    return TripPlanner(settings=settings)


@pytest.fixture
def sari_tier() -> VehicleTier:
    return VehicleTier(
        id="sari", display_name="Sarı Taksi", base_price=42.00, price_per_km=28.00, min_price=135.00
    )
