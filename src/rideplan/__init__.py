"""Trip planning and fare estimation core for the rider request screen."""

from rideplan.catalog import PAYMENT_METHODS, TIP_OPTIONS, VEHICLE_TIERS, VehicleTier
from rideplan.fare import FareEstimator, FareQuote
from rideplan.geo import Destination, GeoPoint, decode
from rideplan.planner import RouteResult, TripPlanner
from rideplan.selection import TripSelection

__all__ = [
    "PAYMENT_METHODS",
    "TIP_OPTIONS",
    "VEHICLE_TIERS",
    "Destination",
    "FareEstimator",
    "FareQuote",
    "GeoPoint",
    "RouteResult",
    "TripPlanner",
    "TripSelection",
    "VehicleTier",
    "decode",
]
