"""Screen-level driver that recovers planning errors as rider notices.

The presentation layer calls these handlers from its event callbacks.
Every PlanningError is caught here and turned into a notice string; the
handlers never raise for rider-facing failures.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict

from rideplan.catalog import PAYMENT_METHODS, TIP_OPTIONS, VEHICLE_TIERS
from rideplan.core.exceptions import PlanningError, rider_notice
from rideplan.dispatch import DispatchRequest
from rideplan.fare import FareEstimator, price_label
from rideplan.geo.models import Destination, GeoPoint
from rideplan.geo.viewport import MapRegion, region_around
from rideplan.places import PlacePrediction, parse_predictions, should_search
from rideplan.plan_logging import log_context
from rideplan.planner import RouteResult, TripPlanner
from rideplan.selection import TripSelection
from rideplan.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class TierRow(BaseModel):
    """One entry of the tier picker."""

    model_config = ConfigDict(frozen=True)

    tier_id: str
    display_name: str
    price_label: str
    selected: bool


class TripScreen:
    def __init__(self, origin: GeoPoint | None = None, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.estimator = FareEstimator(VEHICLE_TIERS)
        self.planner = TripPlanner(estimator=self.estimator, settings=self.settings)
        self.selection = TripSelection.create(VEHICLE_TIERS, PAYMENT_METHODS, TIP_OPTIONS)
        self.origin = origin
        self.notice: str | None = None

    def _recover(self, error: PlanningError) -> None:
        self.notice = rider_notice(error)
        logger.warning("%s: %s", type(error).__name__, error.message)

    def suggestions(self, query: str, payload: dict[str, Any] | None) -> list[PlacePrediction]:
        """Suggestions to show for the current query text."""
        if payload is None or not should_search(query, self.settings.places.min_query_length):
            return []
        return parse_predictions(payload)

    def on_directions(
        self,
        destination: Destination,
        directions: dict[str, Any],
        request_token: int | None = None,
    ) -> RouteResult | None:
        if self.origin is None:
            logger.info("Ignoring directions response, rider location unknown")
            return None
        try:
            route = self.planner.plan_route(self.origin, destination, directions, request_token)
        except PlanningError as e:
            self._recover(e)
            return None
        self.notice = None
        return route

    def on_destination_cleared(self) -> None:
        self.planner.clear_route()

    def select_tier(self, tier_id: str) -> None:
        try:
            self.selection.select_tier(tier_id)
        except PlanningError as e:
            self._recover(e)

    def select_payment_method(self, method_id: str) -> None:
        try:
            self.selection.select_payment_method(method_id)
        except PlanningError as e:
            self._recover(e)

    def select_tip_amount(self, amount: float) -> None:
        try:
            self.selection.select_tip_amount(amount)
        except PlanningError as e:
            self._recover(e)

    def tier_rows(self) -> list[TierRow]:
        distance_km = self.planner.distance_km
        return [
            TierRow(
                tier_id=tier.id,
                display_name=tier.display_name,
                price_label=price_label(
                    self.estimator, tier, distance_km, self.settings.fare.currency_symbol
                ),
                selected=tier.id == self.selection.selected_tier_id,
            )
            for tier in VEHICLE_TIERS
        ]

    def map_region(self) -> MapRegion:
        focus = self.planner.destination or self.origin
        return region_around(focus, self.settings.map)

    @property
    def call_button_label(self) -> str:
        return f"Taksi Çağır{self.selection.tip_label}"

    def confirm(self) -> DispatchRequest | None:
        """Build the dispatch payload and reset the selection for the next trip."""
        try:
            request = self.planner.build_dispatch_request(self.selection)
        except PlanningError as e:
            self._recover(e)
            return None

        with log_context(tier_id=request.tier_id, payment_method_id=request.payment_method_id):
            logger.info("Trip requested: %.2f km", request.distance_km)
        self.selection = TripSelection.create(VEHICLE_TIERS, PAYMENT_METHODS, TIP_OPTIONS)
        self.notice = None
        return request
