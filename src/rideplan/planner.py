"""Trip planning session: route state, fare quotes and the dispatch payload."""

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from rideplan.core.exceptions import (
    DecodeError,
    NoRouteFound,
    PreconditionError,
    StaleRouteResponse,
)
from rideplan.dispatch import DispatchRequest
from rideplan.fare import FareEstimator, FareQuote
from rideplan.geo.encoded_polyline import decode
from rideplan.geo.models import Destination, GeoPoint
from rideplan.geo.viewport import ViewportHint, fit_coordinates
from rideplan.plan_logging import log_request_context
from rideplan.selection import TripSelection
from rideplan.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class PlannerState(str, Enum):
    IDLE = "idle"
    ROUTE_READY = "route_ready"


class RouteResult(BaseModel):
    """Decoded route geometry and distance from one directions response."""

    model_config = ConfigDict(frozen=True)

    points: tuple[GeoPoint, ...] = ()
    distance_km: float = Field(ge=0)


class _LegDistance(BaseModel):
    value: float = Field(ge=0)


class _Leg(BaseModel):
    distance: _LegDistance


class _OverviewPolyline(BaseModel):
    points: str


class DirectionsRoute(BaseModel):
    overview_polyline: _OverviewPolyline
    legs: list[_Leg] = Field(default_factory=list)


class DirectionsResponse(BaseModel):
    """Directions service payload. Only the first route is ever read."""

    routes: list[dict[str, Any]] = Field(default_factory=list)
    status: str | None = None

    def primary_route(self) -> DirectionsRoute:
        if not self.routes:
            raise NoRouteFound("No routes found in directions response", details={"status": self.status})
        try:
            route = DirectionsRoute.model_validate(self.routes[0])
        except PydanticValidationError as e:
            raise NoRouteFound(
                "Primary route is missing polyline or leg data",
                details={"errors": e.errors(include_url=False)},
            ) from e
        if not route.legs:
            raise NoRouteFound("Primary route has no legs", details={"status": self.status})
        return route


def _parse_directions(payload: dict[str, Any]) -> DirectionsResponse:
    try:
        return DirectionsResponse.model_validate(payload)
    except PydanticValidationError as e:
        raise NoRouteFound(
            "Directions response is malformed",
            details={"errors": e.errors(include_url=False)},
        ) from e


class TripPlanner:
    """Owns the route state of one planning session.

    A successful plan_route replaces the held route in a single assignment;
    failures leave the previous route, destination and viewport untouched.
    """

    def __init__(
        self,
        estimator: FareEstimator | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.estimator = estimator or FareEstimator()
        self.route: RouteResult | None = None
        self.origin: GeoPoint | None = None
        self.destination: Destination | None = None
        self.last_viewport: ViewportHint | None = None
        self._latest_token = 0

    @property
    def state(self) -> PlannerState:
        return PlannerState.IDLE if self.route is None else PlannerState.ROUTE_READY

    @property
    def distance_km(self) -> float | None:
        return self.route.distance_km if self.route is not None else None

    @property
    def can_dispatch(self) -> bool:
        return self.state == PlannerState.ROUTE_READY

    def next_request_token(self) -> int:
        """Issue a token for a directions fetch; only the newest token is accepted."""
        self._latest_token += 1
        return self._latest_token

    def plan_route(
        self,
        origin: GeoPoint,
        destination: Destination,
        directions: DirectionsResponse | dict[str, Any],
        request_token: int | None = None,
    ) -> RouteResult:
        """Decode a fetched directions response into the current route."""
        token = request_token if request_token is not None else self._latest_token
        with log_request_context(token, destination=destination.label):
            if request_token is not None and request_token < self._latest_token:
                logger.info(
                    "Discarding stale directions response (token %d, latest %d)",
                    request_token,
                    self._latest_token,
                )
                raise StaleRouteResponse(
                    "Directions response superseded by a newer request",
                    details={"request_token": request_token, "latest_token": self._latest_token},
                )

            try:
                if isinstance(directions, dict):
                    directions = _parse_directions(directions)
                primary = directions.primary_route()
                points = decode(
                    primary.overview_polyline.points,
                    precision=self.settings.route.polyline_precision,
                )
            except (NoRouteFound, DecodeError) as e:
                logger.warning("Route planning failed, keeping previous route: %s", e)
                raise

            route = RouteResult(
                points=tuple(points),
                distance_km=primary.legs[0].distance.value / 1000,
            )
            viewport = fit_coordinates(
                [origin, destination.to_point()],
                padding=self.settings.map.edge_padding,
            )

            self.route = route
            self.origin = origin
            self.destination = destination
            self.last_viewport = viewport
            logger.info(
                "Route ready: %d points, %.2f km", len(route.points), route.distance_km
            )
            return route

    def clear_route(self) -> None:
        """Return to idle when the rider clears the destination."""
        # Responses for tokens issued before the clear are stale.
        self._latest_token += 1
        self.route = None
        self.destination = None
        self.last_viewport = None
        logger.debug("Route cleared")

    def fare_quotes(self) -> list[FareQuote]:
        return self.estimator.quotes(self.distance_km)

    def build_dispatch_request(self, selection: TripSelection) -> DispatchRequest:
        """Assemble the trip request from the selection and the current route."""
        if self.route is None or self.origin is None or self.destination is None:
            raise PreconditionError("Cannot request a trip before a route is planned")

        return DispatchRequest(
            tier_id=selection.selected_tier_id,
            payment_method_id=selection.payment_method_id,
            meter_enabled=selection.meter_enabled,
            tip_amount=selection.tip_amount,
            distance_km=self.route.distance_km,
            origin=self.origin,
            destination=self.destination.to_point(),
        )
