"""Map viewport hints emitted by the planner.

The planner never moves the map itself; it publishes the region the
presentation layer should fit so that both trip ends are visible.
"""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from rideplan.geo.models import GeoPoint
from rideplan.settings import MapSettings


class EdgePadding(BaseModel):
    model_config = ConfigDict(frozen=True)

    top: int = Field(ge=0)
    right: int = Field(ge=0)
    bottom: int = Field(ge=0)
    left: int = Field(ge=0)

    @classmethod
    def uniform(cls, value: int) -> "EdgePadding":
        return cls(top=value, right=value, bottom=value, left=value)


class ViewportHint(BaseModel):
    """Bounding box to fit on the map plus padding in pixels."""

    model_config = ConfigDict(frozen=True)

    north: float
    south: float
    east: float
    west: float
    edge_padding: EdgePadding

    @property
    def center(self) -> GeoPoint:
        return GeoPoint(
            latitude=(self.north + self.south) / 2,
            longitude=(self.east + self.west) / 2,
        )

    def contains(self, point: GeoPoint) -> bool:
        return (
            self.south <= point.latitude <= self.north
            and self.west <= point.longitude <= self.east
        )


class MapRegion(BaseModel):
    """Centered region with span deltas, as used for the initial map view."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    latitude_delta: float
    longitude_delta: float


def fit_coordinates(points: Iterable[GeoPoint], padding: int = 100) -> ViewportHint:
    """Build the hint that fits every point inside the viewport."""
    points = list(points)
    if not points:
        raise ValueError("At least one point is required to fit a viewport")

    latitudes = [p.latitude for p in points]
    longitudes = [p.longitude for p in points]
    return ViewportHint(
        north=max(latitudes),
        south=min(latitudes),
        east=max(longitudes),
        west=min(longitudes),
        edge_padding=EdgePadding.uniform(padding),
    )


def region_around(point: GeoPoint | None, settings: MapSettings) -> MapRegion:
    """Region centered on a point, or the configured initial region when None."""
    if point is None:
        return MapRegion(
            latitude=settings.initial_latitude,
            longitude=settings.initial_longitude,
            latitude_delta=settings.latitude_delta,
            longitude_delta=settings.longitude_delta,
        )
    return MapRegion(
        latitude=point.latitude,
        longitude=point.longitude,
        latitude_delta=settings.latitude_delta,
        longitude_delta=settings.longitude_delta,
    )
