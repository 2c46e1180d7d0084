"""Helpers for consuming place autocomplete and place details payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from rideplan.core.exceptions import PlaceNotFound
from rideplan.geo.models import Destination


class PlacePrediction(BaseModel):
    model_config = ConfigDict(frozen=True)

    place_id: str
    description: str


def should_search(query: str, min_length: int = 3) -> bool:
    """Autocomplete only runs once the query is long enough."""
    return len(query) >= min_length


def parse_predictions(payload: dict[str, Any]) -> list[PlacePrediction]:
    """Extract suggestions from an autocomplete response.

    Entries that are not objects or lack a place_id cannot be selected and
    are skipped.
    """
    predictions = payload.get("predictions") or []
    return [
        PlacePrediction(place_id=p["place_id"], description=p.get("description", ""))
        for p in predictions
        if isinstance(p, dict) and p.get("place_id")
    ]


def destination_from_details(details: dict[str, Any], description: str) -> Destination:
    """Build the trip destination from a place details response."""
    geometry = (details.get("result") or {}).get("geometry") or {}
    location = geometry.get("location")
    if not location or location.get("lat") is None or location.get("lng") is None:
        raise PlaceNotFound(
            "Location not found in place details",
            details={"description": description, "status": details.get("status")},
        )
    return Destination(latitude=location["lat"], longitude=location["lng"], label=description)
