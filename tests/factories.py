"""Builders for directions and places payloads shaped like the Google APIs."""

from typing import Any

CANONICAL_POLYLINE = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"


def make_directions(points: str = CANONICAL_POLYLINE, distance_m: float = 12_345.0) -> dict[str, Any]:
    return {
        "status": "OK",
        "routes": [
            {
                "summary": "D100",
                "overview_polyline": {"points": points},
                "legs": [
                    {
                        "distance": {"text": "12.3 km", "value": distance_m},
                        "duration": {"text": "25 mins", "value": 1500},
                    }
                ],
            }
        ],
    }


def make_predictions(*descriptions: str) -> dict[str, Any]:
    return {
        "status": "OK",
        "predictions": [
            {"place_id": f"place-{i}", "description": description}
            for i, description in enumerate(descriptions)
        ],
    }


def make_place_details(lat: float, lng: float) -> dict[str, Any]:
    return {
        "status": "OK",
        "result": {"geometry": {"location": {"lat": lat, "lng": lng}}},
    }
