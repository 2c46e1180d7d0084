"""Encoded polyline codec.

Decoding follows the Google encoded polyline algorithm: each coordinate
is a zig-zag signed delta from the previous point, split into 5-bit
chunks (least significant first) and offset by 63 into printable ASCII.
A chunk with the 0x20 bit set is followed by another chunk of the same
value.
"""

import polyline as polyline_codec

from rideplan.core.exceptions import DecodeError
from rideplan.geo.models import GeoPoint

_CHAR_OFFSET = 63
_MAX_CHAR = 126
_CHUNK_MASK = 0x1F
_CONTINUATION_BIT = 0x20


def _decode_value(encoded: str, index: int) -> tuple[int, int]:
    """Decode one signed delta starting at index; return (delta, next index)."""
    result = 0
    shift = 0
    while True:
        if index >= len(encoded):
            raise DecodeError(
                "Polyline ended inside a value",
                details={"position": index},
            )
        code = ord(encoded[index])
        if code < _CHAR_OFFSET or code > _MAX_CHAR:
            raise DecodeError(
                f"Invalid polyline character {encoded[index]!r}",
                details={"position": index},
            )
        byte = code - _CHAR_OFFSET
        index += 1
        result |= (byte & _CHUNK_MASK) << shift
        shift += 5
        if byte < _CONTINUATION_BIT:
            break

    delta = ~(result >> 1) if result & 1 else result >> 1
    return delta, index


def decode(encoded: str, precision: int = 5) -> list[GeoPoint]:
    """Decode an encoded polyline into an ordered list of points.

    The whole string must be consumed as complete latitude/longitude pairs;
    anything else raises DecodeError instead of returning a partial path.
    """
    factor = 10**precision
    points: list[GeoPoint] = []
    index = 0
    lat = 0
    lng = 0

    while index < len(encoded):
        dlat, index = _decode_value(encoded, index)
        if index >= len(encoded):
            raise DecodeError(
                "Polyline ended after a latitude without its longitude",
                details={"position": index, "points_decoded": len(points)},
            )
        dlng, index = _decode_value(encoded, index)
        lat += dlat
        lng += dlng
        try:
            points.append(GeoPoint(latitude=lat / factor, longitude=lng / factor))
        except ValueError as e:
            raise DecodeError(
                "Polyline decoded to an out-of-range coordinate",
                details={"position": index, "latitude": lat / factor, "longitude": lng / factor},
            ) from e

    return points


def encode(points: list[GeoPoint], precision: int = 5) -> str:
    """Encode points into a polyline string."""
    return polyline_codec.encode([p.as_tuple() for p in points], precision)
