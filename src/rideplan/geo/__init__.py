from .models import Destination, GeoPoint
from .encoded_polyline import decode, encode

__all__ = ["Destination", "GeoPoint", "decode", "encode"]
