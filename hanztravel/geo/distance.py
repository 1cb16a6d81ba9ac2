"""
Great-circle distance between catalog locations.

Haversine formula on a spherical Earth, using the two-argument arctangent
form so antipodal inputs stay inside the function's domain.
"""

import math

from hanztravel.types import Location

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return great-circle distance in kilometres between two lat/lon pairs."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    lat1_r = math.radians(lat1)
    lat2_r = math.radians(lat2)

    s = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(d_lon / 2) ** 2
    )
    # Rounding can push s a hair outside [0, 1] near antipodes
    s = min(1.0, max(0.0, s))
    central_angle = 2 * math.atan2(math.sqrt(s), math.sqrt(1 - s))
    return EARTH_RADIUS_KM * central_angle


def distance(a: Location, b: Location) -> float:
    """Great-circle distance in km between two locations (0.0 when identical)."""
    return haversine_km(a.lat, a.lon, b.lat, b.lon)
