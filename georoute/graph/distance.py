"""Great-circle distance between coordinates."""

from __future__ import annotations

import math

from ..domain.models import Coordinate

EARTH_RADIUS_MILES = 3958.8


def haversine_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in miles between two lat/lon points."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(abs(lat2 - lat1))
    dlambda = math.radians(abs(lon2 - lon1))

    a = (
        math.sin(dphi / 2.0) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2.0) ** 2
    )
    # rounding can push a a hair past 1 for antipodal points
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def distance(a: Coordinate, b: Coordinate) -> float:
    """Return the distance in miles between ``a`` and ``b``.

    Symmetric, and exactly zero when both coordinates are equal.
    """
    return haversine_miles(a.latitude, a.longitude, b.latitude, b.longitude)
