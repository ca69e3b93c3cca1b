"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    EmptyGraphError,
    FormatError,
    GazetteerError,
    GeoRouteError,
    GraphIOError,
    LocationNotFoundError,
    NoRouteError,
    RenderingError,
)
from .models import Coordinate, Location, RoutePlan, RouteResult

__all__ = [
    # Models
    "Coordinate",
    "Location",
    "RouteResult",
    "RoutePlan",
    # Errors
    "GeoRouteError",
    "FormatError",
    "GraphIOError",
    "EmptyGraphError",
    "NoRouteError",
    "LocationNotFoundError",
    "GazetteerError",
    "RenderingError",
]
