"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.
"""

from .cache import CachePort
from .graph import GraphRepositoryPort, RouteSolverPort
from .places import GazetteerPort, GeocoderPort
from .rendering import MapRendererPort

__all__ = [
    # Graph
    "GraphRepositoryPort",
    "RouteSolverPort",
    # Places
    "GazetteerPort",
    "GeocoderPort",
    # Rendering
    "MapRendererPort",
    # Cache
    "CachePort",
]
