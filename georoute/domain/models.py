"""Immutable domain models for georoute.

All models are frozen dataclasses with slots. Coordinate doubles as the
identity of a graph vertex, so equality and hashing are exact over the
raw float values.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True, slots=True, order=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees.

    Values are stored exactly as given. No range check is applied
    because query points are not required to be valid vertices, and no
    rounding is applied because coordinates are used as dictionary keys.
    """

    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"

    def as_tuple(self) -> tuple[float, float]:
        """Return ``(latitude, longitude)``."""
        return (self.latitude, self.longitude)


@dataclass(frozen=True, slots=True)
class Location:
    """A named place resolved to a coordinate.

    Attributes:
        name: Place name as it was looked up (e.g., 'Durham NC')
        coordinate: Where the place is
    """

    name: str
    coordinate: Coordinate


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-route computation.

    Attributes:
        path: Ordered vertices from start to end, inclusive
        total_distance_miles: Sum of great-circle legs along the path
    """

    path: tuple[Coordinate, ...]
    total_distance_miles: float

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        return len(self.path)

    @property
    def start(self) -> Optional[Coordinate]:
        return self.path[0] if self.path else None

    @property
    def end(self) -> Optional[Coordinate]:
        return self.path[-1] if self.path else None


@dataclass(frozen=True, slots=True)
class RoutePlan:
    """Outcome of a full origin-to-destination request.

    Attributes:
        origin: Resolved origin place
        destination: Resolved destination place
        start: Graph vertex nearest to the origin
        end: Graph vertex nearest to the destination
        route: Shortest route between ``start`` and ``end``
        elapsed_ms: Time spent snapping, routing and summing
        map_path: Rendered map file, if one was requested
    """

    origin: Location
    destination: Location
    start: Coordinate
    end: Coordinate
    route: RouteResult
    elapsed_ms: float
    map_path: Optional[Path] = None
