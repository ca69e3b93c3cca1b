"""Route planner service - Main orchestrator.

Turns two place descriptions into a route over the coordinate graph:
resolve both places, snap them to their nearest vertices, compute the
shortest route and its length, and optionally draw it on a map.
"""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..domain.errors import LocationNotFoundError, RenderingError
from ..domain.models import Coordinate, Location, RoutePlan
from ..graph.search import nearest_vertex
from ..ports.graph import GraphRepositoryPort, RouteSolverPort
from ..ports.places import GazetteerPort, GeocoderPort
from ..ports.rendering import MapRendererPort

_LATLON = re.compile(r"^\s*([-+]?\d+(?:\.\d*)?|[-+]?\.\d+)\s*,\s*([-+]?\d+(?:\.\d*)?|[-+]?\.\d+)\s*$")


def parse_latlon(text: str) -> Optional[Coordinate]:
    """Parse a ``"lat,lon"`` literal. Returns None if ``text`` is not one."""
    match = _LATLON.match(text)
    if match is None:
        return None
    return Coordinate(float(match.group(1)), float(match.group(2)))


@dataclass
class RoutePlannerService:
    """Main service for planning routes between places.

    Attributes:
        graph_repository: Loads the coordinate graph
        route_solver: Computes shortest routes
        gazetteer: Local place-name index
        geocoder: Optional online fallback for unknown names
        map_renderer: Optional map rendering
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort
    gazetteer: Optional[GazetteerPort] = None
    geocoder: Optional[GeocoderPort] = None
    map_renderer: Optional[MapRendererPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def resolve(self, place: str) -> Location:
        """Resolve a place to a coordinate.

        A ``"lat,lon"`` literal is used as is. Otherwise the gazetteer
        is consulted, then the geocoder when one is configured.

        Raises:
            LocationNotFoundError: If no source knows the place.
        """
        point = parse_latlon(place)
        if point is not None:
            return Location(name=place.strip(), coordinate=point)

        if self.gazetteer is not None:
            location = self.gazetteer.lookup(place)
            if location is not None:
                return location

        if self.geocoder is not None:
            location = self.geocoder.geocode(place)
            if location is not None:
                self._logger.info("Place resolved by geocoder", extra={"place": place})
                return location

        raise LocationNotFoundError(f"Unknown place {place.strip()!r}", query=place)

    def plan(
        self,
        origin: str,
        destination: str,
        render_map: bool = False,
        map_output_path: Optional[Path] = None,
    ) -> RoutePlan:
        """Plan a route between two places.

        Args:
            origin: Place name or ``"lat,lon"`` literal to start from.
            destination: Place name or ``"lat,lon"`` literal to reach.
            render_map: Whether to draw the route on a map.
            map_output_path: Path for the map file (required if render_map=True).

        Returns:
            RoutePlan with the snapped endpoints, the route and timing.

        Raises:
            LocationNotFoundError: If either place cannot be resolved.
            EmptyGraphError: If the graph has no vertices.
            NoRouteError: If the snapped endpoints coincide or are not
                connected.
            RenderingError: If map generation fails or no renderer is
                configured.
        """
        origin_location = self.resolve(origin)
        destination_location = self.resolve(destination)
        graph = self.graph_repository.load()

        started = time.perf_counter()
        start = nearest_vertex(graph, origin_location.coordinate)
        end = nearest_vertex(graph, destination_location.coordinate)
        route = self.route_solver.solve(graph, start, end)
        elapsed_ms = (time.perf_counter() - started) * 1000.0

        self._logger.info(
            "Route planned",
            extra={
                "origin": origin_location.name,
                "destination": destination_location.name,
                "stops": route.num_stops,
                "distance_miles": route.total_distance_miles,
                "elapsed_ms": elapsed_ms,
            },
        )

        map_path: Optional[Path] = None
        if render_map:
            if self.map_renderer is None:
                raise RenderingError("No map renderer configured")
            if map_output_path is None:
                raise ValueError("map_output_path is required when render_map=True")
            map_path = self.map_renderer.render(
                route.path, map_output_path, markers=(start, end)
            )

        return RoutePlan(
            origin=origin_location,
            destination=destination_location,
            start=start,
            end=end,
            route=route,
            elapsed_ms=elapsed_ms,
            map_path=map_path,
        )
