"""Dijkstra route solver adapter.

Wraps the graph engine's routing functions and adds:
- Domain model output (RouteResult)
- Optional caching of shortest-path trees per source vertex
- Logging
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Optional

from ...domain.errors import NoRouteError
from ...domain.models import Coordinate, RouteResult
from ...graph.dijkstra import route, route_distance, shortest_path_tree
from ...graph.store import GeoGraph
from ...ports.cache import CachePort


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort. When a cache is given,
    the predecessor tree computed for a start vertex is reused by later
    requests leaving from the same vertex on the same graph.

    Attributes:
        tree_cache: Optional cache for shortest-path trees
    """

    tree_cache: Optional[CachePort[Dict[Coordinate, Coordinate]]] = None

    _cached_graph: Optional[GeoGraph] = field(default=None, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: GeoGraph,
        start: Coordinate,
        end: Coordinate,
    ) -> RouteResult:
        """Find the shortest route between two vertices.

        Args:
            graph: The coordinate graph.
            start: Start vertex.
            end: End vertex.

        Returns:
            RouteResult with the ordered path and its length in miles.

        Raises:
            NoRouteError: If the endpoints are equal, absent or not
                connected.
        """
        self._logger.debug(
            "Solving route",
            extra={"start": str(start), "end": str(end)},
        )

        try:
            path = route(graph, start, end, tree=self._tree_for(graph, start, end))
        except NoRouteError:
            self._logger.warning(
                "No route found",
                extra={"start": str(start), "end": str(end)},
            )
            raise

        total = route_distance(path)
        self._logger.info(
            "Route found",
            extra={"stops": len(path), "distance_miles": total},
        )
        return RouteResult(path=tuple(path), total_distance_miles=total)

    def _tree_for(
        self, graph: GeoGraph, start: Coordinate, end: Coordinate
    ) -> Optional[Dict[Coordinate, Coordinate]]:
        if self.tree_cache is None or start == end or start not in graph:
            return None

        key = f"{start.latitude!r},{start.longitude!r}"
        with self._lock:
            if self._cached_graph is not graph:
                # trees are only valid for the graph they were computed on
                self.tree_cache.clear()
                self._cached_graph = graph
            return self.tree_cache.get_or_compute(
                key, lambda: shortest_path_tree(graph, start)
            )
