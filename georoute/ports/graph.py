"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for graph operations: loading the
coordinate graph and computing shortest routes on it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import Coordinate, RouteResult
    from ..graph.store import GeoGraph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/file_repository.py

    The repository is responsible for loading and caching the
    coordinate graph from persistent storage.
    """

    def load(self) -> GeoGraph:
        """Load the graph.

        Returns:
            The read-only graph.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

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
            RouteResult with path and distance in miles.
        """
        ...
