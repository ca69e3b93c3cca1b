"""Shortest-path computation using Dijkstra's algorithm.

Edge weights are not stored in the graph; each one is the great-circle
distance between its endpoints, computed when the edge is relaxed.
"""

from __future__ import annotations

import heapq
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ..domain.errors import NoRouteError
from ..domain.models import Coordinate
from .distance import distance
from .search import connected
from .store import GeoGraph


def _predecessors(graph: GeoGraph, source: int) -> Dict[int, int]:
    dist: Dict[int, float] = {source: 0.0}
    previous: Dict[int, int] = {}

    # (tentative distance, vertex index); floats compared at full precision
    heap: List[Tuple[float, int]] = [(0.0, source)]

    while heap:
        current_distance, u = heapq.heappop(heap)
        if current_distance > dist[u]:
            continue  # stale entry

        here = graph.coordinate(u)
        for v in graph.neighbor_indices(u):
            new_distance = current_distance + distance(here, graph.coordinate(v))
            if new_distance < dist.get(v, float("inf")):
                dist[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    previous.pop(source, None)
    return previous


def shortest_path_tree(graph: GeoGraph, source: Coordinate) -> Dict[Coordinate, Coordinate]:
    """Compute the single-source shortest-path tree rooted at ``source``.

    Returns:
        A predecessor map: every vertex reachable from ``source`` mapped
        to the vertex before it on its shortest path. ``source`` itself
        has no entry.

    Raises:
        NoRouteError: If ``source`` is not a vertex of the graph.
    """
    index = graph.index_of(source)
    if index is None:
        raise NoRouteError(
            f"Source {source} is not a vertex of the graph",
            start=source,
        )
    return {
        graph.coordinate(v): graph.coordinate(u)
        for v, u in _predecessors(graph, index).items()
    }


def route(
    graph: GeoGraph,
    start: Coordinate,
    end: Coordinate,
    tree: Optional[Mapping[Coordinate, Coordinate]] = None,
) -> List[Coordinate]:
    """Return the shortest path ``[start, ..., end]``.

    Args:
        graph: Graph to route over.
        start: First vertex of the route.
        end: Last vertex of the route.
        tree: Shortest-path tree already computed for ``start``.

    Raises:
        NoRouteError: If ``start == end``, if either endpoint is not a
            vertex, or if the endpoints are not connected.
    """
    if start == end:
        raise NoRouteError(
            f"Start and end are the same point {start}",
            start=start,
            end=end,
        )
    if not connected(graph, start, end):
        raise NoRouteError(
            f"No path between {start} and {end}",
            start=start,
            end=end,
        )

    previous = tree if tree is not None else shortest_path_tree(graph, start)

    path = [end]
    current = end
    while current != start:
        current = previous[current]
        path.append(current)
    path.reverse()
    return path


def route_distance(path: Sequence[Coordinate]) -> float:
    """Sum the great-circle distance of each consecutive pair in ``path``."""
    total = 0.0
    for a, b in zip(path, path[1:]):
        total += distance(a, b)
    return total
