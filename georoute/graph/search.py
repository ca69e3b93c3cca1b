"""Nearest-vertex lookup and connectivity queries over a GeoGraph."""

from __future__ import annotations

from typing import List, Optional, Set

from ..domain.errors import EmptyGraphError
from ..domain.models import Coordinate
from .distance import distance
from .store import GeoGraph


def nearest_vertex(graph: GeoGraph, query: Coordinate) -> Coordinate:
    """Return the vertex closest to ``query`` in great-circle distance.

    Every vertex is scanned. Which vertex wins an exact tie is
    unspecified, and callers must not depend on it.

    Raises:
        EmptyGraphError: If the graph has no vertices.
    """
    best: Optional[Coordinate] = None
    best_distance = float("inf")

    for vertex in graph:
        d = distance(query, vertex)
        if best is None or d < best_distance:
            best = vertex
            best_distance = d

    if best is None:
        raise EmptyGraphError("Cannot search for a nearest vertex in an empty graph")
    return best


def connected(graph: GeoGraph, p1: Coordinate, p2: Coordinate) -> bool:
    """Return True if ``p2`` can be reached from ``p1`` along edges.

    Both points must be vertices; no snapping to the nearest vertex is
    done here. Reachability is judged by seeing ``p2`` among the
    neighbours of an explored vertex, so ``connected(g, v, v)`` is only
    True when some path of one or more edges leads back to ``v``.
    """
    start = graph.index_of(p1)
    target = graph.index_of(p2)
    if start is None or target is None:
        return False

    visited: Set[int] = set()
    stack: List[int] = [start]
    while stack:
        current = stack.pop()
        for neighbour in graph.neighbor_indices(current):
            if neighbour == target:
                return True
            if neighbour not in visited:
                visited.add(neighbour)
                stack.append(neighbour)

    return False
