"""Graph engine for coordinate graphs.

This subpackage builds an in-memory graph from the ``.graph`` text
format and answers nearest-vertex, connectivity and shortest-path
queries on it. It has no I/O beyond the one-time load and does not log.
"""

from .dijkstra import route, route_distance, shortest_path_tree
from .distance import EARTH_RADIUS_MILES, distance
from .search import connected, nearest_vertex
from .store import GeoGraph, load_graph, parse_graph

__all__ = [
    "GeoGraph",
    "parse_graph",
    "load_graph",
    "distance",
    "EARTH_RADIUS_MILES",
    "nearest_vertex",
    "connected",
    "shortest_path_tree",
    "route",
    "route_distance",
]
