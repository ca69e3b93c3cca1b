"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- GraphFileRepository: Loads the graph from a ``.graph`` file
- DijkstraRouteSolver: Finds shortest routes using Dijkstra's algorithm
"""

from .dijkstra_solver import DijkstraRouteSolver
from .file_repository import GraphFileRepository

__all__ = ["GraphFileRepository", "DijkstraRouteSolver"]
