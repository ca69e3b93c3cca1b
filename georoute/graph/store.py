"""Graph store built from the ``.graph`` text format.

The description is a header line ``<numVertices> <numEdges>``, followed
by one ``name latitude longitude`` line per vertex and one ``indexA
indexB`` line per edge. Edge indices are zero-based positions in vertex
declaration order.

Vertices live in a dense list and are addressed by integer index.
Adjacency is a list of neighbour index sets, and a separate map from
Coordinate to index gives the lookup by value. Edges are undirected:
every edge is stored in both endpoints' neighbour sets.
"""

from __future__ import annotations

import math
from os import PathLike
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Set, Tuple, Union

from ..domain.errors import FormatError, GraphIOError
from ..domain.models import Coordinate


class GeoGraph:
    """Read-only undirected graph whose vertices are coordinates.

    Instances are produced by :func:`parse_graph` or :func:`load_graph`
    and never change afterwards, so they may be shared between readers
    without locking.
    """

    __slots__ = ("_vertices", "_index", "_adjacency", "_labels")

    def __init__(
        self,
        vertices: List[Coordinate],
        adjacency: List[Set[int]],
        labels: Dict[str, int],
    ) -> None:
        self._vertices: Tuple[Coordinate, ...] = tuple(vertices)
        self._index: Dict[Coordinate, int] = {c: i for i, c in enumerate(vertices)}
        self._adjacency: Tuple[FrozenSet[int], ...] = tuple(
            frozenset(neighbours) for neighbours in adjacency
        )
        self._labels: Dict[str, int] = dict(labels)

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, point: object) -> bool:
        return point in self._index

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._vertices)

    def __repr__(self) -> str:
        return f"GeoGraph(vertices={len(self)}, edges={self.edge_count})"

    @property
    def vertices(self) -> Tuple[Coordinate, ...]:
        """All vertices in declaration order."""
        return self._vertices

    @property
    def labels(self) -> Mapping[str, Coordinate]:
        """Vertex names mapped to their coordinates."""
        return MappingProxyType(
            {name: self._vertices[i] for name, i in self._labels.items()}
        )

    @property
    def edge_count(self) -> int:
        """Number of undirected edges (a self-loop counts once)."""
        loops = sum(1 for i, n in enumerate(self._adjacency) if i in n)
        total = sum(len(n) for n in self._adjacency)
        return (total - loops) // 2 + loops

    def index_of(self, point: Coordinate) -> Optional[int]:
        return self._index.get(point)

    def coordinate(self, index: int) -> Coordinate:
        return self._vertices[index]

    def vertex_for(self, name: str) -> Optional[Coordinate]:
        """Return the vertex declared under ``name``, if any."""
        index = self._labels.get(name)
        return None if index is None else self._vertices[index]

    def neighbor_indices(self, index: int) -> FrozenSet[int]:
        return self._adjacency[index]

    def neighbors(self, point: Coordinate) -> FrozenSet[Coordinate]:
        """Return the neighbours of ``point`` (empty if it is not a vertex)."""
        index = self._index.get(point)
        if index is None:
            return frozenset()
        return frozenset(self._vertices[j] for j in self._adjacency[index])

    def adjacency(self) -> Dict[Coordinate, FrozenSet[Coordinate]]:
        """Return the adjacency relation keyed by coordinate."""
        return {c: self.neighbors(c) for c in self._vertices}


def _parse_header(line: Optional[str], file_path: Optional[str]) -> Tuple[int, int]:
    if line is None:
        raise FormatError("Missing header line", line_number=1, file_path=file_path)

    fields = line.split()
    if len(fields) < 2:
        raise FormatError(
            "Header must contain vertex and edge counts",
            line_number=1,
            file_path=file_path,
        )
    try:
        num_vertices = int(fields[0])
        num_edges = int(fields[1])
    except ValueError as e:
        raise FormatError(
            "Header counts must be integers",
            line_number=1,
            file_path=file_path,
            cause=e,
        ) from e

    if num_vertices < 0 or num_edges < 0:
        raise FormatError(
            "Header counts must be non-negative",
            line_number=1,
            file_path=file_path,
        )
    return num_vertices, num_edges


def parse_graph(
    lines: Iterable[str], file_path: Optional[str] = None
) -> GeoGraph:
    """Build a :class:`GeoGraph` from the lines of a graph description.

    Args:
        lines: Text lines of the description (trailing newlines allowed).
        file_path: Source path, only used to annotate errors.

    Returns:
        The fully built graph.

    Raises:
        FormatError: If the description is malformed. Nothing is returned
            or exposed when this happens.
    """
    numbered = enumerate(lines, start=1)
    first = next(numbered, None)
    num_vertices, num_edges = _parse_header(
        first[1] if first is not None else None, file_path
    )
    last_line = 1

    def next_line(what: str) -> Tuple[int, List[str]]:
        item = next(numbered, None)
        if item is None:
            raise FormatError(
                f"Unexpected end of input, expected {what}",
                line_number=last_line + 1,
                file_path=file_path,
            )
        return item[0], item[1].split()

    vertices: List[Coordinate] = []
    index: Dict[Coordinate, int] = {}
    adjacency: List[Set[int]] = []
    labels: Dict[str, int] = {}
    # declaration position -> vertex index (differs once coordinates collapse)
    declared: List[int] = []

    for _ in range(num_vertices):
        last_line, fields = next_line("a vertex line")
        if len(fields) < 3:
            raise FormatError(
                "Vertex line needs a name, a latitude and a longitude",
                line_number=last_line,
                file_path=file_path,
            )
        name = fields[0]
        try:
            lat = float(fields[1])
            lon = float(fields[2])
        except ValueError as e:
            raise FormatError(
                f"Invalid coordinate for vertex {name!r}",
                line_number=last_line,
                file_path=file_path,
                cause=e,
            ) from e
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise FormatError(
                f"Coordinate for vertex {name!r} must be finite",
                line_number=last_line,
                file_path=file_path,
            )

        point = Coordinate(lat, lon)
        vertex = index.get(point)
        if vertex is None:
            vertex = len(vertices)
            vertices.append(point)
            adjacency.append(set())
            index[point] = vertex

        previous = labels.get(name)
        if previous is not None and previous != vertex:
            raise FormatError(
                f"Label {name!r} is declared for two different coordinates",
                line_number=last_line,
                file_path=file_path,
            )
        labels[name] = vertex
        declared.append(vertex)

    for _ in range(num_edges):
        last_line, fields = next_line("an edge line")
        if len(fields) < 2:
            raise FormatError(
                "Edge line needs two vertex indices",
                line_number=last_line,
                file_path=file_path,
            )
        try:
            a = int(fields[0])
            b = int(fields[1])
        except ValueError as e:
            raise FormatError(
                "Edge indices must be integers",
                line_number=last_line,
                file_path=file_path,
                cause=e,
            ) from e
        for i in (a, b):
            if not 0 <= i < num_vertices:
                raise FormatError(
                    f"Edge index {i} is outside 0..{num_vertices - 1}",
                    line_number=last_line,
                    file_path=file_path,
                )

        u, v = declared[a], declared[b]
        adjacency[u].add(v)
        adjacency[v].add(u)

    return GeoGraph(vertices, adjacency, labels)


def load_graph(path: Union[str, PathLike[str]]) -> GeoGraph:
    """Load a graph description file.

    Raises:
        GraphIOError: If the file cannot be opened or decoded.
        FormatError: If its content is malformed.
    """
    file_path = str(path)
    try:
        with open(path, encoding="utf-8") as f:
            return parse_graph(f, file_path=file_path)
    except (OSError, UnicodeDecodeError) as e:
        raise GraphIOError(
            "Cannot read graph description",
            file_path=file_path,
            cause=e,
        ) from e
