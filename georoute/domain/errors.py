"""Typed domain errors for georoute.

Every error raised by the graph engine or by an adapter inherits from
GeoRouteError and can optionally wrap the underlying exception that
caused it, so callers can report or inspect the root failure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class GeoRouteError(Exception):
    """Base error for the georoute domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class FormatError(GeoRouteError):
    """Malformed graph description.

    Attributes:
        line_number: 1-based line of the description that failed to parse
        file_path: Path of the description file if it came from disk
    """

    line_number: Optional[int] = None
    file_path: Optional[str] = None

    def __str__(self) -> str:
        where = ""
        if self.file_path:
            where = self.file_path
        if self.line_number is not None:
            where = f"{where}:{self.line_number}" if where else f"line {self.line_number}"
        text = super().__str__()
        return f"{text} ({where})" if where else text


@dataclass
class GraphIOError(GeoRouteError):
    """The graph description could not be read.

    Attributes:
        file_path: Path of the description file
    """

    file_path: Optional[str] = None


@dataclass
class EmptyGraphError(GeoRouteError):
    """A query that needs at least one vertex ran against an empty graph."""


@dataclass
class NoRouteError(GeoRouteError):
    """No route exists between the requested endpoints.

    Raised when the endpoints are identical, absent from the graph, or
    lie in different connected components.

    Attributes:
        start: Requested start coordinate
        end: Requested end coordinate
    """

    start: Any = None
    end: Any = None


@dataclass
class LocationNotFoundError(GeoRouteError):
    """A place name could not be resolved to a coordinate.

    Attributes:
        query: The place name or literal that failed to resolve
    """

    query: str = ""


@dataclass
class GazetteerError(GeoRouteError):
    """The place-name index could not be loaded.

    Attributes:
        file_path: Path of the gazetteer file
    """

    file_path: Optional[str] = None


@dataclass
class RenderingError(GeoRouteError):
    """Map rendering failed.

    Attributes:
        output_path: Path where rendering was attempted
        renderer_type: Type of renderer that failed
    """

    output_path: Optional[str] = None
    renderer_type: str = ""
