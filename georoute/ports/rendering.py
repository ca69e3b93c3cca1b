"""Rendering port - Abstraction for map generation.

This protocol defines the contract for map rendering, allowing
different implementations to be used.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Coordinate


class MapRendererPort(Protocol):
    """Port for map rendering.

    Implementation: adapters/rendering/folium_adapter.py

    Renderers consume route data; they never feed the graph engine.
    """

    def render(
        self,
        route: Sequence[Coordinate],
        output_path: Path,
        markers: Sequence[Coordinate] = (),
    ) -> Path:
        """Draw a route and point markers, and save the map to a file.

        Args:
            route: Ordered route vertices drawn as a polyline.
            output_path: Where to save the rendered map.
            markers: Individual points to mark.

        Returns:
            Path to the generated map file.
        """
        ...
