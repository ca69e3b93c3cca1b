"""Folium map renderer adapter.

Draws a route as a polyline and endpoints as markers on an interactive
HTML map.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

import folium

from ...config import RenderingConfig, get_config
from ...domain.errors import RenderingError
from ...domain.models import Coordinate


@dataclass
class FoliumMapRenderer:
    """Folium-based interactive map renderer.

    This adapter implements MapRendererPort.

    Attributes:
        config: Rendering configuration (zoom, line style)
    """

    config: RenderingConfig = field(default_factory=lambda: get_config().rendering)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(
        self,
        route: Sequence[Coordinate],
        output_path: Path,
        markers: Sequence[Coordinate] = (),
    ) -> Path:
        """Render a route and markers to an HTML file.

        Args:
            route: Ordered route vertices, drawn when there are two or more.
            output_path: Where to save the rendered map.
            markers: Points to mark; the first is green, the last red.

        Returns:
            Path to the generated map file.

        Raises:
            RenderingError: If there is nothing to draw or rendering fails.
        """
        output_path = Path(output_path)
        points: List[Coordinate] = list(route) + list(markers)
        if not points:
            raise RenderingError(
                "Cannot render an empty map",
                output_path=str(output_path),
                renderer_type="folium",
            )

        self._logger.info(
            "Rendering route map",
            extra={
                "route_points": len(route),
                "markers": len(markers),
                "output_path": str(output_path),
            },
        )

        try:
            lats = [p.latitude for p in points]
            lons = [p.longitude for p in points]
            center = [sum(lats) / len(lats), sum(lons) / len(lons)]
            m = folium.Map(location=center, zoom_start=self.config.zoom_start, control_scale=True)

            for i, point in enumerate(markers):
                icon_color = "green" if i == 0 else "red" if i == len(markers) - 1 else "blue"
                folium.Marker(
                    location=list(point.as_tuple()),
                    tooltip=str(point),
                    icon=folium.Icon(color=icon_color),
                ).add_to(m)

            if len(route) >= 2:
                folium.PolyLine(
                    [list(p.as_tuple()) for p in route],
                    weight=self.config.line_weight,
                    color=self.config.line_color,
                    opacity=0.8,
                ).add_to(m)

            if len(points) >= 2:
                m.fit_bounds([[min(lats), min(lons)], [max(lats), max(lons)]])

            output_path.parent.mkdir(parents=True, exist_ok=True)
            m.save(str(output_path))
        except Exception as e:
            self._logger.error(
                "Map rendering failed",
                extra={"error": str(e), "output_path": str(output_path)},
            )
            raise RenderingError(
                "Map rendering failed",
                output_path=str(output_path),
                renderer_type="folium",
                cause=e,
            ) from e

        self._logger.info(
            "Map rendered successfully",
            extra={"output_path": str(output_path)},
        )
        return output_path
