"""Graph file repository adapter.

Loads the ``.graph`` description named by the configuration and keeps
the built graph in memory for subsequent requests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...config import GraphConfig, get_config
from ...graph.store import GeoGraph, load_graph


@dataclass
class GraphFileRepository:
    """Graph repository that loads from a ``.graph`` file.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (data directory, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    _graph: Optional[GeoGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> GeoGraph:
        """Load the graph, building it on first use.

        Raises:
            FormatError: If the file content is malformed.
            GraphIOError: If the file cannot be read.
        """
        if self._graph is not None:
            return self._graph

        path = self.config.graph_path
        self._logger.debug("Loading graph", extra={"graph_path": str(path)})

        graph = load_graph(path)
        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"vertices": len(graph), "edges": graph.edge_count},
        )
        return graph

    def clear_cache(self) -> None:
        """Forget the loaded graph so the next load rereads the file."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
