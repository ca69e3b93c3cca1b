"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It allows registering and resolving dependencies for the application.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        planner = container.resolve(RoutePlannerService)

        # Testing
        container = Container()
        container.register(GraphRepositoryPort, lambda: FakeRepository())
        repository = container.resolve(GraphRepositoryPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        with self._lock:
            self._singletons.clear()

    def clear_all(self) -> None:
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.cache import InMemoryCache
        from .adapters.gazetteer import CSVGazetteer
        from .adapters.graph import DijkstraRouteSolver, GraphFileRepository
        from .adapters.rendering import FoliumMapRenderer
        from .ports.graph import GraphRepositoryPort, RouteSolverPort
        from .ports.places import GazetteerPort, GeocoderPort
        from .ports.rendering import MapRendererPort
        from .services import RoutePlannerService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            GraphRepositoryPort,
            lambda: GraphFileRepository(config.graph),
        )
        container.register(
            RouteSolverPort,
            lambda: DijkstraRouteSolver(
                tree_cache=InMemoryCache(name="shortest_path_trees", max_size=64)
            ),
        )
        container.register(GazetteerPort, lambda: CSVGazetteer(config.graph))

        # Geocoding is an online fallback, off unless configured
        if config.geocoding.enabled:
            from .adapters.geocoding import NominatimGeocoderAdapter

            container.register(
                GeocoderPort,
                lambda: NominatimGeocoderAdapter(config.geocoding),
            )

        container.register(
            MapRendererPort,
            lambda: FoliumMapRenderer(config.rendering),
        )

        def create_route_planner() -> RoutePlannerService:
            return RoutePlannerService(
                graph_repository=container.resolve(GraphRepositoryPort),
                route_solver=container.resolve(RouteSolverPort),
                gazetteer=container.resolve(GazetteerPort),
                geocoder=(
                    container.resolve(GeocoderPort)
                    if container.is_registered(GeocoderPort)
                    else None
                ),
                map_renderer=container.resolve(MapRendererPort),
            )

        container.register(RoutePlannerService, create_route_planner)

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container.

    Call this in tests to ensure a fresh container.
    """
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
