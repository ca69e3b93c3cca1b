"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- GEOROUTE_GRAPH_DATA_DIR=/path/to/data
- GEOROUTE_GRAPH_GRAPH_FILE=usa.graph
- GEOROUTE_GEO_ENABLED=true
- GEOROUTE_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph and gazetteer data configuration.

    Environment variables prefixed with GEOROUTE_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="GEOROUTE_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    graph_file: str = "simple.graph"
    cities_file: str = "cities.csv"

    @property
    def graph_path(self) -> Path:
        """Full path to the graph description file."""
        return self.data_dir / self.graph_file

    @property
    def cities_path(self) -> Path:
        """Full path to the cities CSV file."""
        return self.data_dir / self.cities_file


class GeocodingConfig(BaseSettings):
    """Geocoding fallback configuration.

    Environment variables prefixed with GEOROUTE_GEO_.
    """

    model_config = SettingsConfigDict(env_prefix="GEOROUTE_GEO_")

    enabled: bool = False
    user_agent: str = "georoute"
    timeout_seconds: int = 10
    rate_limit_delay: float = 1.0
    max_retries: int = 2
    error_wait_seconds: float = 2.0


class RenderingConfig(BaseSettings):
    """Map rendering configuration.

    Environment variables prefixed with GEOROUTE_MAP_.
    """

    model_config = SettingsConfigDict(env_prefix="GEOROUTE_MAP_")

    zoom_start: int = 6
    line_color: str = "blue"
    line_weight: int = 4
    default_output: str = "route.html"


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with GEOROUTE_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="GEOROUTE_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.graph_path)

    Environment variables prefixed with GEOROUTE_.
    """

    model_config = SettingsConfigDict(env_prefix="GEOROUTE_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    geocoding: GeocodingConfig = Field(default_factory=GeocodingConfig)
    rendering: RenderingConfig = Field(default_factory=RenderingConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    output_dir: Path = Field(default_factory=Path.cwd)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
