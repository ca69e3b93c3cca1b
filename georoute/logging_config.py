"""Logging setup driven by ObservabilityConfig."""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config


def configure_logging(
    config: Optional[ObservabilityConfig] = None, level: Optional[str] = None
) -> int:
    """Configure the root logger and return the level applied.

    Args:
        config: Observability settings, defaults to the application config.
        level: Level name overriding ``config.level`` (e.g. from ``-v``).
    """
    config = config or get_config().observability
    resolved = logging.getLevelName((level or config.level).upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    # no-op when handlers are already installed (e.g. under pytest)
    logging.basicConfig(format=config.format)
    logging.getLogger().setLevel(resolved)
    return resolved
