"""Services layer - Application orchestration.

Available services:
- RoutePlannerService: Plans routes between named places or coordinates
"""

from .route_planner import RoutePlannerService, parse_latlon

__all__ = ["RoutePlannerService", "parse_latlon"]
