"""Nominatim geocoder adapter.

Resolves free-text place names through OpenStreetMap's Nominatim
service, with:
- Caching via CachePort (misses are cached too)
- Configuration injection
- Rate limiting
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from geopy.exc import GeocoderServiceError, GeopyError
from geopy.extra.rate_limiter import RateLimiter
from geopy.geocoders import Nominatim

from ...config import GeocodingConfig, get_config
from ...domain.models import Coordinate, Location
from ...ports.cache import CachePort
from ..cache.memory_cache import InMemoryCache


@dataclass
class NominatimGeocoderAdapter:
    """Nominatim geocoder adapter with caching and rate limiting.

    This adapter implements GeocoderPort.

    Attributes:
        config: Geocoding configuration
        cache: Cache for geocoding results
    """

    config: GeocodingConfig = field(default_factory=lambda: get_config().geocoding)
    cache: CachePort[Optional[Location]] = field(
        default_factory=lambda: InMemoryCache(name="geocode", max_size=1024)
    )

    _geocode_fn: Optional[Any] = field(default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def _get_geocoder(self) -> Any:
        """Get or initialize the rate-limited geocode function."""
        if self._geocode_fn is not None:
            return self._geocode_fn

        self._logger.debug(
            "Initializing Nominatim geocoder",
            extra={
                "user_agent": self.config.user_agent,
                "timeout": self.config.timeout_seconds,
            },
        )

        geolocator = Nominatim(
            user_agent=self.config.user_agent,
            timeout=self.config.timeout_seconds,
        )
        self._geocode_fn = RateLimiter(
            geolocator.geocode,
            min_delay_seconds=self.config.rate_limit_delay,
            max_retries=self.config.max_retries,
            error_wait_seconds=self.config.error_wait_seconds,
            swallow_exceptions=False,  # failures must not be cached as misses
        )
        return self._geocode_fn

    def geocode(self, query: str) -> Optional[Location]:
        """Geocode a place query.

        Returns:
            The resolved location, or None if the service found nothing
            or could not be reached.
        """
        query = " ".join(query.split())
        if not query:
            return None

        try:
            return self.cache.get_or_compute(
                query.casefold(), lambda: self._lookup(query)
            )
        except GeocoderServiceError as e:
            self._logger.warning(
                "Geocode service error",
                extra={"query": query, "error": str(e)},
            )
            return None
        except GeopyError as e:
            self._logger.error(
                "Geocode failed",
                extra={"query": query, "error": str(e)},
            )
            return None

    def _lookup(self, query: str) -> Optional[Location]:
        result = self._get_geocoder()(query)
        if result is None:
            self._logger.debug("Geocode returned no result", extra={"query": query})
            return None

        location = Location(
            name=query,
            coordinate=Coordinate(float(result.latitude), float(result.longitude)),
        )
        self._logger.debug(
            "Geocode success",
            extra={"query": query, "coordinate": str(location.coordinate)},
        )
        return location
