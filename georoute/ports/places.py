"""Place ports - Resolving place names to coordinates.

Two sources are supported: a local gazetteer file and an online
geocoding service used as a fallback.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Location


class GazetteerPort(Protocol):
    """Port for a local place-name index.

    Implementation: adapters/gazetteer/csv_gazetteer.py
    """

    def lookup(self, name: str) -> Optional[Location]:
        """Look up a place by name (e.g., 'Durham NC').

        Returns:
            The matching location, or None if the name is unknown.
        """
        ...

    def names(self) -> Sequence[str]:
        """List every known place name."""
        ...


class GeocoderPort(Protocol):
    """Port for geocoding services.

    Implementation: adapters/geocoding/nominatim_adapter.py
    """

    def geocode(self, query: str) -> Optional[Location]:
        """Geocode a free-text place query.

        Returns:
            The resolved location, or None if not found.
        """
        ...
