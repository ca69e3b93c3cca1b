"""CSV gazetteer adapter.

Reads a cities table whose first four columns are city, state,
latitude and longitude (a header row is expected and skipped). Places
are keyed as ``"<city> <state>"``, e.g. ``"Durham NC"``; when the same
key appears twice the first row wins.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GazetteerError
from ...domain.models import Coordinate, Location


@dataclass
class CSVGazetteer:
    """Place-name index backed by a cities CSV file.

    This adapter implements GazetteerPort. The file is read on first
    lookup and kept in memory.

    Attributes:
        config: Graph configuration providing ``cities_path``
        path: Explicit file path overriding the configuration
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    path: Optional[Path] = None

    _places: Optional[Dict[str, Location]] = field(default=None, repr=False)
    _folded: Optional[Dict[str, Location]] = field(default=None, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def source_path(self) -> Path:
        return self.path if self.path is not None else self.config.cities_path

    def lookup(self, name: str) -> Optional[Location]:
        """Look up a place by exact name, then case-insensitively.

        Raises:
            GazetteerError: If the cities file cannot be read.
        """
        key = " ".join(name.split())
        if not key:
            return None

        places = self._load()
        location = places.get(key)
        if location is None:
            assert self._folded is not None
            location = self._folded.get(key.casefold())
        return location

    def names(self) -> Sequence[str]:
        return list(self._load())

    def _load(self) -> Dict[str, Location]:
        if self._places is not None:
            return self._places

        path = self.source_path
        places: Dict[str, Location] = {}
        skipped: List[int] = []

        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.reader(f)
                next(reader, None)  # header
                for row in reader:
                    if len(row) < 4:
                        skipped.append(reader.line_num)
                        continue
                    city, state = row[0].strip(), row[1].strip()
                    try:
                        point = Coordinate(float(row[2]), float(row[3]))
                    except ValueError:
                        skipped.append(reader.line_num)
                        continue

                    key = f"{city} {state}".strip()
                    if key and key not in places:
                        places[key] = Location(name=key, coordinate=point)
        except (OSError, UnicodeDecodeError) as e:
            raise GazetteerError(
                "Cannot read cities file",
                file_path=str(path),
                cause=e,
            ) from e

        if skipped:
            self._logger.warning(
                "Skipped malformed city rows",
                extra={"file_path": str(path), "rows": skipped[:10], "count": len(skipped)},
            )

        folded: Dict[str, Location] = {}
        for key, location in places.items():
            folded.setdefault(key.casefold(), location)

        self._places = places
        self._folded = folded
        self._logger.info("Gazetteer loaded", extra={"places": len(places)})
        return places
