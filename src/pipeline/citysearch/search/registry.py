"""Name-to-coordinates store queried by the search engine."""

from collections.abc import Iterator

import structlog

from citysearch.errors import UnknownPointError
from citysearch.search.metrics import Coordinates

logger = structlog.get_logger()


class PointRegistry:
    """Canonical mapping of city names to coordinates.

    Entries are enumerated in ascending name order regardless of the order
    they were added in, so searches over the registry are reproducible.
    """

    def __init__(self) -> None:
        self._points: dict[str, Coordinates] = {}

    def add(self, name: str, coordinates: Coordinates) -> None:
        """Insert or overwrite the entry for ``name``."""
        previous = self._points.get(name)
        if previous is not None and previous != coordinates:
            logger.warning(
                "Overwriting city coordinates",
                city=name,
                previous=(previous.x, previous.y),
                current=(coordinates.x, coordinates.y),
            )
        self._points[name] = coordinates

    def lookup(self, name: str) -> Coordinates:
        try:
            return self._points[name]
        except KeyError:
            raise UnknownPointError(name) from None

    def all_entries(self) -> list[tuple[str, Coordinates]]:
        """All entries sorted by name."""
        return sorted(self._points.items(), key=lambda item: item[0])

    def names(self) -> list[str]:
        return sorted(self._points)

    def __contains__(self, name: object) -> bool:
        return name in self._points

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())
