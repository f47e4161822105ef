"""Reading city datasets into a PointRegistry.

A dataset is a text file of alternating lines: a city name, then its
coordinates written as ``<x> - <y>``::

    New York, NY
    40.7128 - -74.0060
"""

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

import structlog

from citysearch.errors import DatasetFormatError, DatasetNotFoundError
from citysearch.search.metrics import Coordinates
from citysearch.search.registry import PointRegistry

logger = structlog.get_logger()

CITY_NAME_RE = re.compile(r"^[a-zA-Z'.\s\-(),]+(,\s[a-zA-Z]{2})?$")

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)"
COORDINATES_RE = re.compile(rf"^\s*(?P<x>{_NUMBER})\s*-\s*(?P<y>{_NUMBER})\s*$")


def is_valid_city_name(text: str) -> bool:
    """Check whether ``text`` is an acceptable city name."""
    return CITY_NAME_RE.match(text) is not None


def parse_coordinates(text: str) -> Coordinates | None:
    """Parse a ``<x> - <y>`` line, returning None when it is malformed."""
    match = COORDINATES_RE.match(text)
    if match is None:
        return None
    return Coordinates(float(match["x"]), float(match["y"]))


def parse_lines(lines: Iterable[str]) -> Iterator[tuple[str, Coordinates]]:
    """Yield ``(name, coordinates)`` pairs from dataset lines.

    Raises:
        DatasetFormatError: On the first malformed line, or when the last
            city has no coordinates line.
    """
    city_name: str | None = None
    line_number = 0

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")

        if city_name is None:
            if not is_valid_city_name(line):
                raise DatasetFormatError(line_number, line, "Invalid city name format")
            city_name = line
            continue

        coordinates = parse_coordinates(line)
        if coordinates is None:
            raise DatasetFormatError(line_number, line, "Invalid coordinates format")
        yield city_name, coordinates
        city_name = None

    if city_name is not None:
        raise DatasetFormatError(line_number, city_name, "Missing coordinates for city")


def load_registry(path: Path, registry: PointRegistry | None = None) -> PointRegistry:
    """Populate a registry from a dataset file.

    Args:
        path: Dataset file path.
        registry: Registry to add to; a new one is created if omitted.

    Returns:
        The populated registry.
    """
    path = Path(path)
    if not path.is_file():
        raise DatasetNotFoundError(path)

    if registry is None:
        registry = PointRegistry()

    count = 0
    with open(path, encoding="utf-8") as f:
        for name, coordinates in parse_lines(f):
            registry.add(name, coordinates)
            count += 1

    logger.info("Dataset loaded", path=str(path), num_records=count, num_cities=len(registry))
    return registry
