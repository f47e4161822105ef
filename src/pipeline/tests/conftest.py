"""Shared test fixtures for city search tests."""

import pytest

from citysearch.search.engine import ProximitySearchEngine
from citysearch.search.metrics import Coordinates
from citysearch.search.registry import PointRegistry

SAMPLE_DATASET = """\
New York, NY
40.7128 - -74.0060
Boston, MA
42.3601 - -71.0589
Philadelphia, PA
39.9526 - -75.1652
Trenton, NJ
40.2171 - -74.7429
"""


@pytest.fixture
def compass_registry():
    """Four points around the origin; added out of name order on purpose."""
    registry = PointRegistry()
    registry.add("D", Coordinates(3, 4))
    registry.add("C", Coordinates(0, -5))
    registry.add("A", Coordinates(0, 0))
    registry.add("B", Coordinates(0, 5))
    return registry


@pytest.fixture
def engine(compass_registry):
    """A search engine over the compass registry."""
    return ProximitySearchEngine(compass_registry)


@pytest.fixture
def dataset_file(tmp_path):
    """A small, valid city dataset on disk."""
    path = tmp_path / "cities.txt"
    path.write_text(SAMPLE_DATASET)
    return path


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep CITYSEARCH_* variables from the developer's shell out of tests."""
    for var in (
        "CITYSEARCH_DATA_FILE",
        "CITYSEARCH_DEFAULT_RADIUS",
        "CITYSEARCH_DEFAULT_METRIC",
        "CITYSEARCH_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
