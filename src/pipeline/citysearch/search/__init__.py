"""Proximity search over named points."""

from citysearch.search.engine import ProximitySearchEngine, QueryOutcome, RankedEntry, RankedResult
from citysearch.search.metrics import Coordinates, Metric
from citysearch.search.registry import PointRegistry

__all__ = [
    "Coordinates",
    "Metric",
    "PointRegistry",
    "ProximitySearchEngine",
    "QueryOutcome",
    "RankedEntry",
    "RankedResult",
]
