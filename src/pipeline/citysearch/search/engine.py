"""Radius search and ranking over a point registry."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, NamedTuple

import structlog

from citysearch.search.metrics import Metric
from citysearch.search.registry import PointRegistry

logger = structlog.get_logger()


class RankedEntry(NamedTuple):
    """A single match: its distance from the reference and its name."""

    distance: float
    name: str


@dataclass(frozen=True)
class RankedResult:
    """Matches of one query, ascending by distance.

    Entries at equal distance keep the registry's enumeration order
    (ascending by name).
    """

    reference: str
    radius: float
    metric: Metric
    entries: tuple[RankedEntry, ...] = ()

    def __iter__(self) -> Iterator[RankedEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> RankedEntry:
        return self.entries[index]

    @property
    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]


@dataclass(frozen=True)
class QueryOutcome:
    """A ranked result together with the statistics derived from it."""

    result: RankedResult
    northern_count: int

    @property
    def neighbors(self) -> list[RankedEntry]:
        """Matches other than the reference point itself."""
        return [entry for entry in self.result if entry.name != self.result.reference]

    @property
    def neighbor_count(self) -> int:
        # The reference always matches itself unless the radius is negative.
        return max(len(self.result) - 1, 0)


class ProximitySearchEngine:
    """Answers radius queries against a populated registry.

    Every query is a full linear scan; nothing is cached between queries.
    """

    def __init__(self, registry: PointRegistry):
        self.registry = registry

    def search(self, reference_name: str, radius: float, metric_code: Any) -> RankedResult:
        """Find every city within ``radius`` of ``reference_name``.

        The reference city is part of its own result at distance 0. A
        negative radius yields an empty result.

        Args:
            reference_name: Name of the city to search around.
            radius: Inclusive search radius.
            metric_code: Metric or integer code 0 (L2), 1 (Linf), 2 (L1).

        Returns:
            RankedResult ordered by (distance, enumeration order).

        Raises:
            UnknownPointError: If the reference city is not registered.
            InvalidMetricError: If the metric code is not supported.
        """
        metric = Metric.from_code(metric_code)
        origin = self.registry.lookup(reference_name)

        matches = []
        for index, (name, coordinates) in enumerate(self.registry.all_entries()):
            distance = metric.distance(origin, coordinates)
            if distance <= radius:
                matches.append((distance, index, name))

        matches.sort(key=lambda match: (match[0], match[1]))
        entries = tuple(RankedEntry(distance, name) for distance, _, name in matches)

        logger.debug(
            "Proximity search complete",
            reference=reference_name,
            radius=radius,
            metric=metric.name,
            num_matches=len(entries),
        )

        return RankedResult(
            reference=reference_name,
            radius=radius,
            metric=metric,
            entries=entries,
        )

    def northern_count(self, reference_name: str, ranked_result: RankedResult) -> int:
        """Count result entries whose y-coordinate is below the reference's.

        Despite the name, the comparison is ``y < reference.y``; this matches
        the figures the original command-line tool printed. The reference's
        own entry is skipped; when the reference is not in the result every
        entry is considered.

        Raises:
            UnknownPointError: If the reference or any result name is not registered.
        """
        reference_y = self.registry.lookup(reference_name).y

        count = 0
        anchor_skipped = False
        for entry in ranked_result:
            if not anchor_skipped and entry.name == reference_name:
                anchor_skipped = True
                continue
            if self.registry.lookup(entry.name).y < reference_y:
                count += 1
        return count

    def query(self, reference_name: str, radius: float, metric_code: Any) -> QueryOutcome:
        """Run a search and derive its northern count."""
        result = self.search(reference_name, radius, metric_code)
        northern = self.northern_count(reference_name, result)

        logger.info(
            "Query answered",
            reference=reference_name,
            radius=radius,
            metric=result.metric.name,
            num_neighbors=max(len(result) - 1, 0),
            northern_count=northern,
        )

        return QueryOutcome(result=result, northern_count=northern)
