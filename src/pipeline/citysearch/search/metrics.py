"""Distance metrics selectable by integer code."""

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from citysearch.errors import InvalidMetricError


@dataclass(frozen=True)
class Coordinates:
    """A point in the plane. No range validation is applied."""

    x: float
    y: float

    def delta(self, other: "Coordinates") -> tuple[float, float]:
        """Component-wise difference ``self - other``."""
        return self.x - other.x, self.y - other.y


class Metric(IntEnum):
    """Supported norms, keyed by the code users type at the prompt."""

    EUCLIDEAN = 0
    CHEBYSHEV = 1
    MANHATTAN = 2

    @classmethod
    def from_code(cls, code: Any) -> "Metric":
        """Resolve a metric code, raising InvalidMetricError for anything else."""
        if isinstance(code, cls):
            return code
        if isinstance(code, bool):
            raise InvalidMetricError(code)
        try:
            return cls(code)
        except (ValueError, TypeError):
            raise InvalidMetricError(code) from None

    @property
    def label(self) -> str:
        return _LABELS[self]

    def norm(self, dx: float, dy: float) -> float:
        """Length of the delta vector ``(dx, dy)`` under this metric."""
        if self is Metric.EUCLIDEAN:
            return math.hypot(dx, dy)
        if self is Metric.CHEBYSHEV:
            return max(abs(dx), abs(dy))
        return abs(dx) + abs(dy)

    def distance(self, a: Coordinates, b: Coordinates) -> float:
        """Distance between two points under this metric."""
        return self.norm(*a.delta(b))


_LABELS = {
    Metric.EUCLIDEAN: "L2 (Euclidean)",
    Metric.CHEBYSHEV: "Linf (Chebyshev)",
    Metric.MANHATTAN: "L1 (Manhattan)",
}


def metric_help() -> str:
    """One-line description of the metric codes for prompts and help text."""
    return ", ".join(f"{m.value} - {m.label}" for m in Metric)
