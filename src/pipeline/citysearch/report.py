"""Rendering query outcomes for the terminal and for JSON consumers."""

from typing import Any

from citysearch.search.engine import QueryOutcome


def format_text(outcome: QueryOutcome) -> str:
    """Human-readable summary; the reference city is left out of the list."""
    lines = [
        "Search result:",
        f"{outcome.neighbor_count} city/cities found in the given radius.",
        f"{outcome.northern_count} cities are to the north of the selected city.",
        "City list:",
    ]
    lines.extend(entry.name for entry in outcome.neighbors)
    return "\n".join(lines)


def format_json(outcome: QueryOutcome) -> dict[str, Any]:
    """Convert an outcome to a JSON-serializable dictionary."""
    result = outcome.result
    return {
        "reference": result.reference,
        "radius": result.radius,
        "metric": int(result.metric),
        "count": outcome.neighbor_count,
        "northern_count": outcome.northern_count,
        "cities": [
            {"name": entry.name, "distance": entry.distance}
            for entry in outcome.neighbors
        ],
    }
