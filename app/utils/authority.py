"""Authority tiers keyed on a domain's approximate indexed-page count."""

from __future__ import annotations

from typing import Dict, Tuple


AUTHORITY_POINTS: Dict[str, int] = {
    "low": 20,
    "moderate": 70,
    "high": 100,
    "unknown": 50,
}

# Upper bounds (exclusive) on result counts for each tier below "high".
LOW_AUTHORITY_CEILING = 1_000
MODERATE_AUTHORITY_CEILING = 100_000


def authority_tier(result_count: int) -> str:
    """Return the tier label for a site-restricted result count."""
    if result_count < LOW_AUTHORITY_CEILING:
        return "low"
    if result_count < MODERATE_AUTHORITY_CEILING:
        return "moderate"
    return "high"


def authority_points(result_count: int) -> int:
    return AUTHORITY_POINTS[authority_tier(result_count)]


def authority_from_count(result_count: int | None) -> Tuple[str, int]:
    """Map a count to ``(tier, points)``; ``None`` marks a failed lookup."""
    if result_count is None:
        return "unknown", AUTHORITY_POINTS["unknown"]
    tier = authority_tier(result_count)
    return tier, AUTHORITY_POINTS[tier]
