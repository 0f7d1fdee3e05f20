from __future__ import annotations

CONFIDENCE_BASE = 50
CONFIDENCE_INCREMENT = 10
CONFIDENCE_CEILING = 95


def calculate_confidence(
    relevant_sources: int,
    *,
    base: int = CONFIDENCE_BASE,
    increment: int = CONFIDENCE_INCREMENT,
    ceiling: int = CONFIDENCE_CEILING,
) -> int:
    """Base confidence plus a fixed step per relevant source, capped at the ceiling."""
    return min(base + increment * max(relevant_sources, 0), ceiling)
