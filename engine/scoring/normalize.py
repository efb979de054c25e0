"""Shared rounding and clamping for every score percentage."""

import math

from engine.scoring.contract import ScoreSummary


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always rounding up."""
    return math.floor(value + 0.5)


def clamp(value: float, low: float, high: float) -> float:
    """Bound a value to [low, high]."""
    return max(low, min(high, value))


def normalize_score(total: float, maximum: float) -> int:
    """
    Convert points against a ceiling into a 0-100 percentage.

    Args:
        total: Points earned (may exceed the ceiling)
        maximum: Positive ceiling

    Returns:
        Integer percentage clamped to [0, 100]
    """
    return int(clamp(round_half_up(total / maximum * 100), 0, 100))


def pass_rate(passed: int, total: int) -> int:
    """Integer percentage of passed checks (0 when there are none)."""
    if total <= 0:
        return 0
    return round_half_up(passed / total * 100)


def summarize(total: float, maximum: float) -> ScoreSummary:
    """Build a ScoreSummary with the normalized percentage."""
    return ScoreSummary(
        total_score=total,
        max_score=maximum,
        percentage=normalize_score(total, maximum),
    )
