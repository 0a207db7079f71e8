"""Overall score composition and the rounding / clamping helpers shared by the engine.

All functions are *pure*.
"""

from __future__ import annotations

import math


FALLBACK_NARRATIVE_SCORE = 75


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for non-negatives."""
    return math.floor(value + 0.5)


def clamp_score(value: float, low: int = 0, high: int = 100) -> int:
    return int(max(low, min(high, value)))


def overall_score(
    chemistry: float,
    domain: float,
    technical: float,
    narrative_score: float,
) -> int:
    """Unweighted mean of the four component scores (0-100)."""
    return round_half_up((chemistry + domain + technical + narrative_score) / 4)
