"""Intensity trend and consistency over a run of daily entries."""

import math
import statistics
from collections.abc import Iterable, Sequence

from color_diary_api.engine.palette import classify
from color_diary_api.schemas.analysis import ScoreRange, TrendDirection, TrendResult
from color_diary_api.schemas.entry import ColorEntry

TREND_THRESHOLD = 1.0
# Standard deviation at which consistency reaches zero.
CONSISTENCY_SCALE = 5.0


def split_halves(scores: Sequence[int]) -> tuple[Sequence[int], Sequence[int]]:
    """First ``ceil(n/2)`` and last ``n - floor(n/2)`` scores.

    For odd ``n`` the middle score belongs to both halves.
    """
    n = len(scores)
    return scores[: math.ceil(n / 2)], scores[n // 2 :]


def trend_direction(first_half: Sequence[int], second_half: Sequence[int]) -> TrendDirection:
    difference = statistics.fmean(second_half) - statistics.fmean(first_half)
    if difference > TREND_THRESHOLD:
        return TrendDirection.INCREASING
    if difference < -TREND_THRESHOLD:
        return TrendDirection.DECREASING
    return TrendDirection.STABLE


def consistency(scores: Sequence[int]) -> float:
    """1 minus the population standard deviation over CONSISTENCY_SCALE, in [0, 1]."""
    deviation = statistics.pstdev(scores)
    return min(1.0, max(0.0, 1 - deviation / CONSISTENCY_SCALE))


def analyze_trend(entries: Iterable[ColorEntry]) -> TrendResult | None:
    """Compare the intensity of the earlier and later halves of the entries.

    Entries may arrive in any order; they are sorted by date first.
    Returns None for no entries.
    """
    ordered = sorted(entries, key=lambda entry: entry.date)
    if not ordered:
        return None

    scores = [classify(entry.color_hex).intensity for entry in ordered]
    first_half, second_half = split_halves(scores)

    return TrendResult(
        trend_direction=trend_direction(first_half, second_half),
        average_score=statistics.fmean(scores),
        score_range=ScoreRange(min=min(scores), max=max(scores)),
        consistency=consistency(scores),
    )
