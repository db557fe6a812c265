"""Weekly, monthly and usage summaries built from the core analyses."""

import statistics
from collections.abc import Iterable
from datetime import date

from color_diary_api.engine.colors import round_half_up
from color_diary_api.engine.frequency import (
    color_diversity,
    color_variety,
    dominant_color,
    frequency,
    frequency_report,
    top_colors,
)
from color_diary_api.engine.mixture import mix
from color_diary_api.engine.periods import month_key
from color_diary_api.engine.trend import analyze_trend
from color_diary_api.schemas.analysis import AnalysisOverview
from color_diary_api.schemas.entry import ColorEntry
from color_diary_api.schemas.stats import MonthlySummary, MonthOverview, UsageStats, WeeklySummary


def average_mood(entries: list[ColorEntry]) -> float:
    """Mean of the stored mood scores; 0.0 for no entries."""
    if not entries:
        return 0.0
    return statistics.fmean(entry.mood_score for entry in entries)


def weekly_summary(entries: Iterable[ColorEntry], week_start: date) -> WeeklySummary | None:
    entries = list(entries)
    if not entries:
        return None

    counts = frequency(entries)
    return WeeklySummary(
        week_start=week_start,
        average_score=average_mood(entries),
        dominant_color=dominant_color(counts),
        color_variety=color_variety(counts),
        total_entries=len(entries),
    )


def monthly_summary(entries: Iterable[ColorEntry], month: date, limit: int = 3) -> MonthlySummary | None:
    entries = list(entries)
    if not entries:
        return None

    counts = frequency(entries)
    trend = analyze_trend(entries)
    return MonthlySummary(
        month=month_key(month),
        trend_direction=trend.trend_direction if trend else None,
        average_score=average_mood(entries),
        dominant_colors=[item.key for item in top_colors(counts, limit)],
        color_diversity=color_diversity(counts),
        total_entries=len(entries),
    )


def month_overview(entries: Iterable[ColorEntry]) -> MonthOverview | None:
    entries = list(entries)
    if not entries:
        return None

    counts = frequency(entries)
    return MonthOverview(
        total_days=len(entries),
        average_score=round_half_up(average_mood(entries)),
        dominant_color=dominant_color(counts),
        color_variety=color_variety(counts),
    )


def weekday_pattern(entries: Iterable[ColorEntry]) -> list[float]:
    """Mean mood score per weekday, Monday first; 0.0 for empty weekdays."""
    by_weekday: list[list[int]] = [[] for _ in range(7)]
    for entry in entries:
        by_weekday[entry.date.weekday()].append(entry.mood_score)
    return [statistics.fmean(scores) if scores else 0.0 for scores in by_weekday]


def usage_stats(entries: Iterable[ColorEntry], as_of: date) -> UsageStats:
    """Total diary days and the share of days since the first entry."""
    entries = list(entries)
    if not entries:
        return UsageStats(total_days=0, days_since_start=0, completion_rate=0, start_date=None)

    start_date = min(entry.date for entry in entries)
    days_since_start = (as_of - start_date).days
    completion_rate = round_half_up(len(entries) / days_since_start * 100) if days_since_start > 0 else 0
    return UsageStats(
        total_days=len(entries),
        days_since_start=days_since_start,
        completion_rate=completion_rate,
        start_date=start_date,
    )


def analysis_overview(
    entries: Iterable[ColorEntry],
    start: date,
    as_of: date,
    trend_window: int = 7,
    limit: int = 3,
) -> AnalysisOverview | None:
    """Trend over the most recent entries plus mixture, frequency and patterns over all."""
    entries = list(entries)
    if not entries:
        return None

    recent = sorted(entries, key=lambda entry: entry.date, reverse=True)[:trend_window]
    return AnalysisOverview(
        start=start,
        end=as_of,
        weekly_trend=analyze_trend(recent),
        mixture=mix(entries, as_of),
        frequency=frequency_report(entries, limit),
        weekday_pattern=weekday_pattern(entries),
        total_days=len(entries),
        average_mood=average_mood(entries),
    )
