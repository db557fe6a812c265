"""Palette bucket tallies for "most selected color" reporting."""

from collections import Counter
from collections.abc import Iterable, Mapping

from color_diary_api.engine.palette import PALETTE_KEYS, classify, palette_index
from color_diary_api.schemas.analysis import ColorCount, FrequencyReport
from color_diary_api.schemas.entry import ColorEntry


def frequency(entries: Iterable[ColorEntry]) -> dict[str, int]:
    """Count entries per palette key; only non-zero keys, in palette order."""
    counts = Counter(classify(entry.color_hex).key for entry in entries)
    return {key: counts[key] for key in PALETTE_KEYS if counts[key]}


def top_colors(counts: Mapping[str, int], limit: int | None = None) -> list[ColorCount]:
    """Keys by descending count, ties in palette order."""
    ranked = sorted(counts.items(), key=lambda item: (-item[1], palette_index(item[0])))
    if limit is not None:
        ranked = ranked[:limit]
    return [ColorCount(key=key, count=count) for key, count in ranked]


def dominant_color(counts: Mapping[str, int]) -> str | None:
    ranked = top_colors(counts, 1)
    return ranked[0].key if ranked else None


def color_variety(counts: Mapping[str, int]) -> int:
    return sum(1 for count in counts.values() if count)


def color_diversity(counts: Mapping[str, int]) -> float:
    """Share of the palette that has been picked at least once."""
    return color_variety(counts) / len(PALETTE_KEYS)


def frequency_report(entries: Iterable[ColorEntry], limit: int = 3) -> FrequencyReport:
    entries = list(entries)
    counts = frequency(entries)
    return FrequencyReport(
        counts=counts,
        top_colors=top_colors(counts, limit),
        dominant_color=dominant_color(counts),
        color_variety=color_variety(counts),
        color_diversity=color_diversity(counts),
        total_entries=len(entries),
    )
