"""Recency-weighted color mixtures."""

from collections.abc import Iterable
from datetime import date

from color_diary_api.engine.colors import round_half_up
from color_diary_api.engine.insights import mixture_interpretation, mixture_recommendations
from color_diary_api.engine.palette import analyze_color, classify
from color_diary_api.schemas.analysis import ColorBalance, MixtureResult
from color_diary_api.schemas.color import RGBColor, Warmth
from color_diary_api.schemas.entry import ColorEntry

# (max age in days, weight), checked in order; older entries get OLDEST_WEIGHT.
RECENCY_WEIGHTS = ((7, 1.0), (30, 0.8), (90, 0.6))
OLDEST_WEIGHT = 0.4


def recency_weight(entry_date: date, as_of: date) -> float:
    """Step-function weight of an entry relative to ``as_of``.

    Entries dated after ``as_of`` have a negative age and land in the
    first bucket.
    """
    days = (as_of - entry_date).days
    for max_days, weight in RECENCY_WEIGHTS:
        if days <= max_days:
            return weight
    return OLDEST_WEIGHT


def dominant_warmth(balance: ColorBalance) -> Warmth:
    """Warmth with a strictly greater count than both others, else neutral.

    A warm/cool tie therefore resolves to neutral even when no neutral
    color was picked.
    """
    if balance.warm > balance.cool and balance.warm > balance.neutral:
        return Warmth.WARM
    if balance.cool > balance.warm and balance.cool > balance.neutral:
        return Warmth.COOL
    return Warmth.NEUTRAL


def mix(entries: Iterable[ColorEntry], as_of: date) -> MixtureResult | None:
    """Blend entries into one color with intensity and warmth statistics.

    Channel and intensity sums are weighted by recency but divided by the
    plain entry count, so older entries pull the mixture towards black
    rather than being averaged out. Returns None for no entries.
    """
    entries = list(entries)
    if not entries:
        return None

    total_r = total_g = total_b = 0.0
    total_intensity = 0.0
    balance = {Warmth.WARM: 0, Warmth.COOL: 0, Warmth.NEUTRAL: 0}

    for entry in entries:
        color = entry.color_hex
        palette_entry = classify(color)
        weight = recency_weight(entry.date, as_of)

        total_r += color.r * weight
        total_g += color.g * weight
        total_b += color.b * weight
        total_intensity += palette_entry.intensity * weight
        balance[Warmth(palette_entry.warmth)] += 1

    count = len(entries)
    mixed_color = RGBColor(
        r=round_half_up(total_r / count),
        g=round_half_up(total_g / count),
        b=round_half_up(total_b / count),
    )
    average_intensity = round_half_up(total_intensity / count)
    color_balance = ColorBalance(
        warm=balance[Warmth.WARM],
        cool=balance[Warmth.COOL],
        neutral=balance[Warmth.NEUTRAL],
    )
    warmth = dominant_warmth(color_balance)

    return MixtureResult(
        mixed_color=mixed_color,
        average_intensity=average_intensity,
        dominant_warmth=warmth,
        color_balance=color_balance,
        total_entries=count,
        interpretation=mixture_interpretation(average_intensity, warmth),
        recommendations=mixture_recommendations(average_intensity, warmth),
        mixed_analysis=analyze_color(mixed_color),
    )
