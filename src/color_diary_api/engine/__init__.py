"""Stateless color analysis engine.

Every function works on caller-supplied entries and the fixed palette;
none of them reads the clock, touches storage or keeps state.
"""

from color_diary_api.engine.colors import hex_to_rgb, rgb_to_hex, wheel_color, wheel_position
from color_diary_api.engine.frequency import dominant_color, frequency, frequency_report, top_colors
from color_diary_api.engine.mixture import mix, recency_weight
from color_diary_api.engine.palette import (
    PALETTE,
    analyze_color,
    classify,
    classify_hex,
    describe,
    get_palette_entry,
    mood_score,
)
from color_diary_api.engine.trend import analyze_trend

__all__ = [
    "PALETTE",
    "analyze_color",
    "analyze_trend",
    "classify",
    "classify_hex",
    "describe",
    "dominant_color",
    "frequency",
    "frequency_report",
    "get_palette_entry",
    "hex_to_rgb",
    "mix",
    "mood_score",
    "recency_weight",
    "rgb_to_hex",
    "top_colors",
    "wheel_color",
    "wheel_position",
]
