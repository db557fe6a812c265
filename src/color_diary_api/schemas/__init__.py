"""Pydantic schemas for Color Diary API."""

from color_diary_api.schemas.analysis import (
    AnalysisOverview,
    ColorBalance,
    ColorCount,
    FrequencyReport,
    MixturePeriod,
    MixtureResponse,
    MixtureResult,
    ScoreRange,
    TrendDirection,
    TrendResult,
)
from color_diary_api.schemas.base import ApiResponse, ErrorDetail
from color_diary_api.schemas.color import ColorAnalysis, PaletteEntry, RGBColor, Warmth
from color_diary_api.schemas.entry import ColorEntry, ColorEntryCreate
from color_diary_api.schemas.preference import PreferenceResponse, PreferenceValue
from color_diary_api.schemas.stats import MonthlySummary, MonthOverview, UsageStats, WeeklySummary

__all__ = [
    # Base
    "ApiResponse",
    "ErrorDetail",
    # Color
    "ColorAnalysis",
    "PaletteEntry",
    "RGBColor",
    "Warmth",
    # Entry
    "ColorEntry",
    "ColorEntryCreate",
    # Analysis
    "AnalysisOverview",
    "ColorBalance",
    "ColorCount",
    "FrequencyReport",
    "MixturePeriod",
    "MixtureResponse",
    "MixtureResult",
    "ScoreRange",
    "TrendDirection",
    "TrendResult",
    # Stats
    "MonthlySummary",
    "MonthOverview",
    "UsageStats",
    "WeeklySummary",
    # Preferences
    "PreferenceResponse",
    "PreferenceValue",
]
