"""Database models for Color Diary API."""

from color_diary_api.models.entry import ColorEntry
from color_diary_api.models.preference import UserPreference
from color_diary_api.models.stats import MonthlyTrend, WeeklyStat

__all__ = [
    "ColorEntry",
    "MonthlyTrend",
    "UserPreference",
    "WeeklyStat",
]
