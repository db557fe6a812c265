"""Service layer for Color Diary API."""

from color_diary_api.services.analysis import AnalysisService
from color_diary_api.services.entries import EntryService
from color_diary_api.services.entry_store import EntryStore, SqlEntryStore
from color_diary_api.services.preferences import PreferenceService
from color_diary_api.services.report import ReportService
from color_diary_api.services.stats import StatsRefresher, StatsService, stats_refresher

__all__ = [
    "AnalysisService",
    "EntryService",
    "EntryStore",
    "PreferenceService",
    "ReportService",
    "SqlEntryStore",
    "StatsRefresher",
    "StatsService",
    "stats_refresher",
]
