"""Structured activity logging for diary usage analysis."""

import logging
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel

from color_diary_api.config import get_settings


class ActionType(str, Enum):
    """User action types for activity logging."""

    # Entries
    ENTRY_SAVE = "entry.save"
    ENTRY_VIEW = "entry.view"
    ENTRY_RANGE_VIEW = "entry.range.view"

    # Color Analysis
    COLOR_ANALYZE = "color.analyze"

    # Aggregates
    MIXTURE_VIEW = "analysis.mixture.view"
    TREND_VIEW = "analysis.trend.view"
    FREQUENCY_VIEW = "analysis.frequency.view"
    OVERVIEW_VIEW = "analysis.overview.view"
    STATS_VIEW = "stats.view"
    STATS_REFRESH = "stats.refresh"

    # Settings
    PREFERENCE_UPDATE = "preference.update"

    # Export
    REPORT_DOWNLOAD = "report.download"


class ActivityLog(BaseModel):
    """Structured log entry for one user action."""

    timestamp: datetime
    action_type: ActionType
    action_data: dict[str, Any]
    duration_ms: int | None = None


class ActivityLogger:
    """Writes user actions as JSON lines.

    The log file is opened on the first record, so importing the package
    never touches the filesystem.
    """

    def __init__(self, path: str, enabled: bool = True) -> None:
        self.enabled = enabled
        self.logger = logging.getLogger("color_diary.activity")
        self.logger.propagate = False
        if enabled:
            self._setup_logger(path)

    def _setup_logger(self, path: str) -> None:
        """Configure the activity log handler."""
        handler = logging.FileHandler(path, encoding="utf-8", delay=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        self.logger.addHandler(handler)
        self.logger.setLevel(logging.INFO)

    def log(
        self,
        action_type: ActionType,
        action_data: dict[str, Any] | None = None,
        duration_ms: int | None = None,
    ) -> ActivityLog:
        """Log an activity event."""
        log_entry = ActivityLog(
            timestamp=datetime.now(timezone.utc),
            action_type=action_type,
            action_data=action_data or {},
            duration_ms=duration_ms,
        )
        if self.enabled:
            self.logger.info(log_entry.model_dump_json())
        return log_entry

    def log_entry_saved(self, entry_date: date, color_key: str, mood_score: int, replaced: bool) -> None:
        """Log a daily color commit."""
        self.log(
            action_type=ActionType.ENTRY_SAVE,
            action_data={
                "date": entry_date.isoformat(),
                "color_key": color_key,
                "mood_score": mood_score,
                "replaced": replaced,
            },
        )

    def log_view(self, action_type: ActionType, as_of: date, entry_count: int, **extra: Any) -> None:
        """Log an aggregate view with the reference date it was computed for."""
        self.log(
            action_type=action_type,
            action_data={"as_of": as_of.isoformat(), "entry_count": entry_count, **extra},
        )


_settings = get_settings()

# Global activity logger instance
activity_logger = ActivityLogger(_settings.activity_log_path, enabled=_settings.log_user_actions)
