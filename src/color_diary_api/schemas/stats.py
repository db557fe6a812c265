"""Aggregate statistics schemas."""

from datetime import date

from pydantic import Field

from color_diary_api.schemas.analysis import TrendDirection
from color_diary_api.schemas.base import BaseSchema


class WeeklySummary(BaseSchema):
    """Aggregates for one Monday-based week."""

    week_start: date = Field(..., alias="weekStart")
    average_score: float = Field(..., alias="averageScore")
    dominant_color: str = Field(..., alias="dominantColor")
    color_variety: int = Field(..., alias="colorVariety")
    total_entries: int = Field(..., alias="totalEntries")


class MonthlySummary(BaseSchema):
    """Aggregates for one calendar month."""

    month: str = Field(..., pattern=r"^\d{4}-\d{2}$")
    trend_direction: TrendDirection | None = Field(None, alias="trendDirection")
    average_score: float = Field(..., alias="averageScore")
    dominant_colors: list[str] = Field(..., alias="dominantColors")
    color_diversity: float = Field(..., alias="colorDiversity")
    total_entries: int = Field(..., alias="totalEntries")


class MonthOverview(BaseSchema):
    """Calendar card summary for a month."""

    total_days: int = Field(..., alias="totalDays")
    average_score: int = Field(..., alias="averageScore")
    dominant_color: str = Field(..., alias="dominantColor")
    color_variety: int = Field(..., alias="colorVariety")


class UsageStats(BaseSchema):
    """How regularly the diary has been kept."""

    total_days: int = Field(..., alias="totalDays")
    days_since_start: int = Field(..., alias="daysSinceStart")
    completion_rate: int = Field(..., alias="completionRate")
    start_date: date | None = Field(None, alias="startDate")
