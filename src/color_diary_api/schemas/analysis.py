"""Mixture, trend and frequency schemas."""

from datetime import date
from enum import Enum

from pydantic import Field

from color_diary_api.schemas.base import BaseSchema
from color_diary_api.schemas.color import ColorAnalysis, RGBColor, Warmth


class TrendDirection(str, Enum):
    """Direction of the intensity trend."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class MixturePeriod(str, Enum):
    """Date windows a mixture can be computed over."""

    ALL = "all"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class ColorBalance(BaseSchema):
    """Unweighted warmth tally."""

    warm: int = 0
    cool: int = 0
    neutral: int = 0


class MixtureResult(BaseSchema):
    """Recency-weighted blend of several daily colors."""

    mixed_color: RGBColor = Field(..., alias="mixedColor")
    average_intensity: int = Field(..., alias="averageIntensity")
    dominant_warmth: Warmth = Field(..., alias="dominantWarmth")
    color_balance: ColorBalance = Field(..., alias="colorBalance")
    total_entries: int = Field(..., alias="totalEntries")
    interpretation: str
    recommendations: list[str]
    mixed_analysis: ColorAnalysis = Field(..., alias="mixedAnalysis")


class MixtureResponse(BaseSchema):
    """Mixture for a named period."""

    period: MixturePeriod
    start: date | None = None
    end: date
    mixture: MixtureResult | None = None


class ScoreRange(BaseSchema):
    """Lowest and highest intensity."""

    min: int
    max: int


class TrendResult(BaseSchema):
    """Week-over-week intensity trend."""

    trend_direction: TrendDirection = Field(..., alias="trendDirection")
    average_score: float = Field(..., alias="averageScore")
    score_range: ScoreRange = Field(..., alias="scoreRange")
    consistency: float = Field(..., ge=0, le=1)


class ColorCount(BaseSchema):
    """Occurrences of one palette color."""

    key: str
    count: int


class FrequencyReport(BaseSchema):
    """Palette bucket counts over a date range."""

    counts: dict[str, int]
    top_colors: list[ColorCount] = Field(..., alias="topColors")
    dominant_color: str | None = Field(None, alias="dominantColor")
    color_variety: int = Field(..., alias="colorVariety")
    color_diversity: float = Field(..., alias="colorDiversity")
    total_entries: int = Field(..., alias="totalEntries")


class AnalysisOverview(BaseSchema):
    """Combined analysis of a recent window of entries."""

    start: date
    end: date
    weekly_trend: TrendResult | None = Field(None, alias="weeklyTrend")
    mixture: MixtureResult | None = None
    frequency: FrequencyReport
    weekday_pattern: list[float] = Field(..., alias="weekdayPattern")
    total_days: int = Field(..., alias="totalDays")
    average_mood: float = Field(..., alias="averageMood")
