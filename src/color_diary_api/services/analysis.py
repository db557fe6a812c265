"""Analysis service: runs the engine over entries read from the store."""

from datetime import date, timedelta

from color_diary_api.config import get_settings
from color_diary_api.core.exceptions import ValidationError
from color_diary_api.core.logging import ActionType, activity_logger
from color_diary_api.engine.colors import wheel_color
from color_diary_api.engine.frequency import frequency_report
from color_diary_api.engine.mixture import mix
from color_diary_api.engine.palette import PALETTE, analyze_color
from color_diary_api.engine.periods import period_range
from color_diary_api.engine.summaries import analysis_overview
from color_diary_api.engine.trend import analyze_trend
from color_diary_api.schemas.analysis import (
    AnalysisOverview,
    FrequencyReport,
    MixturePeriod,
    MixtureResponse,
    TrendResult,
)
from color_diary_api.schemas.color import ColorAnalysis, PaletteEntry, RGBColor
from color_diary_api.services.entry_store import EntryStore

settings = get_settings()


class AnalysisService:
    """Service for mixtures, trends and frequency reports.

    Every method takes the reference date explicitly; the service never
    reads the clock.
    """

    def __init__(self, store: EntryStore) -> None:
        self.store = store

    def get_palette(self) -> list[PaletteEntry]:
        return list(PALETTE)

    def analyze_color(self, color_hex: str) -> ColorAnalysis:
        """Classify a color string; raises ParseError when malformed."""
        analysis = analyze_color(RGBColor.from_hex(color_hex))
        activity_logger.log(
            action_type=ActionType.COLOR_ANALYZE,
            action_data={"hex": analysis.hex, "color_key": analysis.color_key},
        )
        return analysis

    def wheel_color(self, angle: float, distance: float) -> ColorAnalysis:
        """Analysis of the color under a point of the color wheel."""
        return analyze_color(wheel_color(angle, distance))

    async def get_mixture(self, period: MixturePeriod, as_of: date) -> MixtureResponse:
        start, end = period_range(period, as_of)
        entries = await self.store.get_entries_in_range(start, end)
        mixture = mix(entries, as_of)

        activity_logger.log_view(ActionType.MIXTURE_VIEW, as_of, len(entries), period=MixturePeriod(period).value)
        return MixtureResponse(period=period, start=start, end=end, mixture=mixture)

    async def get_trend(self, as_of: date) -> TrendResult | None:
        """Trend over the most recent entries up to ``as_of``."""
        entries = await self.store.get_entries_in_range(None, as_of)
        recent = sorted(entries, key=lambda entry: entry.date, reverse=True)[: settings.trend_window_entries]

        activity_logger.log_view(ActionType.TREND_VIEW, as_of, len(recent))
        return analyze_trend(recent)

    async def get_frequency(
        self,
        start: date | None,
        end: date,
        limit: int | None = None,
    ) -> FrequencyReport:
        if start is not None and start > end:
            raise ValidationError("Range start must not be after its end", field="start")

        entries = await self.store.get_entries_in_range(start, end)
        activity_logger.log_view(ActionType.FREQUENCY_VIEW, end, len(entries))
        return frequency_report(entries, limit or settings.top_colors_limit)

    async def get_overview(self, as_of: date) -> AnalysisOverview | None:
        """Combined analysis of the recent window ending at ``as_of``."""
        start = as_of - timedelta(days=settings.overview_window_days)
        entries = await self.store.get_entries_in_range(start, as_of)

        activity_logger.log_view(ActionType.OVERVIEW_VIEW, as_of, len(entries))
        return analysis_overview(
            entries,
            start=start,
            as_of=as_of,
            trend_window=settings.trend_window_entries,
            limit=settings.top_colors_limit,
        )
