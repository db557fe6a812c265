"""Persisted weekly/monthly aggregates and their background refresh."""

import asyncio
import contextlib
import logging
import time
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from color_diary_api.core.logging import ActionType, activity_logger
from color_diary_api.db.session import AsyncSessionLocal
from color_diary_api.engine.periods import month_bounds, month_key, week_bounds
from color_diary_api.engine.summaries import month_overview, monthly_summary, usage_stats, weekly_summary
from color_diary_api.models import MonthlyTrend, WeeklyStat
from color_diary_api.schemas.stats import MonthlySummary, MonthOverview, UsageStats, WeeklySummary
from color_diary_api.services.entry_store import EntryStore, SqlEntryStore

logger = logging.getLogger(__name__)


class StatsService:
    """Service for computing and reading weekly/monthly statistics."""

    def __init__(self, db: AsyncSession, store: EntryStore | None = None) -> None:
        self.db = db
        self.store = store or SqlEntryStore(db)

    async def update_weekly_stats(self, day: date) -> WeeklySummary | None:
        """Recompute and persist the stats row of the week containing ``day``."""
        week_start, week_end = week_bounds(day)
        entries = await self.store.get_entries_in_range(week_start, week_end)
        summary = weekly_summary(entries, week_start)
        if summary is None:
            return None

        result = await self.db.execute(select(WeeklyStat).where(WeeklyStat.week_start == week_start))
        row = result.scalar_one_or_none()
        if row is None:
            row = WeeklyStat(week_start=week_start)
            self.db.add(row)

        row.average_score = summary.average_score
        row.dominant_color = summary.dominant_color
        row.color_variety = summary.color_variety
        row.total_entries = summary.total_entries
        await self.db.flush()
        return summary

    async def update_monthly_trends(self, day: date) -> MonthlySummary | None:
        """Recompute and persist the trend row of the month containing ``day``."""
        month_start, month_end = month_bounds(day)
        entries = await self.store.get_entries_in_range(month_start, month_end)
        summary = monthly_summary(entries, month_start)
        if summary is None:
            return None

        result = await self.db.execute(select(MonthlyTrend).where(MonthlyTrend.month == summary.month))
        row = result.scalar_one_or_none()
        if row is None:
            row = MonthlyTrend(month=summary.month)
            self.db.add(row)

        row.trend_direction = summary.trend_direction
        row.average_score = summary.average_score
        row.dominant_colors = ",".join(summary.dominant_colors)
        row.color_diversity = summary.color_diversity
        row.total_entries = summary.total_entries
        await self.db.flush()
        return summary

    async def refresh(self, day: date) -> None:
        await self.update_weekly_stats(day)
        await self.update_monthly_trends(day)

    async def get_weekly_stats(self, day: date) -> WeeklySummary | None:
        """Last persisted stats of the week containing ``day``; may lag behind writes."""
        week_start, _ = week_bounds(day)
        result = await self.db.execute(select(WeeklyStat).where(WeeklyStat.week_start == week_start))
        row = result.scalar_one_or_none()
        return WeeklySummary.model_validate(row) if row else None

    async def get_monthly_trend(self, month: date) -> MonthlySummary | None:
        """Last persisted trend of a month; may lag behind writes."""
        result = await self.db.execute(select(MonthlyTrend).where(MonthlyTrend.month == month_key(month)))
        row = result.scalar_one_or_none()
        if row is None:
            return None

        return MonthlySummary(
            month=row.month,
            trend_direction=row.trend_direction,
            average_score=row.average_score,
            dominant_colors=[key for key in row.dominant_colors.split(",") if key],
            color_diversity=row.color_diversity,
            total_entries=row.total_entries,
        )

    async def get_month_overview(self, month: date) -> MonthOverview | None:
        """Live calendar summary of a month."""
        month_start, month_end = month_bounds(month)
        entries = await self.store.get_entries_in_range(month_start, month_end)
        return month_overview(entries)

    async def get_usage_stats(self, as_of: date) -> UsageStats:
        entries = await self.store.get_all_entries()
        return usage_stats(entries, as_of)


class StatsRefresher:
    """Background queue that recomputes aggregates after entry writes.

    ``schedule`` never blocks the caller. One worker task drains the queue;
    a failed refresh is logged and the worker moves on, so readers of the
    persisted stats may see stale rows until the next successful refresh.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory
        self._queue: asyncio.Queue[date] = asyncio.Queue()
        self._task: asyncio.Task[None] | None = None

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def schedule(self, day: date) -> None:
        self._queue.put_nowait(day)

    async def refresh(self, day: date) -> None:
        """Recompute the week and month of ``day`` in a fresh session."""
        start_time = time.time()
        async with self.session_factory() as session:
            await StatsService(session).refresh(day)
            await session.commit()

        activity_logger.log(
            action_type=ActionType.STATS_REFRESH,
            action_data={"date": day.isoformat()},
            duration_ms=int((time.time() - start_time) * 1000),
        )

    async def _run(self) -> None:
        while True:
            day = await self._queue.get()
            try:
                await self.refresh(day)
            except Exception:
                logger.exception("Stats refresh failed for %s", day)
            finally:
                self._queue.task_done()

    def start(self) -> None:
        if not self.running:
            self._task = asyncio.create_task(self._run())
            logger.info("Stats refresher started")

    async def join(self) -> None:
        """Wait until every scheduled refresh has been processed."""
        await self._queue.join()

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Stats refresher stopped")


# Global refresher used by the application
stats_refresher = StatsRefresher(AsyncSessionLocal)
