"""Tests for persisted statistics, the background refresher and preferences."""

import logging
from datetime import date

import pytest

from color_diary_api.models import UserPreference
from color_diary_api.services.entry_store import SqlEntryStore
from color_diary_api.services.preferences import PreferenceService
from color_diary_api.services.stats import StatsService


@pytest.fixture
def seed(session_factory):
    """Commit entries through a short-lived session."""

    async def _seed(*items):
        async with session_factory() as session:
            store = SqlEntryStore(session)
            for day, color_hex in items:
                await store.save_entry(day, color_hex)
            await session.commit()

    return _seed


class TestStatsService:
    """Upserts of weekly and monthly rows."""

    async def test_weekly_row_is_created_and_updated(self, db):
        store = SqlEntryStore(db)
        service = StatsService(db)
        await store.save_entry(date(2024, 6, 10), "#FF3B30")

        first = await service.update_weekly_stats(date(2024, 6, 12))
        assert first.week_start == date(2024, 6, 10)
        assert first.total_entries == 1

        await store.save_entry(date(2024, 6, 11), "#007AFF")
        await service.update_weekly_stats(date(2024, 6, 11))

        stats = await service.get_weekly_stats(date(2024, 6, 16))
        assert stats.average_score == pytest.approx(6.5)
        assert stats.dominant_color == "red"
        assert stats.color_variety == 2
        assert stats.total_entries == 2

    async def test_empty_week_writes_nothing(self, db):
        service = StatsService(db)
        assert await service.update_weekly_stats(date(2024, 6, 10)) is None
        assert await service.get_weekly_stats(date(2024, 6, 10)) is None

    async def test_monthly_trend_round_trip(self, db):
        store = SqlEntryStore(db)
        service = StatsService(db)
        for day, color_hex in [(1, "#FF3B30"), (2, "#FF3B30"), (20, "#007AFF"), (21, "#34C759")]:
            await store.save_entry(date(2024, 6, day), color_hex)

        await service.update_monthly_trends(date(2024, 6, 21))
        trend = await service.get_monthly_trend(date(2024, 6, 1))

        assert trend.month == "2024-06"
        assert trend.trend_direction == "decreasing"
        assert trend.dominant_colors == ["red", "blue", "green"]
        assert trend.color_diversity == pytest.approx(0.3)
        assert trend.total_entries == 4

    async def test_month_overview_and_usage(self, db):
        store = SqlEntryStore(db)
        service = StatsService(db)
        await store.save_entry(date(2024, 6, 1), "#007AFF")
        await store.save_entry(date(2024, 6, 2), "#FF3B30")
        await store.save_entry(date(2024, 5, 31), "#FFFFFF")

        overview = await service.get_month_overview(date(2024, 6, 1))
        assert overview.total_days == 2
        assert overview.average_score == 7

        usage = await service.get_usage_stats(date(2024, 6, 10))
        assert usage.total_days == 3
        assert usage.days_since_start == 10
        assert usage.completion_rate == 30
        assert usage.start_date == date(2024, 5, 31)


class TestStatsRefresher:
    """Background recomputation after writes."""

    async def test_stats_lag_until_the_queue_drains(self, seed, session_factory, refresher):
        await seed((date(2024, 6, 10), "#FF3B30"), (date(2024, 6, 11), "#007AFF"))
        refresher.schedule(date(2024, 6, 11))

        async with session_factory() as session:
            assert await StatsService(session).get_weekly_stats(date(2024, 6, 11)) is None

        refresher.start()
        assert refresher.running
        await refresher.join()
        await refresher.stop()
        assert not refresher.running
        assert refresher.pending == 0

        async with session_factory() as session:
            service = StatsService(session)
            weekly = await service.get_weekly_stats(date(2024, 6, 15))
            monthly = await service.get_monthly_trend(date(2024, 6, 1))

        assert weekly.total_entries == 2
        assert weekly.average_score == pytest.approx(6.5)
        assert monthly.dominant_colors == ["red", "blue"]
        assert monthly.trend_direction == "decreasing"

    async def test_failed_refresh_is_logged_and_skipped(self, seed, session_factory, refresher, monkeypatch, caplog):
        await seed((date(2024, 6, 10), "#FF3B30"), (date(2024, 7, 1), "#34C759"))
        calls = []
        original_refresh = refresher.refresh

        async def flaky_refresh(day):
            calls.append(day)
            if len(calls) == 1:
                raise RuntimeError("database is locked")
            await original_refresh(day)

        monkeypatch.setattr(refresher, "refresh", flaky_refresh)
        refresher.schedule(date(2024, 6, 10))
        refresher.schedule(date(2024, 7, 1))

        with caplog.at_level(logging.ERROR, logger="color_diary_api.services.stats"):
            refresher.start()
            await refresher.join()
            await refresher.stop()

        assert calls == [date(2024, 6, 10), date(2024, 7, 1)]
        assert "Stats refresh failed for 2024-06-10" in caplog.text

        async with session_factory() as session:
            service = StatsService(session)
            assert await service.get_monthly_trend(date(2024, 6, 1)) is None
            assert (await service.get_monthly_trend(date(2024, 7, 1))).total_entries == 1

    async def test_stop_without_start(self, refresher):
        await refresher.stop()
        assert not refresher.running


class TestPreferences:
    """JSON-encoded key/value settings."""

    async def test_set_and_get(self, db):
        service = PreferenceService(db)
        await service.set_preference("notificationTime", "21:30")
        await service.set_preference("reminderDays", [1, 3, 5])

        assert await service.get_preference("notificationTime") == "21:30"
        assert await service.get_preference("reminderDays") == [1, 3, 5]

    async def test_default_when_unset(self, db):
        service = PreferenceService(db)
        assert await service.get_preference("notifications") is None
        assert await service.get_preference("notifications", False) is False

    async def test_overwrite_keeps_one_row(self, db):
        service = PreferenceService(db)
        await service.set_preference("notifications", True)
        await service.set_preference("notifications", False)

        assert await service.get_preference("notifications") is False
        rows = (await db.execute(UserPreference.__table__.select())).all()
        assert len(rows) == 1

    async def test_non_json_value_is_returned_raw(self, db):
        db.add(UserPreference(key="theme", value="dark mode"))
        await db.flush()
        assert await PreferenceService(db).get_preference("theme") == "dark mode"
