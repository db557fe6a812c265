"""Tests for the weekly PDF report."""

from datetime import date

from color_diary_api.services.entry_store import SqlEntryStore
from color_diary_api.services.report import ReportService


class TestWeeklyReport:
    """PDF rendering of one week."""

    async def test_report_with_entries(self, db, as_of):
        store = SqlEntryStore(db)
        for day, color_hex in [(10, "#FF3B30"), (11, "#007AFF"), (12, "#34C759"), (3, "#000000")]:
            await store.save_entry(date(2024, 6, day), color_hex, "note")

        pdf = await ReportService(store).generate_weekly_report(as_of)

        assert pdf.startswith(b"%PDF")
        assert len(pdf) > 1000

    async def test_report_for_an_empty_week(self, db, as_of):
        pdf = await ReportService(SqlEntryStore(db)).generate_weekly_report(as_of)
        assert pdf.startswith(b"%PDF")
