"""Daily color entry service."""

import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from color_diary_api.core.exceptions import NotFoundError, ValidationError
from color_diary_api.core.logging import ActionType, activity_logger
from color_diary_api.engine.palette import classify
from color_diary_api.schemas.entry import ColorEntry
from color_diary_api.services.entry_store import SqlEntryStore
from color_diary_api.services.stats import StatsRefresher

logger = logging.getLogger(__name__)


class EntryService:
    """Service for committing and reading daily colors."""

    def __init__(self, db: AsyncSession, refresher: StatsRefresher) -> None:
        self.db = db
        self.store = SqlEntryStore(db)
        self.refresher = refresher

    async def save_entry(self, day: date, color_hex: str, notes: str | None = None) -> ColorEntry:
        """Store the color of a day and queue a stats refresh for it.

        Saving twice for the same day replaces the earlier color.
        """
        existing = await self.store.get_entry(day)
        if existing:
            logger.info("Replacing color entry for %s", day)

        entry = await self.store.save_entry(day, color_hex, notes)
        # The refresher reads through its own session, so the write must be visible first.
        await self.db.commit()
        self.refresher.schedule(day)

        activity_logger.log_entry_saved(
            entry_date=day,
            color_key=classify(entry.color_hex).key,
            mood_score=entry.mood_score,
            replaced=existing is not None,
        )
        return entry

    async def get_entry(self, day: date) -> ColorEntry:
        entry = await self.store.get_entry(day)
        if entry is None:
            raise NotFoundError("Color entry", day.isoformat())

        activity_logger.log(action_type=ActionType.ENTRY_VIEW, action_data={"date": day.isoformat()})
        return entry

    async def list_entries(self, start: date | None, end: date) -> list[ColorEntry]:
        """Entries in an inclusive range, newest first."""
        if start is not None and start > end:
            raise ValidationError("Range start must not be after its end", field="start")

        entries = await self.store.get_entries_in_range(start, end)
        activity_logger.log(
            action_type=ActionType.ENTRY_RANGE_VIEW,
            action_data={
                "start": start.isoformat() if start else None,
                "end": end.isoformat(),
                "entry_count": len(entries),
            },
        )
        return entries
