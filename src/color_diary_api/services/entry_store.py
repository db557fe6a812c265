"""Entry Store: the persistence contract the analysis engine reads from."""

from collections.abc import Sequence
from datetime import date
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from color_diary_api.engine.palette import mood_score
from color_diary_api.models import ColorEntry as ColorEntryModel
from color_diary_api.schemas.color import RGBColor
from color_diary_api.schemas.entry import ColorEntry


class EntryStore(Protocol):
    """Read access to dated color entries.

    Range results may come back in any order; consumers that need
    chronological order sort on their own.
    """

    async def get_entry(self, day: date) -> ColorEntry | None: ...

    async def get_entries_in_range(self, start: date | None, end: date) -> Sequence[ColorEntry]: ...

    async def get_all_entries(self) -> Sequence[ColorEntry]: ...


class SqlEntryStore:
    """EntryStore backed by the ``color_entries`` table."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _get_row(self, day: date) -> ColorEntryModel | None:
        result = await self.db.execute(select(ColorEntryModel).where(ColorEntryModel.date == day))
        return result.scalar_one_or_none()

    async def get_entry(self, day: date) -> ColorEntry | None:
        row = await self._get_row(day)
        return ColorEntry.model_validate(row) if row else None

    async def get_entries_in_range(self, start: date | None, end: date) -> list[ColorEntry]:
        """Entries dated ``start..end`` inclusive, newest first. ``start=None`` is open-ended."""
        query = select(ColorEntryModel).where(ColorEntryModel.date <= end)
        if start is not None:
            query = query.where(ColorEntryModel.date >= start)
        result = await self.db.execute(query.order_by(ColorEntryModel.date.desc()))
        return [ColorEntry.model_validate(row) for row in result.scalars().all()]

    async def get_all_entries(self) -> list[ColorEntry]:
        """Every entry, newest first."""
        result = await self.db.execute(select(ColorEntryModel).order_by(ColorEntryModel.date.desc()))
        return [ColorEntry.model_validate(row) for row in result.scalars().all()]

    async def save_entry(self, day: date, color_hex: str, notes: str | None = None) -> ColorEntry:
        """Insert or replace the entry of a day.

        Raises ParseError for a malformed color before anything is written.
        """
        color = RGBColor.from_hex(color_hex)
        score = mood_score(color)

        row = await self._get_row(day)
        if row is None:
            row = ColorEntryModel(date=day, color_hex=color.hex, mood_score=score, notes=notes)
            self.db.add(row)
        else:
            row.color_hex = color.hex
            row.mood_score = score
            row.notes = notes
        await self.db.flush()

        return ColorEntry.model_validate(row)
