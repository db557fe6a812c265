"""Daily color entry database model."""

import datetime as dt

from sqlalchemy import Date, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from color_diary_api.db.session import Base, utc_now


class ColorEntry(Base):
    """The color picked for one calendar day."""

    __tablename__ = "color_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    date: Mapped[dt.date] = mapped_column(Date, unique=True, index=True, nullable=False)
    color_hex: Mapped[str] = mapped_column(String(7), nullable=False)  # canonical #RRGGBB
    mood_score: Mapped[int] = mapped_column(Integer, nullable=False)  # palette intensity 1-10
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Timestamps
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False
    )
