"""Persisted weekly and monthly aggregates.

Rows are recomputed in the background after each entry write and may lag
behind the entries table.
"""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from color_diary_api.db.session import Base, utc_now


class WeeklyStat(Base):
    """Aggregates for one Monday-based week."""

    __tablename__ = "weekly_stats"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    week_start: Mapped[date] = mapped_column(Date, unique=True, index=True, nullable=False)

    average_score: Mapped[float] = mapped_column(Float, nullable=False)
    dominant_color: Mapped[str] = mapped_column(String(20), nullable=False)
    color_variety: Mapped[int] = mapped_column(Integer, nullable=False)
    total_entries: Mapped[int] = mapped_column(Integer, nullable=False)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False
    )


class MonthlyTrend(Base):
    """Aggregates for one calendar month."""

    __tablename__ = "monthly_trends"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    month: Mapped[str] = mapped_column(String(7), unique=True, index=True, nullable=False)  # YYYY-MM

    trend_direction: Mapped[str | None] = mapped_column(String(20), nullable=True)
    average_score: Mapped[float] = mapped_column(Float, nullable=False)
    dominant_colors: Mapped[str] = mapped_column(String(100), nullable=False)  # comma separated keys
    color_diversity: Mapped[float] = mapped_column(Float, nullable=False)
    total_entries: Mapped[int] = mapped_column(Integer, nullable=False)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False
    )
