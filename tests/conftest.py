"""Shared fixtures for the Color Diary tests."""

import os

# Configure before the package reads its settings
os.environ["LOG_USER_ACTIONS"] = "false"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

from datetime import date, timedelta

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import color_diary_api.models  # noqa: F401
from color_diary_api.db.session import Base
from color_diary_api.engine.palette import get_palette_entry, mood_score
from color_diary_api.schemas.color import RGBColor
from color_diary_api.schemas.entry import ColorEntry
from color_diary_api.services.stats import StatsRefresher

# A Saturday
AS_OF = date(2024, 6, 15)


@pytest.fixture
def as_of():
    return AS_OF


@pytest.fixture
def make_entry():
    """Build an engine entry from a date and either a hex string or a palette key."""

    def _make(day, color, notes=None):
        if not color.startswith("#"):
            color = get_palette_entry(color).hex.hex
        rgb = RGBColor.from_hex(color)
        return ColorEntry(date=day, color_hex=rgb, mood_score=mood_score(rgb), notes=notes)

    return _make


@pytest.fixture
def days_ago(as_of):
    def _days_ago(days):
        return as_of - timedelta(days=days)

    return _days_ago


@pytest.fixture
async def engine():
    """Fresh in-memory database with all tables."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def refresher(session_factory):
    return StatsRefresher(session_factory)
