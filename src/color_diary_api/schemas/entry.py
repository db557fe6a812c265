"""Daily color entry schemas."""

import datetime as dt

from pydantic import Field

from color_diary_api.schemas.base import BaseSchema, ValueSchema
from color_diary_api.schemas.color import RGBColor


class ColorEntry(ValueSchema):
    """One committed daily color, as the analysis engine sees it."""

    date: dt.date
    color_hex: RGBColor = Field(..., alias="colorHex")
    mood_score: int = Field(..., ge=1, le=10, alias="moodScore")
    notes: str | None = None


class ColorEntryCreate(BaseSchema):
    """Request body for committing the color of a day."""

    date: dt.date | None = Field(None, description="Defaults to today")
    color_hex: str = Field(..., alias="colorHex", pattern=r"^#?[0-9A-Fa-f]{6}$")
    notes: str | None = Field(None, max_length=2000)
