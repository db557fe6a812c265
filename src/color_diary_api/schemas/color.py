"""Color and palette schemas."""

import re
from enum import Enum
from typing import Any

from pydantic import Field, computed_field, model_validator

from color_diary_api.core.exceptions import ParseError
from color_diary_api.schemas.base import BaseSchema, ValueSchema

HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


class Warmth(str, Enum):
    """Warmth family of a palette color."""

    WARM = "warm"
    COOL = "cool"
    NEUTRAL = "neutral"


class RGBColor(ValueSchema):
    """An 8-bit RGB color.

    Accepts a ``#RRGGBB`` string anywhere an RGBColor is expected and
    serialises with its canonical uppercase hex.
    """

    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)

    @model_validator(mode="before")
    @classmethod
    def _parse_hex_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return cls._channels(data)
        return data

    @staticmethod
    def _channels(value: str) -> dict[str, int]:
        match = HEX_PATTERN.fullmatch(value)
        if match is None:
            raise ParseError(value)
        r, g, b = (int(part, 16) for part in match.groups())
        return {"r": r, "g": g, "b": b}

    @classmethod
    def from_hex(cls, value: str) -> "RGBColor":
        """Parse ``#RRGGBB`` (case-insensitive, ``#`` optional)."""
        return cls(**cls._channels(value))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def __str__(self) -> str:
        return self.hex


class PaletteEntry(ValueSchema):
    """One of the fixed mood colors."""

    key: str
    hex: RGBColor
    mood: str
    intensity: int = Field(..., ge=1, le=10)
    warmth: Warmth


class ColorAnalysis(BaseSchema):
    """Classification of a single color against the palette."""

    color_key: str = Field(..., alias="colorKey")
    mood: str
    intensity: int
    warmth: Warmth
    hex: str = Field(..., pattern=r"^#[0-9A-F]{6}$")
    analysis: str
    suggestions: list[str]
