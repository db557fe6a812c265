"""User preference schemas."""

from typing import Any

from color_diary_api.schemas.base import BaseSchema


class PreferenceValue(BaseSchema):
    """Request body for storing a preference."""

    value: Any


class PreferenceResponse(BaseSchema):
    """A stored preference."""

    key: str
    value: Any
