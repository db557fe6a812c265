"""User preference service."""

import json
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from color_diary_api.core.logging import ActionType, activity_logger
from color_diary_api.models import UserPreference


class PreferenceService:
    """Service for key/value user settings."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_preference(self, key: str, default: Any = None) -> Any:
        """Decoded value of a preference, or ``default`` when unset.

        Values that are not valid JSON are returned as the raw text.
        """
        result = await self.db.execute(select(UserPreference).where(UserPreference.key == key))
        preference = result.scalar_one_or_none()
        if preference is None:
            return default

        try:
            return json.loads(preference.value)
        except json.JSONDecodeError:
            return preference.value

    async def set_preference(self, key: str, value: Any) -> Any:
        result = await self.db.execute(select(UserPreference).where(UserPreference.key == key))
        preference = result.scalar_one_or_none()
        encoded = json.dumps(value, ensure_ascii=False)

        if preference is None:
            preference = UserPreference(key=key, value=encoded)
            self.db.add(preference)
        else:
            preference.value = encoded
        await self.db.flush()

        activity_logger.log(action_type=ActionType.PREFERENCE_UPDATE, action_data={"key": key})
        return value
