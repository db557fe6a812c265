"""Database initialization and default preferences."""

import asyncio

from color_diary_api.db.session import AsyncSessionLocal, init_db
from color_diary_api.services.preferences import PreferenceService

DEFAULT_PREFERENCES = {
    "notifications": False,
    "notificationTime": "20:00",
}


async def create_default_preferences() -> None:
    """Store default preferences that are not set yet."""
    async with AsyncSessionLocal() as session:
        service = PreferenceService(session)
        for key, value in DEFAULT_PREFERENCES.items():
            if await service.get_preference(key) is None:
                await service.set_preference(key, value)
                print(f"Preference set: {key} = {value!r}")
        await session.commit()


async def main() -> None:
    """Initialize database and default preferences."""
    print("Initializing database...")
    await init_db()
    print("Database tables created")

    print("Creating default preferences...")
    await create_default_preferences()

    print("Database initialization complete!")


if __name__ == "__main__":
    asyncio.run(main())
