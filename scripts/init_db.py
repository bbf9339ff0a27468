"""Create all tables and seed lookup data without running migrations."""

import asyncio

from clinic_api.config import get_settings
from clinic_api.database import Database


async def init_db() -> None:
    """Create missing tables on the configured database."""
    settings = get_settings()
    database = Database(settings.async_database_url)
    try:
        await database.create_all()
        print(f"✓ Database initialized at {settings.async_database_url}")
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(init_db())
