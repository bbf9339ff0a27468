"""Database configuration and connection management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import Request
from sqlalchemy import event, select, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from clinic_api.models import metadata
from clinic_api.models.departments import DEFAULT_DEPARTMENTS, departments
from clinic_api.models.specialties import DEFAULT_SPECIALTIES, specialties

logger = structlog.get_logger(__name__)


class Database:
    """Owns the async engine and session factory for one application instance."""

    def __init__(self, url: str, echo: bool = False, **engine_kwargs: Any):
        """Create the engine; no connection is opened until first use."""
        self.url = url
        self.engine: AsyncEngine = create_async_engine(
            url,
            echo=echo,
            pool_pre_ping=True,
            **engine_kwargs,
        )
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _set_sqlite_pragma)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session, rolling back on error."""
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create all tables and seed lookup data."""
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)

            existing = set((await conn.execute(select(specialties.c.name))).scalars().all())
            missing = [{"name": name} for name in DEFAULT_SPECIALTIES if name not in existing]
            if missing:
                await conn.execute(specialties.insert(), missing)

            existing = set((await conn.execute(select(departments.c.name))).scalars().all())
            missing = [{"name": name} for name in DEFAULT_DEPARTMENTS if name not in existing]
            if missing:
                await conn.execute(departments.insert(), missing)

        logger.info("database_initialized", dialect=self.engine.dialect.name)

    async def check_connection(self) -> bool:
        """Check if database connection is healthy."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning("database_health_check_failed", error=str(e))
            return False

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()


def _set_sqlite_pragma(dbapi_conn: Any, connection_record: Any) -> None:
    """Enforce foreign keys on SQLite connections."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_database(request: Request) -> Database:
    """Return the database attached to the running application."""
    return request.app.state.database


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting async database sessions."""
    async with get_database(request).session() as session:
        yield session
