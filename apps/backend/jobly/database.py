"""Database configuration, session management and the query store."""

from collections.abc import AsyncGenerator, Sequence
from typing import Any

from fastapi import Depends
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .config import settings
from .models.base import Base

# Create async engine
engine: AsyncEngine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_size=5,
    max_overflow=10,
    pool_pre_ping=True,
)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
    autocommit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency to get database session.

    Yields:
        AsyncSession: Database session, committed when the request succeeds
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


class Store:
    """Runs raw parameterized SQL on a session's connection.

    Statements go through ``exec_driver_sql`` so ``$1``-style placeholders
    reach asyncpg untouched.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def execute(
        self, sql: str, values: Sequence[Any] = ()
    ) -> list[dict[str, Any]]:
        """Execute one statement and return its rows as dicts."""
        conn = await self.session.connection()
        result = await conn.exec_driver_sql(sql, tuple(values))
        if not result.returns_rows:
            return []
        return [dict(row) for row in result.mappings().all()]


async def get_store(db: AsyncSession = Depends(get_db)) -> Store:
    """FastAPI dependency wrapping the request session in a Store."""
    return Store(db)


async def init_db() -> None:
    """Initialize database tables.

    Creates all tables defined in the models if they don't exist.
    Should be called during application startup.
    """
    async with engine.begin() as conn:
        # Import all models to ensure they are registered
        from .models import Company, Job  # noqa: F401

        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Dispose the engine and close all pooled connections."""
    await engine.dispose()
