"""
Database Connection Module
Holds the process-wide SQLAlchemy async engine and session factory.

The engine is built once at startup by ``init_engine``. ``init_db`` creates
the tables and only logs a failure, so the API keeps serving even when the
database is unreachable; individual requests then fail on their own.
"""

import logging
from typing import AsyncIterator, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)

engine: Optional[AsyncEngine] = None
async_session_maker: Optional[async_sessionmaker[AsyncSession]] = None


# Base class for all our models
class Base(DeclarativeBase):
    pass


def init_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create the async engine and session factory.
    Called once at application startup.
    """
    global engine, async_session_maker

    options = {"echo": echo}
    if make_url(database_url).get_backend_name() != "sqlite":
        options.update(pool_size=5, max_overflow=10)

    engine = create_async_engine(database_url, **options)
    async_session_maker = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False  # Objects remain accessible after commit
    )
    return engine


async def init_db() -> bool:
    """
    Create all tables in database.

    Returns:
        True if the database answered, False otherwise. Never raises.
    """
    if engine is None:
        logger.error("❌ Database engine not initialized")
        return False

    # Register models on Base.metadata
    import food_ordering.models  # noqa: F401

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except Exception as e:
        logger.error(f"❌ Database connection error: {e}")
        return False

    logger.info("✅ Database connected")
    return True


async def dispose_db() -> None:
    """Close all pooled connections."""
    global engine, async_session_maker

    if engine is not None:
        await engine.dispose()
    engine = None
    async_session_maker = None


async def get_db() -> AsyncIterator[AsyncSession]:
    """
    Dependency injection for FastAPI routes.
    Yields a database session and ensures cleanup.
    """
    if async_session_maker is None:
        raise RuntimeError("Database engine not initialized")

    async with async_session_maker() as session:
        try:
            yield session
        finally:
            await session.close()
