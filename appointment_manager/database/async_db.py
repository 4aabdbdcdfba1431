"""
Async database engine and session management.

The engine is created on first use so importing the application does not
require a reachable database.
"""

import logging
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from appointment_manager.config.settings import get_settings
from appointment_manager.database.base import Base

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def create_async_database_engine() -> AsyncEngine:
    """Create the async engine from settings."""
    settings = get_settings()
    try:
        base_config = {
            "echo": settings.DB_ECHO,
            "pool_pre_ping": True,
        }

        if settings.DEBUG:
            logger.info("Creating async database engine for DEVELOPMENT (NullPool)")
            engine_config = {
                **base_config,
                "poolclass": NullPool,
            }
        else:
            # create_async_engine defaults to AsyncAdaptedQueuePool
            logger.info("Creating async database engine for PRODUCTION (pooled)")
            engine_config = {
                **base_config,
                "pool_size": settings.DB_POOL_SIZE,
                "max_overflow": settings.DB_MAX_OVERFLOW,
                "pool_recycle": settings.DB_POOL_RECYCLE,
                "pool_timeout": 30,
            }

        return create_async_engine(settings.database_url, **engine_config)

    except Exception as e:
        logger.error(f"Failed to create async database engine: {e}")
        raise


def get_engine() -> AsyncEngine:
    global _engine
    if _engine is None:
        _engine = create_async_database_engine()
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return _session_factory


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding one session per request.

    Commits are issued by the unit of work; this only rolls back on error.
    """
    async with get_session_factory()() as session:
        try:
            yield session
        except Exception as e:
            logger.error(f"Async database error: {e}")
            await session.rollback()
            raise


async def init_db() -> None:
    """Create every mapped table that does not exist yet."""
    # Models must be imported so their tables are registered on the metadata
    from appointment_manager.domains.appointments.infrastructure.persistence.sqlalchemy import models  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")


async def dispose_engine() -> None:
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
        logger.info("Database engine disposed")
    _engine = None
    _session_factory = None
