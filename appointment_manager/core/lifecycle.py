"""
Application lifecycle management using the FastAPI lifespan pattern.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from appointment_manager.config.settings import get_settings
from appointment_manager.database.async_db import dispose_engine, init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create tables on startup when configured; release the engine on shutdown."""
    settings = getattr(app.state, "settings", None) or get_settings()
    logger.info(f"Starting {settings.PROJECT_NAME} ({settings.ENVIRONMENT})")

    if settings.DB_CREATE_TABLES:
        await init_db()

    try:
        yield
    finally:
        await dispose_engine()
        logger.info("Application shutdown completed")
