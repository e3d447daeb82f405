"""
Application lifecycle management using the FastAPI lifespan pattern.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from grocery_market.config.settings import get_settings
from grocery_market.database import create_tables, dispose_engine

logger = logging.getLogger(__name__)


class LifecycleManager:
    """
    Manages application lifecycle events.

    Startup optionally creates missing tables; shutdown releases the
    connection pool.
    """

    def __init__(self) -> None:
        self._initialized = False

    async def startup(self) -> None:
        if self._initialized:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        settings = get_settings()
        logger.info(f"Starting {settings.PROJECT_NAME} v{settings.VERSION} ({settings.ENVIRONMENT})")

        if settings.DB_CREATE_TABLES:
            await create_tables()
        else:
            logger.info("DB_CREATE_TABLES disabled, schema is managed by Alembic")

        self._initialized = True
        logger.info("Application lifecycle startup completed")

    async def shutdown(self) -> None:
        if not self._initialized:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        await dispose_engine()

        self._initialized = False
        logger.info("Application lifecycle shutdown completed")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """FastAPI lifespan: startup before yield, shutdown after."""
    manager = LifecycleManager()
    await manager.startup()
    try:
        yield
    finally:
        await manager.shutdown()
