import logging
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from grocery_market.config.settings import get_settings
from grocery_market.models.db import Base

logger = logging.getLogger(__name__)

settings = get_settings()


def create_async_database_engine() -> AsyncEngine:
    """Create the async database engine for the configured environment."""
    try:
        base_config = {
            "echo": settings.DB_ECHO,
            "pool_pre_ping": True,
        }

        if settings.DEBUG:
            # Development: no pooling
            logger.info("Creating async database engine for DEVELOPMENT (NullPool)")
            engine_config = {
                **base_config,
                "poolclass": NullPool,
            }
        else:
            logger.info("Creating async database engine for PRODUCTION (pooled)")
            engine_config = {
                **base_config,
                "pool_size": settings.DB_POOL_SIZE,
                "max_overflow": settings.DB_MAX_OVERFLOW,
                "pool_recycle": settings.DB_POOL_RECYCLE,
                "pool_timeout": settings.DB_POOL_TIMEOUT,
            }

        return create_async_engine(settings.async_database_url, **engine_config)

    except Exception as e:
        logger.error(f"Failed to create async database engine: {e}")
        raise


async_engine = create_async_database_engine()

AsyncSessionLocal = async_sessionmaker(
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency providing one async session per request.

    Use cases own their transaction; this only guarantees nothing is left
    open when the request ends.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception as e:
            logger.error(f"Async database error: {e}")
            await session.rollback()
            raise
        finally:
            await session.close()


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """Create every mapped table that does not exist yet."""
    target = engine or async_engine
    try:
        async with target.begin() as conn:
            logger.info("Creating tables...")
            await conn.run_sync(Base.metadata.create_all)
            logger.info("Tables created")
    except Exception as e:
        logger.error(f"Error creating tables: {e}")
        raise


async def drop_tables(engine: AsyncEngine | None = None) -> None:
    """Drop every mapped table."""
    target = engine or async_engine
    try:
        async with target.begin() as conn:
            logger.info("Dropping tables...")
            await conn.run_sync(Base.metadata.drop_all)
            logger.info("Tables dropped")
    except Exception as e:
        logger.error(f"Error dropping tables: {e}")
        raise


async def dispose_engine() -> None:
    """Release pooled connections on shutdown."""
    await async_engine.dispose()
    logger.info("Database engine disposed")
