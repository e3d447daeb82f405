"""
Shared pytest fixtures for all tests.

Provides an in-memory SQLite database (aiosqlite) with the marketplace schema,
a session factory, seeded marketplace data and an HTTP client bound to the app.
"""

import os
from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"

from grocery_market.database import create_tables, drop_tables  # noqa: E402
from tests.utils.factories import MarketplaceSeed, seed_marketplace  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest_asyncio.fixture
async def async_engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory database shared by every connection of one test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(engine)
    yield engine
    await drop_tables(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def async_session_factory(async_engine: AsyncEngine) -> async_sessionmaker:
    """Create async session factory."""
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def db_session(async_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """A session for the code under test."""
    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def marketplace(async_session_factory) -> MarketplaceSeed:
    """Seeded customer, two sellers and their products."""
    return await seed_marketplace(async_session_factory)


# ============================================================================
# MOCK FIXTURES
# ============================================================================


@pytest.fixture
def mock_async_session():
    """Create a mock async database session."""
    session = AsyncMock(spec=AsyncSession)
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.get = AsyncMock()
    session.add = MagicMock()
    return session


# ============================================================================
# API FIXTURES
# ============================================================================


@pytest_asyncio.fixture
async def api_client(async_session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for the app, with the request session bound to the test database."""
    from grocery_market.core.app_factory import create_app
    from grocery_market.database import get_async_db

    app = create_app()

    async def override_get_async_db() -> AsyncGenerator[AsyncSession, None]:
        async with async_session_factory() as session:
            yield session

    app.dependency_overrides[get_async_db] = override_get_async_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
