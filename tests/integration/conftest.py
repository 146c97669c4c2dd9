"""Pytest fixtures for integration tests.

Every test gets its own SQLite database file in a temporary directory,
with all tables created up front.
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from projects_demo.infrastructure.persistence.sqlalchemy.models import Base
from projects_demo.presentation.api.app import create_app
from projects_demo.presentation.api.dependencies import get_session_maker
from projects_demo_config.settings import Settings

# Small but measurable pause between streamed items
TEST_STREAM_DELAY_SECONDS = 0.2


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'projects-test.db'}"


@pytest.fixture
def api_settings(database_url: str) -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        database_url=database_url,
        api_host="127.0.0.1",
        api_port=8080,
        api_debug=True,
        projects_stream_delay_seconds=TEST_STREAM_DELAY_SECONDS,
        word_count_default_limit=2,
    )


@pytest_asyncio.fixture
async def test_db_engine(database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """Create a file-backed SQLite database with all tables."""
    engine = create_async_engine(database_url, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def test_session_maker(test_db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture
async def db_session(
    test_session_maker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Provide an isolated session; uncommitted changes are rolled back."""
    async with test_session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture
def test_app(
    api_settings: Settings,
    test_session_maker: async_sessionmaker[AsyncSession],
) -> FastAPI:
    """Create the application wired to the test database."""
    app = create_app(settings=api_settings)
    app.dependency_overrides[get_session_maker] = lambda: test_session_maker
    return app


@pytest_asyncio.fixture
async def client(test_app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client talking to the app in-process."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
