"""FastAPI dependency injection for the Projects Demo API.

Provides dependencies for:
- Database engine, session maker and sessions
- Repository factory bound to the request session
- Health indicators
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from projects_demo.application.ports.system import HealthIndicatorPort
from projects_demo.application.services import CustomHealthIndicator
from projects_demo.infrastructure.persistence.sqlalchemy.adapters import (
    SqlAlchemyDatabaseHealthAdapter,
)
from projects_demo.infrastructure.persistence.sqlalchemy.models import Base
from projects_demo.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from projects_demo.presentation.api.config import get_api_settings
from projects_demo_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for file-based SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_database_url(),
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


# Type alias for injected session maker (overridable in tests)
SessionMaker = Annotated[async_sessionmaker[AsyncSession], Depends(get_session_maker)]


async def get_db_session(
    session_maker: SessionMaker,
) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Database Schema Management
# -----------------------------------------------------------------------------


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    engine = engine or get_engine()
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


# -----------------------------------------------------------------------------
# Repositories & Health
# -----------------------------------------------------------------------------


def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    """Get a repository factory bound to the request session."""
    return SQLAlchemyRepositoryFactory(session)


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


def get_health_indicators(
    session_maker: SessionMaker,
    settings: Settings = Depends(get_api_settings),
) -> list[HealthIndicatorPort]:
    """Get every indicator contributing to the service health."""
    return [
        CustomHealthIndicator(),
        SqlAlchemyDatabaseHealthAdapter(
            session_maker=session_maker,
            database_type=settings.database_type,
        ),
    ]


HealthIndicators = Annotated[list[HealthIndicatorPort], Depends(get_health_indicators)]
ApiSettings = Annotated[Settings, Depends(get_api_settings)]
