"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

Routes:
    /hello                  plain text greeting
    /word-count/v{1,2,3}    top-N word frequencies (three strategies)
    /api/projects           project catalogue (CRUD + stream)
    /actuator/{health,info} operational endpoints
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from projects_demo import __version__
from projects_demo.domain.shared.time import utc_now
from projects_demo.presentation.api.config import get_api_settings
from projects_demo.presentation.api.dependencies import create_tables, get_engine
from projects_demo.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from projects_demo.presentation.api.routers import (
    actuator_router,
    hello_router,
    projects_router,
    word_count_router,
)
from projects_demo_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging.

    Sets up logging for the projects_demo application with:
    - Console output with timestamps and module names
    - Configurable log level for projects_demo modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = get_settings()
    log_level_str = settings.log_level.upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("projects_demo").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__
API_PROJECTS_PREFIX = "/api/projects"

OPENAPI_TAGS = [
    {
        "name": "Projects",
        "description": """Project catalogue.

**Fields:**
- `name`: required, 1-30 characters, not blank
- `description`: optional, at most 100 characters
- `id`, `createdAt`: assigned by the store, ignored on input

Validation failures return `400` with one message per violated
constraint, formatted as `project.<field> <message>`.
""",
    },
    {
        "name": "Word Count",
        "description": """Top-N word frequencies of a fixed story.

All three versions return the same result: ordered by count descending,
ties broken alphabetically, truncated to `limit` entries.
""",
    },
    {
        "name": "Greeting",
        "description": "Plain text hello.",
    },
    {
        "name": "Actuator",
        "description": "Service health and information.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting Projects Demo API v%s...", API_VERSION)
    engine = get_engine()
    await _init_database_schema(engine)
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down Projects Demo API...")
    await engine.dispose()
    logger.info("Database connections closed")


async def _init_database_schema(engine: AsyncEngine) -> None:
    """Initialize database schema (if not existent) and verify connectivity."""
    try:
        await create_tables(engine)
    except (ConnectionRefusedError, OSError):
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    # Configure logging on first app creation (not on module import)
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=settings.app_description,
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.started_at = utc_now()
    app.dependency_overrides[get_api_settings] = lambda: settings

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Register domain exception handlers for consistent error responses
    setup_exception_handlers(app)

    app.include_router(hello_router, tags=["Greeting"])
    app.include_router(word_count_router, prefix="/word-count", tags=["Word Count"])
    app.include_router(projects_router, prefix=API_PROJECTS_PREFIX, tags=["Projects"])
    app.include_router(actuator_router, prefix="/actuator", tags=["Actuator"])

    return app
