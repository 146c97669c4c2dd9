"""SQLAlchemy adapter reporting store connectivity."""

from __future__ import annotations

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from projects_demo.application.ports.system import HealthIndicatorPort
from projects_demo.application.queries.system.health_dtos import (
    ComponentHealth,
    HealthStatus,
)

logger = logging.getLogger(__name__)


class SqlAlchemyDatabaseHealthAdapter(HealthIndicatorPort):
    """Checks the store by running ``SELECT 1`` on a fresh session."""

    name = "db"

    def __init__(
        self,
        session_maker: async_sessionmaker[AsyncSession],
        database_type: str,
    ):
        self._session_maker = session_maker
        self._database_type = database_type

    async def health(self) -> ComponentHealth:
        try:
            async with self._session_maker() as session:
                await session.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as exc:
            logger.warning("Database health check failed: %s", exc)
            return ComponentHealth(
                status=HealthStatus.DOWN,
                details={"database": self._database_type, "error": str(exc)},
            )

        return ComponentHealth(
            status=HealthStatus.UP,
            details={"database": self._database_type},
        )
