"""SQLAlchemy repository factory for creating session-bound repositories."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from projects_demo.infrastructure.persistence.sqlalchemy.repositories.project_repository import (  # NOQA: E501
    ProjectRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._project_repo: ProjectRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def project_repository(self) -> ProjectRepositorySQLAlchemy:
        if self._project_repo is None:
            self._project_repo = ProjectRepositorySQLAlchemy(self._session)
        return self._project_repo
