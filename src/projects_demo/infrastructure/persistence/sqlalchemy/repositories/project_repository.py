"""SQLAlchemy implementation of ProjectRepository."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from projects_demo.domain.projects import Project, ProjectRepository
from projects_demo.domain.shared.exceptions import ConcurrencyError
from projects_demo.domain.shared.time import ensure_tz_aware
from projects_demo.infrastructure.persistence.sqlalchemy.models import ProjectModel

logger = logging.getLogger(__name__)


class ProjectRepositorySQLAlchemy(ProjectRepository):
    """SQLAlchemy implementation of the project repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def add(self, project: Project) -> Project:
        model = ProjectModel(name=project.name, description=project.description)
        self._session.add(model)
        await self._session.flush()

        logger.info("Project saved: %s (ID: %s)", model.name, model.id)
        return self._map_to_domain(model)

    async def update(self, project: Project) -> Project:
        if project.id is None:
            msg = "Cannot update a project that has not been persisted"
            raise ValueError(msg)

        model = await self._find_model_by_id(project.id)
        if model is None:
            raise ConcurrencyError(
                details={"project_id": str(project.id), "operation": "update"},
            )

        self._check_version(model, project.version, "update")

        logger.debug("Updating existing project: %s", project.id)
        model.name = project.name
        model.description = project.description
        await self._flush_guarded(project.id, "update")

        logger.info("Project updated: %s (ID: %s)", model.name, model.id)
        return self._map_to_domain(model)

    async def find_by_id(self, project_id: UUID) -> Optional[Project]:
        model = await self._find_model_by_id(project_id)

        if not model:
            return None

        return self._map_to_domain(model)

    async def find_all(self) -> list[Project]:
        result = await self._session.execute(select(ProjectModel))
        models = result.scalars().all()

        return [self._map_to_domain(model) for model in models]

    async def stream_all(self) -> AsyncIterator[Project]:
        result = await self._session.stream_scalars(select(ProjectModel))
        try:
            async for model in result:
                yield self._map_to_domain(model)
        finally:
            await result.close()

    async def delete(
        self,
        project_id: UUID,
        expected_version: Optional[int] = None,
    ) -> bool:
        model = await self._find_model_by_id(project_id)

        if not model:
            return False

        self._check_version(model, expected_version, "delete")

        await self._session.delete(model)
        await self._flush_guarded(project_id, "delete")

        logger.info("Project deleted: %s", project_id)
        return True

    async def _find_model_by_id(self, project_id: UUID) -> Optional[ProjectModel]:
        stmt = select(ProjectModel).where(ProjectModel.id == project_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _check_version(
        model: ProjectModel,
        expected_version: Optional[int],
        operation: str,
    ) -> None:
        # The row may have been reloaded since the caller read it
        if expected_version is None or model.version == expected_version:
            return
        logger.warning(
            "Stale %s of project %s (loaded version %s, stored version %s)",
            operation,
            model.id,
            expected_version,
            model.version,
        )
        raise ConcurrencyError(
            details={
                "project_id": str(model.id),
                "operation": operation,
                "expected_version": expected_version,
                "actual_version": model.version,
            },
        )

    async def _flush_guarded(self, project_id: UUID, operation: str) -> None:
        try:
            await self._session.flush()
        except StaleDataError as exc:
            # Keep session usable after a failed flush
            await self._session.rollback()
            logger.warning(
                "Concurrent modification detected on %s of project %s",
                operation,
                project_id,
            )
            raise ConcurrencyError(
                details={"project_id": str(project_id), "operation": operation},
            ) from exc

    @staticmethod
    def _map_to_domain(model: ProjectModel) -> Project:
        return Project(
            id=model.id,
            name=model.name,
            description=model.description,
            created_at=ensure_tz_aware(model.created_at),
            version=model.version,
        )
