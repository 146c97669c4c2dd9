"""Create a new project."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from projects_demo.domain.projects import (
    Project,
    ProjectRepository,
    ProjectValidationError,
    validate_project,
)

if TYPE_CHECKING:
    from projects_demo.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateProjectCommand:
    """Validate submitted data and persist a new project."""

    def __init__(self, project_repository: ProjectRepository):
        self._project_repo = project_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateProjectCommand:
        return cls(project_repository=factory.project_repository())

    async def execute(
        self,
        name: Optional[str],
        description: Optional[str] = None,
    ) -> Project:
        violations = validate_project(name, description)
        if violations:
            raise ProjectValidationError(violations)

        project = await self._project_repo.add(
            Project(name=name, description=description),
        )
        logger.debug("Created project %s", project.id)
        return project
