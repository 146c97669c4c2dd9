"""Update the mutable fields of an existing project."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from projects_demo.domain.projects import (
    Project,
    ProjectRepository,
    ProjectValidationError,
    validate_project,
)

if TYPE_CHECKING:
    from projects_demo.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateProjectCommand:
    """Overwrite name and description, keeping id and creation time.

    Returns None when the project does not exist; nothing is created in
    that case. The read and the write are guarded by the row version, so a
    concurrent change between them surfaces as ConcurrencyError.
    """

    def __init__(self, project_repository: ProjectRepository):
        self._project_repo = project_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateProjectCommand:
        return cls(project_repository=factory.project_repository())

    async def execute(
        self,
        project_id: UUID,
        name: Optional[str],
        description: Optional[str] = None,
    ) -> Optional[Project]:
        violations = validate_project(name, description)
        if violations:
            raise ProjectValidationError(violations)

        project = await self._project_repo.find_by_id(project_id)
        if project is None:
            logger.debug("Project %s not found for update", project_id)
            return None

        project.update_details(name=name, description=description)
        return await self._project_repo.update(project)
