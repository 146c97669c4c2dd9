"""Delete a project."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from projects_demo.domain.projects import ProjectRepository

if TYPE_CHECKING:
    from projects_demo.application.factories import RepositoryFactory


class DeleteProjectCommand:
    """Remove a project. Returns False when it does not exist.

    The delete only applies to the version that was read; a concurrent
    change in between surfaces as ConcurrencyError.
    """

    def __init__(self, project_repository: ProjectRepository):
        self._project_repo = project_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteProjectCommand:
        return cls(project_repository=factory.project_repository())

    async def execute(self, project_id: UUID) -> bool:
        project = await self._project_repo.find_by_id(project_id)
        if project is None:
            return False
        return await self._project_repo.delete(
            project_id,
            expected_version=project.version,
        )
