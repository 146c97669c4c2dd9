"""Get a single project by its identifier."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

from projects_demo.domain.projects import Project, ProjectRepository

if TYPE_CHECKING:
    from projects_demo.application.factories import RepositoryFactory


class GetProjectQuery:
    """Query a project; None means it does not exist."""

    def __init__(self, project_repository: ProjectRepository):
        self._project_repo = project_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetProjectQuery:
        return cls(project_repository=factory.project_repository())

    async def execute(self, project_id: UUID) -> Optional[Project]:
        return await self._project_repo.find_by_id(project_id)
