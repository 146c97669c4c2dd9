"""List projects query - retrieve the whole catalogue."""

from __future__ import annotations

from typing import TYPE_CHECKING

from projects_demo.domain.projects import Project, ProjectRepository

if TYPE_CHECKING:
    from projects_demo.application.factories import RepositoryFactory


class ListProjectsQuery:
    """Query returning every stored project, in store order."""

    def __init__(self, project_repository: ProjectRepository):
        self._project_repo = project_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListProjectsQuery:
        return cls(project_repository=factory.project_repository())

    async def execute(self) -> list[Project]:
        return await self._project_repo.find_all()
