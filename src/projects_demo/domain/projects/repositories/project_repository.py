"""Project repository interface.

Defines the contract for Project persistence. The store owns identity:
implementations assign ``id`` and ``created_at`` when a project is added.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from typing import Optional
from uuid import UUID

from projects_demo.domain.projects.entities import Project


class ProjectRepository(ABC):
    """Repository interface for Project entities."""

    @abstractmethod
    async def add(self, project: Project) -> Project:
        """Persist a new project and return it with id and created_at set."""

    @abstractmethod
    async def update(self, project: Project) -> Project:
        """Persist changes to the mutable fields of an existing project.

        Raises ConcurrencyError when the stored row no longer matches
        ``project.version``.
        """

    @abstractmethod
    async def find_by_id(self, project_id: UUID) -> Optional[Project]:
        """Find project by ID."""

    @abstractmethod
    async def find_all(self) -> list[Project]:
        """Return all projects."""

    @abstractmethod
    def stream_all(self) -> AsyncIterator[Project]:
        """Iterate over all projects using a store cursor."""

    @abstractmethod
    async def delete(
        self,
        project_id: UUID,
        expected_version: Optional[int] = None,
    ) -> bool:
        """Delete a project. Returns False if it did not exist.

        When ``expected_version`` is given and the stored row has moved on,
        ConcurrencyError is raised instead of deleting.
        """
