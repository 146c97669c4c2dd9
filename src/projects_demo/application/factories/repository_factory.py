"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from projects_demo.domain.projects import ProjectRepository


class RepositoryFactory(Protocol):
    """Protocol for creating session-bound repositories."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def project_repository(self) -> ProjectRepository:
        """Get project repository."""
        ...
