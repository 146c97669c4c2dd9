from projects_demo.domain.projects.repositories.project_repository import (
    ProjectRepository,
)

__all__ = ["ProjectRepository"]
