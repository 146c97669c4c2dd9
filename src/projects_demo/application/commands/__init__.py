"""Command layer. Operations that change state."""

from projects_demo.application.commands.projects import (
    CreateProjectCommand,
    DeleteProjectCommand,
    UpdateProjectCommand,
)

__all__ = [
    "CreateProjectCommand",
    "DeleteProjectCommand",
    "UpdateProjectCommand",
]
