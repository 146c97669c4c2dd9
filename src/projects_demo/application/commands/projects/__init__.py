from projects_demo.application.commands.projects.create_project_command import (
    CreateProjectCommand,
)
from projects_demo.application.commands.projects.delete_project_command import (
    DeleteProjectCommand,
)
from projects_demo.application.commands.projects.update_project_command import (
    UpdateProjectCommand,
)

__all__ = [
    "CreateProjectCommand",
    "DeleteProjectCommand",
    "UpdateProjectCommand",
]
