"""Project catalogue domain."""

from projects_demo.domain.projects.entities import Project
from projects_demo.domain.projects.exceptions import (
    ENTITY_NAME,
    ProjectValidationError,
)
from projects_demo.domain.projects.repositories import ProjectRepository
from projects_demo.domain.projects.validation import (
    DESCRIPTION_MAX_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    FieldViolation,
    validate_project,
)

__all__ = [
    "DESCRIPTION_MAX_LENGTH",
    "ENTITY_NAME",
    "NAME_MAX_LENGTH",
    "NAME_MIN_LENGTH",
    "FieldViolation",
    "Project",
    "ProjectRepository",
    "ProjectValidationError",
    "validate_project",
]
