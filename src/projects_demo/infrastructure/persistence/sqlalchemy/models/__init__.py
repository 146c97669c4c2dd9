from projects_demo.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    DocumentMixin,
)
from projects_demo.infrastructure.persistence.sqlalchemy.models.project_model import (
    ProjectModel,
)

__all__ = ["Base", "DocumentMixin", "ProjectModel"]
