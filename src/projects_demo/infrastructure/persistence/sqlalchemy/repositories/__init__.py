from projects_demo.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from projects_demo.infrastructure.persistence.sqlalchemy.repositories.project_repository import (  # NOQA: E501
    ProjectRepositorySQLAlchemy,
)

__all__ = ["ProjectRepositorySQLAlchemy", "SQLAlchemyRepositoryFactory"]
