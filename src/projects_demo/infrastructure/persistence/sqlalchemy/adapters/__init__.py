from projects_demo.infrastructure.persistence.sqlalchemy.adapters.database_health_adapter import (  # NOQA: E501
    SqlAlchemyDatabaseHealthAdapter,
)

__all__ = ["SqlAlchemyDatabaseHealthAdapter"]
