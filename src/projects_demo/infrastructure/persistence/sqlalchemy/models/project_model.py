"""SQLAlchemy model for projects."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from projects_demo.domain.projects import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH
from projects_demo.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    DocumentMixin,
)


class ProjectModel(Base, DocumentMixin):
    """Database model for projects."""

    __tablename__ = "projects"

    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(
        String(DESCRIPTION_MAX_LENGTH),
        nullable=True,
    )

    # Optimistic concurrency: UPDATE/DELETE match on the loaded version
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}
