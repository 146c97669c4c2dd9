"""SQLAlchemy base configuration."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from projects_demo.domain.shared.time import utc_now


class Base(DeclarativeBase):
    """Base class for all database models."""


class DocumentMixin:
    """Mixin for store-assigned identity and creation timestamp."""

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
