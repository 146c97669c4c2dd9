"""Project schemas for API request/response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from projects_demo.domain.projects import Project


class ProjectRequest(BaseModel):
    """Request schema for creating or updating a project.

    Constraints are enforced by the domain validator so that every
    violation is reported at once. ``id`` and ``createdAt`` are ignored.
    """

    name: Optional[str] = Field(None, description="Project name (1-30 characters)")
    description: Optional[str] = Field(
        None,
        description="Optional description (at most 100 characters)",
    )

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "name": "Reactive demo",
                "description": "Walkthrough of a streaming CRUD service",
            },
        },
    )


class ProjectResponse(BaseModel):
    """Response schema for project data."""

    id: UUID = Field(..., description="Store-assigned identifier")
    name: str = Field(..., description="Project name")
    description: Optional[str] = Field(None, description="Project description")
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "name": "Reactive demo",
                "description": "Walkthrough of a streaming CRUD service",
                "createdAt": "2024-12-01T09:00:00Z",
            },
        },
    )

    @classmethod
    def from_domain(cls, project: Project) -> "ProjectResponse":
        return cls(
            id=project.id,
            name=project.name,
            description=project.description,
            created_at=project.created_at,
        )
