"""Actuator schemas for health and info endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ComponentHealthResponse(BaseModel):
    """Health of one component."""

    status: str = Field(..., description="UP or DOWN")
    details: dict[str, Any] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    """Aggregated service health."""

    status: str = Field(..., description="UP when every component is UP")
    components: dict[str, ComponentHealthResponse] = Field(default_factory=dict)

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "UP",
                "components": {
                    "custom": {"status": "UP", "details": {"Service": "Good!"}},
                    "db": {"status": "UP", "details": {"database": "sqlite"}},
                },
            },
        },
    }


class AppInfo(BaseModel):
    name: str
    description: str
    version: str


class RuntimeInfo(BaseModel):
    python: str
    platform: str
    started_at: datetime
    uptime_seconds: float

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InfoResponse(BaseModel):
    """Static and computed service information."""

    app: AppInfo
    runtime: RuntimeInfo
