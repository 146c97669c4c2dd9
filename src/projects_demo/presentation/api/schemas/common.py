"""Common schemas shared across API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code for programmatic handling")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "detail": "limit must be greater than or equal to 0, got -1",
                "code": "INVALID_LIMIT",
            },
        },
    )


ValidationMessages = list[str]
