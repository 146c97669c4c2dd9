"""Word count schemas."""

from pydantic import BaseModel, Field


class WordCountResponse(BaseModel):
    """One ranked word and how often it occurs."""

    word: str = Field(..., description="Lowercased word")
    count: int = Field(..., ge=1, description="Number of occurrences")

    model_config = {
        "json_schema_extra": {"example": {"word": "the", "count": 5}},
    }
