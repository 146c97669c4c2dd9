"""Word count domain exceptions."""

from projects_demo.domain.shared.exceptions import ErrorCode, ValidationError


class InvalidLimitError(ValidationError):
    """Raised when a ranking is requested with a negative limit."""

    def __init__(self, limit: int) -> None:
        super().__init__(
            message=f"limit must be greater than or equal to 0, got {limit}",
            code=ErrorCode.INVALID_LIMIT,
            details={"limit": limit},
        )
