"""Project domain exceptions."""

from projects_demo.domain.projects.validation import FieldViolation
from projects_demo.domain.shared.exceptions import ErrorCode, ValidationError

ENTITY_NAME = "project"


class ProjectValidationError(ValidationError):
    """Raised when submitted project data violates field constraints.

    Carries every violation, not just the first one.
    """

    def __init__(self, violations: list[FieldViolation]) -> None:
        self.violations = list(violations)
        super().__init__(
            message="; ".join(self.messages),
            code=ErrorCode.VALIDATION_ERROR,
            details={"fields": [v.field for v in self.violations]},
        )

    @property
    def messages(self) -> list[str]:
        """Violations formatted as ``<entity>.<field> <message>``."""
        return [f"{ENTITY_NAME}.{v.field} {v.message}" for v in self.violations]
