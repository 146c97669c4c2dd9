"""Field validation for projects.

Constraints are checked in field declaration order and, per field, in
constraint order, so the resulting violations are stable for a given input.
"""

from dataclasses import dataclass
from typing import Optional

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 30
DESCRIPTION_MAX_LENGTH = 100


@dataclass(frozen=True)
class FieldViolation:
    """A single failed constraint on a named field."""

    field: str
    message: str


def _not_blank(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return "must not be blank"
    return None


def _length(value: Optional[str], minimum: int, maximum: int) -> Optional[str]:
    # None is handled by the not-blank rule where the field is required
    if value is None:
        return None
    if not minimum <= len(value) <= maximum:
        return f"length must be between {minimum} and {maximum}"
    return None


def validate_project(
    name: Optional[str],
    description: Optional[str],
) -> list[FieldViolation]:
    """Return every violated constraint for the given project fields."""
    checks = [
        ("name", _not_blank(name)),
        ("name", _length(name, NAME_MIN_LENGTH, NAME_MAX_LENGTH)),
        ("description", _length(description, 0, DESCRIPTION_MAX_LENGTH)),
    ]
    return [
        FieldViolation(field=field, message=message)
        for field, message in checks
        if message is not None
    ]
