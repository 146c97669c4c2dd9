"""Shared kernel: exceptions and time helpers used across domains."""

from projects_demo.domain.shared.exceptions import (
    ConcurrencyError,
    DomainException,
    ErrorCode,
    ValidationError,
)
from projects_demo.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "ConcurrencyError",
    "DomainException",
    "ErrorCode",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
