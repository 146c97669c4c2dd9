"""Health indicator port. Interface for component health checks."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Protocol

if TYPE_CHECKING:
    from projects_demo.application.queries.system.health_dtos import (
        ComponentHealth,
    )


class HealthIndicatorPort(Protocol):
    """Port for a single component contributing to the service health.

    Implementations must not raise: failures are reported as a
    ``DOWN`` status with details.
    """

    name: ClassVar[str]

    async def health(self) -> ComponentHealth:
        """Return the current health of the component."""
        ...
