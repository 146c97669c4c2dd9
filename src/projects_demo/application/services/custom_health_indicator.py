"""Application-level health indicator that always reports UP."""

from projects_demo.application.ports.system import HealthIndicatorPort
from projects_demo.application.queries.system.health_dtos import (
    ComponentHealth,
    HealthStatus,
)


class CustomHealthIndicator(HealthIndicatorPort):
    """Reports the service itself as reachable."""

    name = "custom"

    async def health(self) -> ComponentHealth:
        return ComponentHealth(status=HealthStatus.UP, details={"Service": "Good!"})
