"""System queries. Health and runtime information."""

from projects_demo.application.queries.system.app_info_query import (
    AppInfoDTO,
    AppInfoQuery,
)
from projects_demo.application.queries.system.health_dtos import (
    ComponentHealth,
    HealthReport,
    HealthStatus,
)
from projects_demo.application.queries.system.service_health_query import (
    ServiceHealthQuery,
)

__all__ = [
    "AppInfoDTO",
    "AppInfoQuery",
    "ComponentHealth",
    "HealthReport",
    "HealthStatus",
    "ServiceHealthQuery",
]
