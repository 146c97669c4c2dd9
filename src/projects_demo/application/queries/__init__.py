"""Query layer. Read-only operations for retrieving data."""

from projects_demo.application.queries.projects import (
    GetProjectQuery,
    ListProjectsQuery,
    StreamProjectsQuery,
)
from projects_demo.application.queries.system import (
    AppInfoDTO,
    AppInfoQuery,
    ComponentHealth,
    HealthReport,
    HealthStatus,
    ServiceHealthQuery,
)
from projects_demo.application.queries.wordcount import RankWordsQuery

__all__ = [
    "AppInfoDTO",
    "AppInfoQuery",
    "ComponentHealth",
    "GetProjectQuery",
    "HealthReport",
    "HealthStatus",
    "ListProjectsQuery",
    "RankWordsQuery",
    "ServiceHealthQuery",
    "StreamProjectsQuery",
]
