from projects_demo.presentation.api.schemas.actuator import (
    AppInfo,
    ComponentHealthResponse,
    HealthResponse,
    InfoResponse,
    RuntimeInfo,
)
from projects_demo.presentation.api.schemas.common import (
    ErrorResponse,
    ValidationMessages,
)
from projects_demo.presentation.api.schemas.projects import (
    ProjectRequest,
    ProjectResponse,
)
from projects_demo.presentation.api.schemas.word_count import WordCountResponse

__all__ = [
    "AppInfo",
    "ComponentHealthResponse",
    "ErrorResponse",
    "HealthResponse",
    "InfoResponse",
    "ProjectRequest",
    "ProjectResponse",
    "RuntimeInfo",
    "ValidationMessages",
    "WordCountResponse",
]
