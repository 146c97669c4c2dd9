from projects_demo.presentation.api.routers.actuator import router as actuator_router
from projects_demo.presentation.api.routers.hello import router as hello_router
from projects_demo.presentation.api.routers.projects import router as projects_router
from projects_demo.presentation.api.routers.word_count import (
    router as word_count_router,
)

__all__ = [
    "actuator_router",
    "hello_router",
    "projects_router",
    "word_count_router",
]
