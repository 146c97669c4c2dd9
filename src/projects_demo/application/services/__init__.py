"""Application services."""

from projects_demo.application.services.custom_health_indicator import (
    CustomHealthIndicator,
)

__all__ = ["CustomHealthIndicator"]
