from projects_demo.application.ports.system.health_indicator_port import (
    HealthIndicatorPort,
)

__all__ = ["HealthIndicatorPort"]
