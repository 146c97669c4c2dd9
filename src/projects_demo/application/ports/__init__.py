"""Application ports. Interfaces implemented by infrastructure adapters."""

from projects_demo.application.ports.system import HealthIndicatorPort

__all__ = ["HealthIndicatorPort"]
