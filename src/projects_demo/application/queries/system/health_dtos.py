"""Health check data transfer objects."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class HealthStatus(str, Enum):
    """Health status of a component or of the whole service."""

    UP = "UP"
    DOWN = "DOWN"


@dataclass(frozen=True)
class ComponentHealth:
    """Health reported by a single indicator."""

    status: HealthStatus
    details: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HealthReport:
    """Aggregated service health."""

    status: HealthStatus
    components: dict[str, ComponentHealth]

    @property
    def is_up(self) -> bool:
        return self.status == HealthStatus.UP
