"""Service health query. Aggregate all registered health indicators."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from projects_demo.application.ports.system import HealthIndicatorPort
from projects_demo.application.queries.system.health_dtos import (
    HealthReport,
    HealthStatus,
)

logger = logging.getLogger(__name__)


class ServiceHealthQuery:
    """Query the health of every component and derive the overall status.

    The service is ``UP`` only when every component is ``UP``.
    """

    def __init__(self, indicators: Sequence[HealthIndicatorPort]):
        self._indicators = list(indicators)

    async def execute(self) -> HealthReport:
        results = await asyncio.gather(
            *(indicator.health() for indicator in self._indicators),
        )
        components = {
            indicator.name: result
            for indicator, result in zip(self._indicators, results)
        }

        status = HealthStatus.UP
        if any(c.status == HealthStatus.DOWN for c in components.values()):
            status = HealthStatus.DOWN
            logger.warning(
                "Service health is DOWN (components: %s)",
                ", ".join(
                    name
                    for name, c in components.items()
                    if c.status == HealthStatus.DOWN
                ),
            )

        return HealthReport(status=status, components=components)
