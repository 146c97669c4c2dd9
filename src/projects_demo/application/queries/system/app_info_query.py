"""Application info query. Static settings plus computed runtime values."""

from __future__ import annotations

import platform
from dataclasses import dataclass
from datetime import datetime

from projects_demo.domain.shared.time import utc_now


@dataclass(frozen=True)
class AppInfoDTO:
    """Information published by the info endpoint."""

    name: str
    description: str
    version: str
    python_version: str
    platform: str
    started_at: datetime
    uptime_seconds: float


class AppInfoQuery:
    """Collect descriptive information about the running service."""

    def __init__(
        self,
        name: str,
        description: str,
        version: str,
        started_at: datetime,
    ):
        self._name = name
        self._description = description
        self._version = version
        self._started_at = started_at

    def execute(self) -> AppInfoDTO:
        uptime = (utc_now() - self._started_at).total_seconds()
        return AppInfoDTO(
            name=self._name,
            description=self._description,
            version=self._version,
            python_version=platform.python_version(),
            platform=platform.platform(terse=True),
            started_at=self._started_at,
            uptime_seconds=round(max(uptime, 0.0), 3),
        )
