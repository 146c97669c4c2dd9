"""Stream projects one at a time with a fixed pause between them."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING

from projects_demo.domain.projects import Project, ProjectRepository

if TYPE_CHECKING:
    from projects_demo.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class StreamProjectsQuery:
    """Emit every stored project with ``delay_seconds`` between emissions.

    The pause is a non-blocking ``asyncio.sleep``. Closing the iterator
    (e.g. on client disconnect) stops reading from the store cursor.
    """

    def __init__(self, project_repository: ProjectRepository, delay_seconds: float):
        if delay_seconds < 0:
            msg = f"delay_seconds must not be negative, got {delay_seconds}"
            raise ValueError(msg)
        self._project_repo = project_repository
        self._delay_seconds = delay_seconds

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        delay_seconds: float,
    ) -> StreamProjectsQuery:
        return cls(
            project_repository=factory.project_repository(),
            delay_seconds=delay_seconds,
        )

    async def execute(self) -> AsyncIterator[Project]:
        emitted = 0
        try:
            async for project in self._project_repo.stream_all():
                if emitted:
                    await asyncio.sleep(self._delay_seconds)
                emitted += 1
                yield project
        finally:
            logger.debug("Project stream closed after %d item(s)", emitted)
