"""Unit tests for project commands and queries."""

from collections.abc import AsyncIterator
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock, patch
from uuid import uuid4

import pytest

from projects_demo.application.commands import (
    CreateProjectCommand,
    DeleteProjectCommand,
    UpdateProjectCommand,
)
from projects_demo.application.queries import (
    GetProjectQuery,
    ListProjectsQuery,
    StreamProjectsQuery,
)
from projects_demo.domain.projects import Project, ProjectValidationError
from projects_demo.domain.shared.exceptions import ConcurrencyError

CREATED_AT = datetime(2024, 12, 1, 9, 0, tzinfo=timezone.utc)


def _stored(name: str = "demo", description: str | None = None) -> Project:
    return Project(
        id=uuid4(),
        name=name,
        description=description,
        created_at=CREATED_AT,
        version=1,
    )


async def _iterate(projects: list[Project]) -> AsyncIterator[Project]:
    for project in projects:
        yield project


@pytest.fixture
def mock_project_repo() -> AsyncMock:
    """Create a mock project repository that echoes saved projects."""
    repo = AsyncMock()

    async def _add(project: Project) -> Project:
        return Project(
            id=uuid4(),
            name=project.name,
            description=project.description,
            created_at=CREATED_AT,
        )

    async def _update(project: Project) -> Project:
        return project

    repo.add = AsyncMock(side_effect=_add)
    repo.update = AsyncMock(side_effect=_update)
    repo.delete = AsyncMock(return_value=True)
    return repo


class TestCreateProjectCommand:
    async def test_persists_valid_project(self, mock_project_repo):
        command = CreateProjectCommand(mock_project_repo)

        project = await command.execute(name="demo", description="first")

        assert project.id is not None
        assert project.created_at == CREATED_AT
        submitted = mock_project_repo.add.await_args.args[0]
        assert submitted.id is None
        assert submitted.created_at is None

    async def test_invalid_project_never_reaches_store(self, mock_project_repo):
        command = CreateProjectCommand(mock_project_repo)

        with pytest.raises(ProjectValidationError) as exc_info:
            await command.execute(name="", description="d" * 101)

        assert exc_info.value.messages == [
            "project.name must not be blank",
            "project.name length must be between 1 and 30",
            "project.description length must be between 0 and 100",
        ]
        mock_project_repo.add.assert_not_awaited()

    async def test_from_factory_uses_project_repository(self, mock_project_repo):
        factory = MagicMock()
        factory.project_repository.return_value = mock_project_repo

        command = CreateProjectCommand.from_factory(factory)
        await command.execute(name="demo")

        factory.project_repository.assert_called_once_with()
        mock_project_repo.add.assert_awaited_once()


class TestUpdateProjectCommand:
    async def test_overwrites_mutable_fields_only(self, mock_project_repo):
        existing = _stored(name="old", description="before")
        mock_project_repo.find_by_id = AsyncMock(return_value=existing)
        command = UpdateProjectCommand(mock_project_repo)

        updated = await command.execute(existing.id, name="new", description=None)

        assert updated is not None
        assert updated.id == existing.id
        assert updated.created_at == CREATED_AT
        assert updated.name == "new"
        assert updated.description is None

    async def test_keeps_loaded_version_for_the_write(self, mock_project_repo):
        existing = _stored(name="old")
        mock_project_repo.find_by_id = AsyncMock(return_value=existing)

        await UpdateProjectCommand(mock_project_repo).execute(existing.id, name="new")

        written = mock_project_repo.update.await_args.args[0]
        assert written.version == 1

    async def test_conflict_propagates(self, mock_project_repo):
        existing = _stored(name="old")
        mock_project_repo.find_by_id = AsyncMock(return_value=existing)
        mock_project_repo.update = AsyncMock(side_effect=ConcurrencyError())

        with pytest.raises(ConcurrencyError):
            await UpdateProjectCommand(mock_project_repo).execute(
                existing.id,
                name="new",
            )

    async def test_missing_project_returns_none(self, mock_project_repo):
        mock_project_repo.find_by_id = AsyncMock(return_value=None)
        command = UpdateProjectCommand(mock_project_repo)

        result = await command.execute(uuid4(), name="new")

        assert result is None
        mock_project_repo.update.assert_not_awaited()
        mock_project_repo.add.assert_not_awaited()

    async def test_validates_before_loading(self, mock_project_repo):
        mock_project_repo.find_by_id = AsyncMock()
        command = UpdateProjectCommand(mock_project_repo)

        with pytest.raises(ProjectValidationError):
            await command.execute(uuid4(), name="   ")

        mock_project_repo.find_by_id.assert_not_awaited()


class TestDeleteProjectCommand:
    async def test_deletes_existing_project(self, mock_project_repo):
        existing = _stored()
        mock_project_repo.find_by_id = AsyncMock(return_value=existing)

        assert await DeleteProjectCommand(mock_project_repo).execute(existing.id)
        mock_project_repo.delete.assert_awaited_once_with(
            existing.id,
            expected_version=1,
        )

    async def test_missing_project_returns_false(self, mock_project_repo):
        mock_project_repo.find_by_id = AsyncMock(return_value=None)

        assert not await DeleteProjectCommand(mock_project_repo).execute(uuid4())
        mock_project_repo.delete.assert_not_awaited()


class TestProjectQueries:
    async def test_list_returns_all(self, mock_project_repo):
        projects = [_stored("a"), _stored("b")]
        mock_project_repo.find_all = AsyncMock(return_value=projects)

        assert await ListProjectsQuery(mock_project_repo).execute() == projects

    async def test_get_returns_none_when_absent(self, mock_project_repo):
        mock_project_repo.find_by_id = AsyncMock(return_value=None)

        assert await GetProjectQuery(mock_project_repo).execute(uuid4()) is None


class TestStreamProjectsQuery:
    async def test_pauses_between_items(self, mock_project_repo):
        projects = [_stored("a"), _stored("b"), _stored("c")]
        mock_project_repo.stream_all = MagicMock(return_value=_iterate(projects))
        query = StreamProjectsQuery(mock_project_repo, delay_seconds=1.0)

        with patch(
            "projects_demo.application.queries.projects.stream_projects_query"
            ".asyncio.sleep",
            new_callable=AsyncMock,
        ) as sleep:
            emitted = [project async for project in query.execute()]

        assert emitted == projects
        assert sleep.await_count == 2
        sleep.assert_awaited_with(1.0)

    async def test_empty_store_emits_nothing(self, mock_project_repo):
        mock_project_repo.stream_all = MagicMock(return_value=_iterate([]))
        query = StreamProjectsQuery(mock_project_repo, delay_seconds=0)

        assert [project async for project in query.execute()] == []

    async def test_consumer_can_stop_early(self, mock_project_repo):
        projects = [_stored("a"), _stored("b"), _stored("c")]
        mock_project_repo.stream_all = MagicMock(return_value=_iterate(projects))
        query = StreamProjectsQuery(mock_project_repo, delay_seconds=0)

        stream = query.execute()
        first = await anext(stream)
        await stream.aclose()

        assert first == projects[0]
        with pytest.raises(StopAsyncIteration):
            await anext(stream)

    def test_rejects_negative_delay(self, mock_project_repo):
        with pytest.raises(ValueError, match="must not be negative"):
            StreamProjectsQuery(mock_project_repo, delay_seconds=-1)
