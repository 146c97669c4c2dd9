"""Integration tests for the project catalogue endpoints."""

import json
import time
from uuid import UUID, uuid4

import pytest

from projects_demo.infrastructure.persistence.sqlalchemy.repositories import (
    ProjectRepositorySQLAlchemy,
    SQLAlchemyRepositoryFactory,
)
from projects_demo.presentation.api.dependencies import (
    DBSession,
    get_repository_factory,
)

pytestmark = pytest.mark.integration

PROJECTS_URL = "/api/projects"


async def _create(client, name: str, description: str | None = None) -> dict:
    response = await client.post(
        PROJECTS_URL,
        json={"name": name, "description": description},
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateProject:
    async def test_assigns_id_and_created_at(self, client):
        response = await client.post(
            PROJECTS_URL,
            json={"name": "Reactive demo", "description": "first"},
        )

        assert response.status_code == 201
        body = response.json()
        assert UUID(body["id"])
        assert body["name"] == "Reactive demo"
        assert body["description"] == "first"
        assert body["createdAt"]

    async def test_ignores_submitted_id_and_created_at(self, client):
        submitted_id = str(uuid4())
        response = await client.post(
            PROJECTS_URL,
            json={
                "id": submitted_id,
                "name": "demo",
                "createdAt": "2000-01-01T00:00:00Z",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"] != submitted_id
        assert not body["createdAt"].startswith("2000")

    async def test_empty_name_reports_every_violation(self, client):
        response = await client.post(PROJECTS_URL, json={"name": ""})

        assert response.status_code == 400
        assert response.json() == [
            "project.name must not be blank",
            "project.name length must be between 1 and 30",
        ]

    async def test_long_description_rejected(self, client):
        response = await client.post(
            PROJECTS_URL,
            json={"name": "ok", "description": "d" * 101},
        )

        assert response.status_code == 400
        assert response.json() == [
            "project.description length must be between 0 and 100",
        ]

    async def test_rejected_project_is_not_stored(self, client):
        await client.post(PROJECTS_URL, json={"name": "x" * 31})

        response = await client.get(PROJECTS_URL)
        assert response.json() == []

    async def test_malformed_body_is_a_list_of_messages(self, client):
        response = await client.post(PROJECTS_URL, json={"name": 42})

        assert response.status_code == 400
        messages = response.json()
        assert isinstance(messages, list)
        assert messages[0].startswith("body.name")


class TestReadProjects:
    async def test_list_returns_all_projects(self, client):
        first = await _create(client, "alpha")
        second = await _create(client, "beta", "second")

        response = await client.get(PROJECTS_URL)

        assert response.status_code == 200
        ids = {project["id"] for project in response.json()}
        assert ids == {first["id"], second["id"]}

    async def test_get_by_id(self, client):
        created = await _create(client, "alpha", "desc")

        response = await client.get(f"{PROJECTS_URL}/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    async def test_get_unknown_id_is_404(self, client):
        response = await client.get(f"{PROJECTS_URL}/{uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"detail": "Project not found"}

    async def test_get_non_uuid_id_is_404(self, client):
        response = await client.get(f"{PROJECTS_URL}/not-an-id")
        assert response.status_code == 404


class TestUpdateProject:
    async def test_overwrites_fields_and_keeps_identity(self, client):
        created = await _create(client, "alpha", "before")

        response = await client.put(
            f"{PROJECTS_URL}/{created['id']}",
            json={"name": "omega", "description": None},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == created["id"]
        assert body["createdAt"] == created["createdAt"]
        assert body["name"] == "omega"
        assert body["description"] is None

        stored = await client.get(f"{PROJECTS_URL}/{created['id']}")
        assert stored.json() == body

    async def test_unknown_id_is_404_and_creates_nothing(self, client):
        response = await client.put(
            f"{PROJECTS_URL}/{uuid4()}",
            json={"name": "ghost"},
        )

        assert response.status_code == 404
        listing = await client.get(PROJECTS_URL)
        assert listing.json() == []

    async def test_invalid_payload_is_400(self, client):
        created = await _create(client, "alpha")

        response = await client.put(
            f"{PROJECTS_URL}/{created['id']}",
            json={"name": "   "},
        )

        assert response.status_code == 400
        assert response.json() == ["project.name must not be blank"]

        stored = await client.get(f"{PROJECTS_URL}/{created['id']}")
        assert stored.json()["name"] == "alpha"


class TestDeleteProject:
    async def test_delete_then_404(self, client):
        created = await _create(client, "alpha")
        url = f"{PROJECTS_URL}/{created['id']}"

        first = await client.delete(url)
        assert first.status_code == 204
        assert first.content == b""

        assert (await client.get(url)).status_code == 404
        assert (await client.delete(url)).status_code == 404

    async def test_unknown_id_is_404(self, client):
        response = await client.delete(f"{PROJECTS_URL}/{uuid4()}")
        assert response.status_code == 404


@pytest.mark.slow
class TestStreamProjects:
    async def test_streams_ndjson_with_pauses(self, client, api_settings):
        created = [await _create(client, f"project-{i}") for i in range(3)]

        started = time.perf_counter()
        response = await client.get(f"{PROJECTS_URL}/stream")
        elapsed = time.perf_counter() - started

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/x-ndjson")

        lines = [line for line in response.text.splitlines() if line]
        items = [json.loads(line) for line in lines]
        assert {item["id"] for item in items} == {p["id"] for p in created}
        assert all("createdAt" in item for item in items)

        # Two pauses between three items
        assert elapsed >= 2 * api_settings.projects_stream_delay_seconds * 0.9

    async def test_empty_store_completes_immediately(self, client):
        response = await client.get(f"{PROJECTS_URL}/stream")

        assert response.status_code == 200
        assert response.text == ""


async def _stored_project(session_maker, project_id: str):
    async with session_maker() as session:
        return await ProjectRepositorySQLAlchemy(session).find_by_id(UUID(project_id))


class _RacedProjectRepository(ProjectRepositorySQLAlchemy):
    """Lets another session rename the project right after every read."""

    def __init__(self, session, session_maker):
        super().__init__(session)
        self._session_maker = session_maker

    async def find_by_id(self, project_id):
        project = await super().find_by_id(project_id)
        if project is not None:
            async with self._session_maker() as other:
                competitor = ProjectRepositorySQLAlchemy(other)
                current = await competitor.find_by_id(project_id)
                current.update_details(name="competitor", description=None)
                await competitor.update(current)
                await other.commit()
        return project


class _RacedRepositoryFactory(SQLAlchemyRepositoryFactory):
    def __init__(self, session, session_maker):
        super().__init__(session)
        self._session_maker = session_maker

    def project_repository(self):
        return _RacedProjectRepository(self.session, self._session_maker)


class TestConcurrentModification:
    """A write based on an outdated read is refused with 409."""

    @pytest.fixture
    def raced_client(self, test_app, test_session_maker, client):
        def _raced_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
            return _RacedRepositoryFactory(session, test_session_maker)

        test_app.dependency_overrides[get_repository_factory] = _raced_factory
        yield client
        test_app.dependency_overrides.pop(get_repository_factory, None)

    async def test_update_conflict_is_409(
        self,
        client,
        raced_client,
        test_session_maker,
    ):
        created = await _create(client, "alpha")

        response = await raced_client.put(
            f"{PROJECTS_URL}/{created['id']}",
            json={"name": "mine"},
        )

        assert response.status_code == 409
        assert response.json()["code"] == "CONCURRENCY_CONFLICT"

        stored = await _stored_project(test_session_maker, created["id"])
        assert stored.name == "competitor"

    async def test_delete_conflict_is_409(
        self,
        client,
        raced_client,
        test_session_maker,
    ):
        created = await _create(client, "alpha")

        response = await raced_client.delete(f"{PROJECTS_URL}/{created['id']}")

        assert response.status_code == 409
        assert response.json()["code"] == "CONCURRENCY_CONFLICT"

        assert await _stored_project(test_session_maker, created["id"]) is not None
