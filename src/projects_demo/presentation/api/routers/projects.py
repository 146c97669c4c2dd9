"""Projects router for the project catalogue endpoints."""

import logging
from collections.abc import AsyncIterator
from contextlib import aclosing
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import StreamingResponse

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
from projects_demo.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from projects_demo.presentation.api.dependencies import (
    ApiSettings,
    RepoFactory,
    SessionMaker,
)
from projects_demo.presentation.api.schemas import (
    ErrorResponse,
    ProjectRequest,
    ProjectResponse,
    ValidationMessages,
)

logger = logging.getLogger(__name__)

router = APIRouter()

NDJSON_MEDIA_TYPE = "application/x-ndjson"


def _parse_project_id(raw_id: str) -> Optional[UUID]:
    """Parse a path identifier; anything that is not a UUID cannot exist."""
    try:
        return UUID(raw_id)
    except ValueError:
        return None


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Project not found",
    )


@router.get(
    "",
    summary="List projects",
    responses={
        200: {"description": "All stored projects"},
    },
)
async def list_projects(factory: RepoFactory) -> list[ProjectResponse]:
    """List every project in the catalogue (unordered)."""
    projects = await ListProjectsQuery.from_factory(factory).execute()
    return [ProjectResponse.from_domain(project) for project in projects]


@router.get(
    "/stream",
    summary="Stream projects",
    response_class=StreamingResponse,
    responses={
        200: {
            "description": "Projects as newline-delimited JSON, one per interval",
            "content": {NDJSON_MEDIA_TYPE: {}},
        },
    },
)
async def stream_projects(
    session_maker: SessionMaker,
    settings: ApiSettings,
) -> StreamingResponse:
    """
    Stream every project as newline-delimited JSON.

    Items are emitted one at a time with a pause of
    `PROJECTS_STREAM_DELAY_SECONDS` between them. Disconnecting stops the
    underlying store cursor.
    """
    delay_seconds = settings.projects_stream_delay_seconds

    async def project_lines() -> AsyncIterator[str]:
        # Owns its session: the body is produced after the handler returns
        async with session_maker() as session:
            query = StreamProjectsQuery.from_factory(
                SQLAlchemyRepositoryFactory(session),
                delay_seconds=delay_seconds,
            )
            async with aclosing(query.execute()) as projects:
                async for project in projects:
                    response = ProjectResponse.from_domain(project)
                    yield response.model_dump_json(by_alias=True) + "\n"

    logger.debug("Starting project stream (delay=%.2fs)", delay_seconds)
    return StreamingResponse(
        project_lines(),
        media_type=NDJSON_MEDIA_TYPE,
        headers={
            "Cache-Control": "no-cache",
            "X-Accel-Buffering": "no",  # Disable nginx buffering
        },
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    responses={
        201: {"description": "Project created"},
        400: {
            "model": ValidationMessages,
            "description": "Validation failed (list of messages)",
        },
    },
)
async def create_project(
    request: ProjectRequest,
    factory: RepoFactory,
) -> ProjectResponse:
    """
    Create a new project.

    The store assigns `id` and `createdAt`; both are ignored if submitted.
    """
    command = CreateProjectCommand.from_factory(factory)

    try:
        project = await command.execute(
            name=request.name,
            description=request.description,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        # Let the global exception handler process domain exceptions
        raise

    logger.info("Project created: %s (%s)", project.name, project.id)
    return ProjectResponse.from_domain(project)


@router.get(
    "/{project_id}",
    summary="Get project by ID",
    responses={
        200: {"description": "Project details"},
        404: {"description": "Project not found"},
    },
)
async def get_project(project_id: str, factory: RepoFactory) -> ProjectResponse:
    """Get a specific project by ID."""
    parsed_id = _parse_project_id(project_id)
    if parsed_id is None:
        raise _not_found()

    project = await GetProjectQuery.from_factory(factory).execute(parsed_id)
    if project is None:
        raise _not_found()

    return ProjectResponse.from_domain(project)


@router.put(
    "/{project_id}",
    summary="Update project",
    responses={
        200: {"description": "Project updated"},
        400: {
            "model": ValidationMessages,
            "description": "Validation failed (list of messages)",
        },
        404: {"description": "Project not found"},
        409: {
            "model": ErrorResponse,
            "description": "Project was modified concurrently",
        },
    },
)
async def update_project(
    project_id: str,
    request: ProjectRequest,
    factory: RepoFactory,
) -> ProjectResponse:
    """
    Update name and description of a project.

    `id` and `createdAt` are preserved. A missing project is not created.
    """
    parsed_id = _parse_project_id(project_id)
    if parsed_id is None:
        raise _not_found()

    command = UpdateProjectCommand.from_factory(factory)

    try:
        project = await command.execute(
            project_id=parsed_id,
            name=request.name,
            description=request.description,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    if project is None:
        raise _not_found()

    logger.info("Project updated: %s", project.id)
    return ProjectResponse.from_domain(project)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    responses={
        204: {"description": "Project deleted"},
        404: {"description": "Project not found"},
        409: {
            "model": ErrorResponse,
            "description": "Project was modified concurrently",
        },
    },
)
async def delete_project(project_id: str, factory: RepoFactory) -> None:
    """Delete a project permanently."""
    parsed_id = _parse_project_id(project_id)
    if parsed_id is None:
        raise _not_found()

    command = DeleteProjectCommand.from_factory(factory)

    try:
        deleted = await command.execute(parsed_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    if not deleted:
        raise _not_found()

    logger.info("Project deleted: %s", parsed_id)
