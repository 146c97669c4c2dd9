"""Actuator router: health and info endpoints."""

import logging

from fastapi import APIRouter, Request, Response, status

from projects_demo import __version__
from projects_demo.application.queries import AppInfoQuery, ServiceHealthQuery
from projects_demo.presentation.api.dependencies import ApiSettings, HealthIndicators
from projects_demo.presentation.api.schemas import (
    AppInfo,
    ComponentHealthResponse,
    HealthResponse,
    InfoResponse,
    RuntimeInfo,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/health",
    summary="Service health",
    responses={
        200: {"description": "All components are UP"},
        503: {"description": "At least one component is DOWN"},
    },
)
async def health(
    response: Response,
    indicators: HealthIndicators,
) -> HealthResponse:
    """Aggregate the health of every registered component."""
    report = await ServiceHealthQuery(indicators).execute()

    if not report.is_up:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthResponse(
        status=report.status.value,
        components={
            name: ComponentHealthResponse(
                status=component.status.value,
                details=component.details,
            )
            for name, component in report.components.items()
        },
    )


@router.get("/info", summary="Service info")
async def info(request: Request, settings: ApiSettings) -> InfoResponse:
    """Static application info plus computed runtime values."""
    dto = AppInfoQuery(
        name=settings.app_name,
        description=settings.app_description,
        version=__version__,
        started_at=request.app.state.started_at,
    ).execute()

    return InfoResponse(
        app=AppInfo(name=dto.name, description=dto.description, version=dto.version),
        runtime=RuntimeInfo(
            python=dto.python_version,
            platform=dto.platform,
            started_at=dto.started_at,
            uptime_seconds=dto.uptime_seconds,
        ),
    )
