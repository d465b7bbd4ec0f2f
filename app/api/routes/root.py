"""Root and health routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from app.core.config import Settings
from app.models import HealthResponse

router = APIRouter()


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with (see create_app)."""
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


@router.get(
    "/",
    response_class=HTMLResponse,
    tags=["Root"],
    summary="Welcome message",
)
async def root(settings: SettingsDep) -> HTMLResponse:
    """Static welcome string."""
    return HTMLResponse(settings.welcome_message)


@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(settings: SettingsDep) -> HealthResponse:
    """Health check endpoint for container orchestration."""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        environment=settings.environment,
    )
