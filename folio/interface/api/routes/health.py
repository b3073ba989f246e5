"""Health check routes."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel

from folio.config import Settings
from folio.interface.api.cors import allowed_origins

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    environment: str
    timestamp: datetime
    version: str
    git_sha: str


class CORSDebugResponse(BaseModel):
    """CORS debugging information."""

    origin: str | None
    allowed_origins: list[str]
    origin_allowed: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="healthy",
        environment=settings.environment,
        timestamp=datetime.now(timezone.utc),
        version="0.1.0",
        git_sha=settings.git_sha,
    )


@router.get("/health/cors", response_model=CORSDebugResponse)
async def cors_debug(
    request: Request, settings: FromDishka[Settings]
) -> CORSDebugResponse:
    """Report whether the caller's origin would pass CORS."""
    origins = allowed_origins(settings)
    origin = request.headers.get("origin")
    return CORSDebugResponse(
        origin=origin,
        allowed_origins=origins,
        origin_allowed=origin in origins,
    )
