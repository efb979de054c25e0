"""Health check endpoints."""

import time
from datetime import UTC, datetime

from fastapi import APIRouter
from pydantic import BaseModel, Field

from api.config import get_settings
from engine.entities import EntityType
from engine.scoring.registry import get_registry

router = APIRouter(tags=["Health"])

VERSION = "0.1.0"

# Track server start time for uptime calculation
_server_start_time = time.time()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Health status: healthy, unhealthy")
    timestamp: str = Field(..., description="ISO 8601 timestamp")
    version: str = Field(..., description="API version")
    uptime_seconds: int = Field(..., description="Server uptime in seconds")
    registries: dict[str, int] = Field(..., description="Ceiling per entity kind")


class ApiInfoResponse(BaseModel):
    """API information response."""

    name: str
    version: str
    env: str
    docs: str | None


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Liveness check.

    Reports the registry ceilings so a deploy with different thresholds
    is visible at a glance. Registries are cached, so this does no work
    after startup.
    """
    thresholds = get_settings().seo_thresholds()
    uptime = int(time.time() - _server_start_time)
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC).isoformat(),
        version=VERSION,
        uptime_seconds=uptime,
        registries={
            entity_type.value: get_registry(entity_type, thresholds).max_score
            for entity_type in EntityType
        },
    )


@router.get("/", response_model=ApiInfoResponse)
async def root() -> ApiInfoResponse:
    """Root endpoint with API information."""
    settings = get_settings()
    return ApiInfoResponse(
        name="SEO Doctor API",
        version=VERSION,
        env=settings.env,
        docs="/docs" if settings.debug else None,
    )
