# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

import os
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app import __version__
from app.config import settings

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class ChecksResponse(BaseModel):
    """Individual storage checks."""
    achievements: str
    profile: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    storage_backend: str
    checks: ChecksResponse
    timestamp: str


class LivenessResponse(BaseModel):
    """Liveness check response."""
    status: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=__version__,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check():
    """
    Readiness check endpoint.

    Checks that the achievements directory is readable and the profile
    directory is writable. A missing achievements directory only degrades
    the gallery to empty, so it is reported but not fatal.
    """
    if settings.STORAGE_BACKEND == "static":
        checks = ChecksResponse(achievements="static", profile="static")
        return ReadinessResponse(
            status="ready",
            storage_backend=settings.STORAGE_BACKEND,
            checks=checks,
            timestamp=_now(),
        )

    achievements_dir = settings.achievements_dir
    if not achievements_dir.is_dir():
        achievements = "missing"
    elif os.access(achievements_dir, os.R_OK):
        achievements = "healthy"
    else:
        achievements = "unreadable"

    profile_dir = settings.profile_dir
    if profile_dir.is_dir() and os.access(profile_dir, os.W_OK):
        profile = "healthy"
    else:
        profile = "unwritable"

    checks = ChecksResponse(achievements=achievements, profile=profile)

    return ReadinessResponse(
        status="ready" if profile == "healthy" else "degraded",
        storage_backend=settings.STORAGE_BACKEND,
        checks=checks,
        timestamp=_now(),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """
    Liveness check endpoint.

    Returns whether the service process is alive.
    Used by Kubernetes/Docker for restart decisions.
    """
    return LivenessResponse(
        status="alive",
        timestamp=_now(),
    )
