# =============================================================================
# app/routers/health.py - Health Check Endpoint
# =============================================================================
# Public (listed in AUTH_PUBLIC_PATHS) so load balancers need no token.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app import __version__
from app.dependencies import SettingsDep

router = APIRouter()


class HealthData(BaseModel):
    """Basic health check payload."""
    state: str
    timestamp: str
    environment: str
    version: str


@router.get("/health")
async def health_check(settings: SettingsDep):
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    data = HealthData(
        state="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.ENVIRONMENT,
        version=__version__,
    )
    return {"status": 200, "data": data.model_dump()}
