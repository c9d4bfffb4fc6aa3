# =============================================================================
# app/routers/health.py - Health Check Endpoint
# =============================================================================

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Returns basic health status for load balancers and monitoring."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC).isoformat(),
        environment=request.app.state.settings.ENVIRONMENT,
    )
