"""
Health check endpoint.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..core.config import Settings, get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    server: str
    timestamp: str


@router.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check(
    settings: Settings = Depends(get_settings)
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        server=settings.app_name,
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    )
