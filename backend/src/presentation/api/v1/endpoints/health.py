"""Health check endpoint."""

from fastapi import APIRouter

from infrastructure.config import get_settings
from presentation.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report service status and version."""
    return HealthResponse(status="healthy", version=get_settings().app_version)
