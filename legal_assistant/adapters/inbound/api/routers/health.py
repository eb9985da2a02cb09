"""Health check endpoint."""

from fastapi import APIRouter, Depends

from ..... import __version__
from .....config.settings import Settings
from ..deps import get_settings
from ..models import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(cfg: Settings = Depends(get_settings)) -> HealthResponse:
    """Basic health check; does not call external services."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        vector_backend=cfg.vector_backend,
    )
