"""Health check routes."""

from fastapi import APIRouter

from pagepdf import __version__
from pagepdf.config import get_settings

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe. Does not launch a browser."""
    settings = get_settings()
    return {
        "status": "ok",
        "service": "pagepdf",
        "version": __version__,
        "environment": settings.environment,
    }
