"""
Health check endpoint
"""
from fastapi import APIRouter

from config.app_config import APP_NAME, APP_VERSION

router = APIRouter()


@router.get("/health")
def health() -> dict:
    """Liveness probe."""
    return {"status": "ok", "service": APP_NAME, "version": APP_VERSION}
