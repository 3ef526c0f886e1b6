"""
Health Route - Liveness check
"""

from fastapi import APIRouter

from focusflow import APP_NAME, APP_VERSION
from focusflow.api.models import HealthResponse


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Report that the API is up."""
    return HealthResponse(status="ok", app=APP_NAME, version=APP_VERSION)
