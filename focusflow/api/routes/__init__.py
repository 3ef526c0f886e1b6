"""FocusFlow API Routes Package

This module aggregates all route handlers into a single router
that can be included in the main FastAPI application.
"""

from fastapi import APIRouter

from .ai import router as ai_router
from .energy import router as energy_router
from .health import router as health_router
from .stats import router as stats_router
from .tasks import router as tasks_router


# Create main API router
api_router = APIRouter(prefix="/api")

# Include all sub-routers
api_router.include_router(health_router, tags=["health"])
api_router.include_router(tasks_router, prefix="/tasks", tags=["tasks"])
api_router.include_router(ai_router, prefix="/ai", tags=["ai"])
api_router.include_router(energy_router, tags=["energy"])
api_router.include_router(stats_router, tags=["stats"])

__all__ = ["api_router"]
