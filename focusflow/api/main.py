"""
FocusFlow Backend - FastAPI Application

Main entry point for the FocusFlow REST API: tasks, AI breakdown and
coaching, energy check-ins, and stats.

Usage:
    uvicorn focusflow.api.main:app --host 0.0.0.0 --port 8080 --reload

    Or run directly:
    python -m focusflow.api.main
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from focusflow import APP_NAME, APP_VERSION
from focusflow.api.models import ErrorResponse
from focusflow.api.routes import api_router
from focusflow.config import load_config
from focusflow.errors import FocusFlowError
from focusflow.logging_config import setup_logging
from focusflow.state import AppState

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    state: AppState = app.state.focus
    logger.info(
        f"🧠 {APP_NAME} API starting "
        f"(text: {getattr(state.text_generator, 'name', 'none')}, "
        f"image: {getattr(state.image_generator, 'name', 'none')})"
    )
    yield
    logger.info(f"Shutting down {APP_NAME} API...")


# =============================================================================
# Error Handlers
# =============================================================================


async def focusflow_error_handler(request: Request, exc: FocusFlowError):
    """Map domain errors onto their HTTP status."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=exc.message, code=exc.code).model_dump(exclude_none=True),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and parameters are client errors: 400, not 422."""
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=message, code="VALIDATION_ERROR").model_dump(exclude_none=True),
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent format."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail), code=f"HTTP_{exc.status_code}").model_dump(
            exclude_none=True
        ),
    )


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error="Internal server error", code="INTERNAL_ERROR").model_dump(
            exclude_none=True
        ),
    )


# =============================================================================
# Application Factory
# =============================================================================


def create_app(state: AppState | None = None, config: dict[str, Any] | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        state: Pre-built AppState (tests inject fakes here)
        config: Configuration override (defaults to args/focusflow.yaml)
    """
    config = config or (state.config if state else load_config())

    app = FastAPI(
        title=f"{APP_NAME} API",
        description="Tiny steps, quick wins: tasks, streaks, and XP",
        version=APP_VERSION,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )
    app.state.focus = state or AppState.create(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config["server"].get("allowed_origins", ["*"]),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(FocusFlowError, focusflow_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(api_router)
    return app


app = create_app()


# =============================================================================
# Main Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    server_config = app.state.focus.config["server"]
    uvicorn.run(
        "focusflow.api.main:app",
        host=server_config.get("host", "0.0.0.0"),
        port=int(server_config.get("port", 8080)),
        log_level="info",
    )
