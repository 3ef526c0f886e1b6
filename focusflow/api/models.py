"""
Pydantic models for FocusFlow API request/response types.

Request fields are optional at the schema level so that a missing required
field reaches the core and is reported as a 400 with a specific message.
Wire names are camelCase; aliases map them onto snake_case attributes.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    code: str | None = Field(None, description="Error code")
    details: dict[str, Any] | None = Field(None, description="Additional details")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(default="ok", description="Overall status")
    app: str = Field(..., description="Application name")
    version: str = Field(..., description="Application version")


# =============================================================================
# Request Models
# =============================================================================


class StepIn(BaseModel):
    text: str
    mins: int


class CreateTaskRequest(BaseModel):
    """Request model for creating a new task."""

    name: str | None = None
    steps: list[StepIn] | None = None


class BreakdownRequest(BaseModel):
    task: str | None = None


class ImageRequestBody(BaseModel):
    """Request model for image generation."""

    model_config = ConfigDict(populate_by_name=True)

    prompt: str | None = None
    width: int | None = None
    height: int | None = None
    seed: int | None = None
    negative_prompt: str | None = Field(None, alias="negativePrompt")


class CoachRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str | None = None
    energy: str | None = None
    completed_today: int | None = Field(None, alias="completedToday", ge=0)


class EnergyRequest(BaseModel):
    level: str | None = None
