"""FocusFlow - tiny steps, quick wins.

Backend for a task app built around breaking work into small, timed steps
and rewarding every bit of progress (XP, streaks, encouragement).

Components:
    tasks/: Step templates, the task store, AI-assisted breakdown
    progress/: Streak/XP ledger and reward messages
    adhd/: Energy check-in suggestions and response formatting
    ai/: Text and image generation capabilities with local fallbacks
    api/: FastAPI application exposing everything over /api
"""

from pathlib import Path

# Path constants
PROJECT_ROOT = Path(__file__).parent.parent
CONFIG_PATH = PROJECT_ROOT / "args" / "focusflow.yaml"

APP_NAME = "FocusFlow"
APP_VERSION = "1.0.0"

__all__ = ["PROJECT_ROOT", "CONFIG_PATH", "APP_NAME", "APP_VERSION"]
