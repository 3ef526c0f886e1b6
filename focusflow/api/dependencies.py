"""Request dependencies shared by the route modules."""

from fastapi import Request

from focusflow.state import AppState


def get_state(request: Request) -> AppState:
    """The process-wide AppState attached to the app."""
    return request.app.state.focus
