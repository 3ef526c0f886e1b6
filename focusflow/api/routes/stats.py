"""
Stats Route - XP, level, streak, and today's wins
"""

from fastapi import APIRouter, Depends

from focusflow.api.dependencies import get_state
from focusflow.state import AppState


router = APIRouter()


@router.get("/stats")
async def get_stats(state: AppState = Depends(get_state)):
    """
    Current progress.

    level starts at 1 and goes up every 100 XP; xpToNextLevel counts down
    to the next one.
    """
    with state.lock:
        return state.stats()
