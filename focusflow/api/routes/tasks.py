"""
Tasks Route - The active task list

Provides endpoints for:
- Listing tasks (the first one is the current task)
- Creating a task, optionally with its steps
- Moving a task to its next step (+5 XP)
- Completing a task (XP, streak, and a completion message)
- Deleting a task
"""

import logging

from fastapi import APIRouter, Depends, status

from focusflow.api.dependencies import get_state
from focusflow.api.models import CreateTaskRequest
from focusflow.errors import NotFoundError
from focusflow.state import AppState
from focusflow.tasks import STEP_XP


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def list_tasks(state: AppState = Depends(get_state)):
    """
    List active tasks in the order they were added.

    currentTask is the ONE thing to focus on: the oldest task still open.
    """
    with state.lock:
        state.reconcile_day()
        listing = state.store.list()
        return {
            "tasks": [t.to_dict() for t in listing.tasks],
            "currentTask": listing.current.to_dict() if listing.current else None,
            "totalTasks": listing.count,
        }


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_task(request: CreateTaskRequest, state: AppState = Depends(get_state)):
    """Add a task to the end of the list."""
    steps = None
    if request.steps is not None:
        steps = [step.model_dump() for step in request.steps]

    with state.lock:
        task = state.store.create(request.name, steps)
        return task.to_dict()


def _parse_task_id(raw: str) -> int | None:
    """Path ids are integers; anything else matches no task."""
    try:
        return int(raw)
    except ValueError:
        return None


def _find_id(raw: str) -> int:
    task_id = _parse_task_id(raw)
    if task_id is None:
        raise NotFoundError("Task not found")
    return task_id


@router.post("/{task_id}/complete")
async def complete_task(task_id: str, state: AppState = Depends(get_state)):
    """
    Complete a task.

    Takes it off the list and returns the rewards: XP for the task plus one
    per step, the running total, streak, and a message that grows with the
    number of tasks finished today.
    """
    with state.lock:
        state.reconcile_day()
        task, rewards = state.store.complete(_find_id(task_id), state.ledger)
        return {"task": task.to_dict(), "rewards": rewards.to_dict()}


@router.post("/{task_id}/next-step")
async def next_step(task_id: str, state: AppState = Depends(get_state)):
    """
    Move to the next step.

    xpEarned is always the per-step value; at the last step nothing changes
    and totalXP stays where it was.
    """
    with state.lock:
        state.reconcile_day()
        task, _ = state.store.advance_step(_find_id(task_id), state.ledger)
        return {"task": task.to_dict(), "xpEarned": STEP_XP, "totalXP": state.ledger.total_xp}


@router.delete("/{task_id}")
async def delete_task(task_id: str, state: AppState = Depends(get_state)):
    """Delete a task. Deleting something that isn't there is fine too."""
    parsed = _parse_task_id(task_id)
    if parsed is not None:
        with state.lock:
            state.store.delete(parsed)
    return {"deleted": True}
