"""
Tool: Task Store
Purpose: The active task list - create, list, advance, complete, delete

Tasks are kept in insertion order and the first one is the "current" task,
the ONE thing to focus on. Ids come from a counter that only moves forward,
so a deleted task's id is never handed out again.

Completing a task takes it off the list and hands a snapshot to the ledger
as one of today's wins. The store does not lock; callers serialize access
through AppState.lock.

Usage:
    from focusflow.tasks.store import TaskStore
    from focusflow.progress.ledger import Ledger

    store, ledger = TaskStore(), Ledger()
    task = store.create("Reply to emails")
    task, xp = store.advance_step(task.id, ledger)
    task, rewards = store.complete(task.id, ledger)
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, List, Optional, Tuple

from focusflow.errors import NotFoundError, ValidationError
from focusflow.progress.ledger import Ledger
from focusflow.progress.rewards import RewardInfo, completion_message, xp_for_completion

from . import STEP_XP
from .models import CompletedTaskRecord, Step, Task, utc_now

logger = logging.getLogger(__name__)


@dataclass
class TaskListing:
    tasks: List[Task]
    current: Optional[Task]
    count: int


def coerce_steps(raw_steps: Optional[Iterable[Any]]) -> List[Step]:
    """
    Turn caller-supplied steps into Step records.

    Accepts Step instances or mappings with "text" and "mins".

    Raises:
        ValidationError: If a step is malformed
    """
    if raw_steps is None:
        return []
    if isinstance(raw_steps, (str, bytes, dict)):
        raise ValidationError("Steps must be a list")

    steps = []
    for i, raw in enumerate(raw_steps):
        if isinstance(raw, Step):
            steps.append(raw)
            continue
        if not isinstance(raw, dict):
            raise ValidationError(f"Step {i + 1} must be an object with text and mins")

        text = raw.get("text")
        mins = raw.get("mins")
        if not isinstance(text, str) or not text.strip():
            raise ValidationError(f"Step {i + 1} needs some text")
        # bool is an int subclass; reject it explicitly
        if isinstance(mins, bool) or not isinstance(mins, int) or mins <= 0:
            raise ValidationError(f"Step {i + 1} needs a positive whole number of minutes")
        steps.append(Step(text=text, mins=mins))
    return steps


class TaskStore:
    """Ordered in-memory collection of active tasks."""

    def __init__(self):
        self._tasks: List[Task] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._tasks)

    def create(self, name: Any, steps: Optional[Iterable[Any]] = None) -> Task:
        """
        Add a task to the end of the list.

        Args:
            name: Task name (required, non-blank)
            steps: Optional steps; omitted means no steps

        Returns:
            The new task
        """
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Task name required")

        task = Task(id=self._next_id, name=name, steps=coerce_steps(steps))
        self._next_id += 1
        self._tasks.append(task)
        logger.info(f"Created task {task.id} ({len(task.steps)} steps)")
        return task

    def list(self) -> TaskListing:
        tasks = list(self._tasks)
        return TaskListing(tasks=tasks, current=tasks[0] if tasks else None, count=len(tasks))

    def get(self, task_id: int) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise NotFoundError("Task not found")

    def advance_step(self, task_id: int, ledger: Ledger) -> Tuple[Task, int]:
        """
        Move a task to its next step.

        At the last step (or with no steps) nothing changes and no XP is
        given; this is still a success.

        Returns:
            (task, xp awarded)
        """
        task = self.get(task_id)
        if task.at_last_step:
            return task, 0

        task.current_step += 1
        ledger.add_xp(STEP_XP)
        return task, STEP_XP

    def complete(
        self, task_id: int, ledger: Ledger, now: Optional[datetime] = None
    ) -> Tuple[Task, RewardInfo]:
        """
        Finish a task: remove it, reward it, and record it as today's win.

        The caller must have reconciled the ledger's day first.
        """
        task = self.get(task_id)
        self._tasks.remove(task)
        task.completed = True

        xp_earned = xp_for_completion(len(task.steps))
        ledger.add_xp(xp_earned)
        count = ledger.record_completion(
            CompletedTaskRecord(task=task.snapshot(), completed_at=now or utc_now(), xp_earned=xp_earned)
        )

        rewards = RewardInfo(
            xp_earned=xp_earned,
            total_xp=ledger.total_xp,
            streak=ledger.streak,
            completed_today=count,
            message=completion_message(count),
        )
        logger.info(f"Completed task {task.id}: +{xp_earned} XP ({count} today)")
        return task, rewards

    def delete(self, task_id: int) -> bool:
        """Remove a task if present. Returns whether anything was removed."""
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        removed = len(self._tasks) != before
        if removed:
            logger.info(f"Deleted task {task_id}")
        return removed
