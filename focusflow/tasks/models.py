"""
Tool: Task Models
Purpose: Plain data records for tasks, their steps, and completed snapshots

Usage:
    from focusflow.tasks.models import Step, Task

Records serialize to the camelCase JSON used on the wire via to_dict().
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, List


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """ISO-8601 with millisecond precision and a Z suffix."""
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class Step:
    """One micro-step of a task: what to do and roughly how long it takes."""
    text: str
    mins: int

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "mins": self.mins}


@dataclass
class Task:
    """
    A task on the active list.

    Attributes:
        id: Sequential id, never reused
        name: What the user typed
        steps: Ordered micro-steps (may be empty)
        current_step: Index of the step being worked on
        created_at: When the task was added
        completed: Set once the task is finished
    """
    id: int
    name: str
    steps: List[Step] = field(default_factory=list)
    current_step: int = 0
    created_at: datetime = field(default_factory=utc_now)
    completed: bool = False

    @property
    def at_last_step(self) -> bool:
        return self.current_step >= len(self.steps) - 1

    def snapshot(self) -> "Task":
        """Independent copy; steps are immutable so a shallow list copy is enough."""
        return replace(self, steps=list(self.steps))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "steps": [s.to_dict() for s in self.steps],
            "currentStep": self.current_step,
            "createdAt": format_timestamp(self.created_at),
            "completed": self.completed,
        }


@dataclass
class CompletedTaskRecord:
    """A finished task as recorded in today's wins."""
    task: Task
    completed_at: datetime
    xp_earned: int

    @property
    def name(self) -> str:
        return self.task.name

    def to_dict(self) -> Dict[str, Any]:
        d = self.task.to_dict()
        d["completedAt"] = format_timestamp(self.completed_at)
        d["xpEarned"] = self.xp_earned
        return d

    def to_win(self) -> Dict[str, Any]:
        """Short form shown in the stats view."""
        return {
            "name": self.task.name,
            "xp": self.xp_earned,
            "completedAt": format_timestamp(self.completed_at),
        }
