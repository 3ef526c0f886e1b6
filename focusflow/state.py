"""
Application state shared by every request.

One AppState lives on the FastAPI app for the life of the process. It owns
the task store, the ledger, and the injected AI capabilities. All reads and
writes of store and ledger happen under AppState.lock, and the lock is
never held across an upstream call.

Usage:
    state = AppState.create()
    with state.lock:
        state.reconcile_day()
        task = state.store.create("Go for a run")
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable

from focusflow.ai.image_generator import HttpImageGenerator, ImageGenerator
from focusflow.ai.text_generator import AnthropicTextGenerator, TextGenerator
from focusflow.config import load_config
from focusflow.progress.ledger import Ledger, utc_today
from focusflow.progress.rewards import encouragement
from focusflow.tasks.store import TaskStore


@dataclass
class AppState:
    store: TaskStore
    ledger: Ledger
    text_generator: TextGenerator | None
    image_generator: ImageGenerator | None
    config: dict[str, Any]
    clock: Callable[[], date] = utc_today
    lock: threading.RLock = field(default_factory=threading.RLock)

    @classmethod
    def create(
        cls,
        config: dict[str, Any] | None = None,
        text_generator: TextGenerator | None = None,
        image_generator: ImageGenerator | None = None,
        clock: Callable[[], date] = utc_today,
    ) -> "AppState":
        """Build state with the configured generators unless others are given."""
        config = config or load_config()
        return cls(
            store=TaskStore(),
            ledger=Ledger(last_active_date=clock()),
            text_generator=text_generator or AnthropicTextGenerator(config["ai"]["text"]),
            image_generator=image_generator or HttpImageGenerator(config["ai"]["image"]),
            config=config,
            clock=clock,
        )

    def reconcile_day(self) -> bool:
        """Roll the ledger to today. Call with the lock held."""
        return self.ledger.reconcile_day(self.clock())

    def stats(self) -> dict[str, Any]:
        """Stats snapshot for today. Call with the lock held."""
        self.reconcile_day()
        ledger = self.ledger
        return {
            "totalXP": ledger.total_xp,
            "streak": ledger.streak,
            "level": ledger.level,
            "xpToNextLevel": ledger.xp_to_next_level,
            "completedToday": ledger.completed_count,
            "todaysWins": [record.to_win() for record in ledger.completed_today],
            "pendingTasks": len(self.store),
            "encouragement": encouragement(ledger.completed_count, ledger.streak),
        }
