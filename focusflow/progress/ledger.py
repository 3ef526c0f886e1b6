"""
Tool: Streak/XP Ledger
Purpose: Track the day streak, lifetime XP, and today's completed tasks

The ledger only learns that a day has passed when someone asks. Every
handler that reads or changes streak, XP, or today's wins calls
reconcile_day() first, so today's numbers are never left over from
yesterday.

Day transitions:
    same day              -> nothing changes
    exactly one day later -> streak + 1, today's wins cleared
    anything else         -> streak = 1, today's wins cleared

Total XP never goes down.

Usage:
    from focusflow.progress.ledger import Ledger, utc_today

    ledger = Ledger()
    ledger.reconcile_day(utc_today())
    ledger.add_xp(5)
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional

from focusflow.tasks.models import CompletedTaskRecord

from . import XP_PER_LEVEL

logger = logging.getLogger(__name__)


def utc_today() -> date:
    """Today's calendar date in UTC."""
    return datetime.now(timezone.utc).date()


@dataclass
class Ledger:
    """Process-wide streak and XP bookkeeping."""
    streak: int = 0
    total_xp: int = 0
    last_active_date: date = field(default_factory=utc_today)
    completed_today: List[CompletedTaskRecord] = field(default_factory=list)

    def reconcile_day(self, today: Optional[date] = None) -> bool:
        """
        Roll the ledger forward to today if the day has changed.

        Safe to call any number of times per day.

        Args:
            today: Caller's current UTC date (defaults to the real one)

        Returns:
            True if a day transition happened
        """
        today = today or utc_today()
        if self.last_active_date == today:
            return False

        if self.last_active_date == today - timedelta(days=1):
            self.streak += 1
        else:
            self.streak = 1

        logger.info(
            f"Day rollover {self.last_active_date} -> {today}: "
            f"streak={self.streak}, cleared {len(self.completed_today)} completions"
        )
        self.last_active_date = today
        self.completed_today = []
        return True

    def add_xp(self, amount: int) -> int:
        """Add XP and return the new total."""
        if amount < 0:
            raise ValueError("XP can only go up")
        self.total_xp += amount
        return self.total_xp

    def record_completion(self, record: CompletedTaskRecord) -> int:
        """Append to today's wins and return how many there are now."""
        self.completed_today.append(record)
        return len(self.completed_today)

    @property
    def completed_count(self) -> int:
        return len(self.completed_today)

    @property
    def level(self) -> int:
        return self.total_xp // XP_PER_LEVEL + 1

    @property
    def xp_to_next_level(self) -> int:
        return XP_PER_LEVEL - (self.total_xp % XP_PER_LEVEL)
