"""
Tool: Reward Calculator
Purpose: Decide how much XP a completion is worth and what to say about it

Completion XP grows with the number of steps, so breaking a task down is
itself rewarded. Messages escalate with the number of tasks finished today.
"""

from dataclasses import dataclass
from typing import Any, Dict

from focusflow.tasks import COMPLETION_BASE_XP, COMPLETION_STEP_XP


COMPLETION_MESSAGES = (
    "You did it! First task done! 🎉",
    "Two down! You're on a roll! 🔥",
    "THREE tasks! You're unstoppable! 💪",
    "Four tasks done — who even ARE you?! 🚀",
    "FIVE TASKS! Legend status! 👑",
)


@dataclass
class RewardInfo:
    """What the user gets for finishing a task."""
    xp_earned: int
    total_xp: int
    streak: int
    completed_today: int
    message: str
    confetti: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "xpEarned": self.xp_earned,
            "totalXP": self.total_xp,
            "streak": self.streak,
            "completedToday": self.completed_today,
            "message": self.message,
            "confetti": self.confetti,
        }


def xp_for_completion(step_count: int) -> int:
    """XP for completing a task with step_count steps."""
    return COMPLETION_BASE_XP + COMPLETION_STEP_XP * step_count


def completion_message(count: int) -> str:
    """
    Message for the count-th completion of the day.

    The first five completions each have their own message; after that
    the count is spelled out.
    """
    if 1 <= count <= len(COMPLETION_MESSAGES):
        return COMPLETION_MESSAGES[count - 1]
    return f"{count} tasks done! You're a machine! 🤖"


def encouragement(today_count: int, streak: int) -> str:
    """Encouragement line for the stats view."""
    if today_count == 0 and streak > 0:
        return f"{streak}-day streak! Let's keep it going 🔥"
    if today_count == 0:
        return "Ready when you are. One small step at a time 🌱"
    if today_count >= 5:
        return "Incredible day! You crushed it 👑"
    if today_count >= 3:
        return "Great momentum! Keep riding the wave 🏄"
    if today_count >= 1:
        return "Progress! Every task counts 💪"
    # Not reachable with non-negative counts
    return "You showed up. That matters 🌟"
