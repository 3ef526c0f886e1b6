"""
Tool: Energy Advisor
Purpose: Match suggested activities and a timer length to the user's energy

Low energy isn't a failure state. Each level gets activities that fit it
and a timer length that feels doable at that level.

Usage:
    from focusflow.adhd.energy import advise

    bundle = advise("low")
    print(bundle.timer_minutes)  # 15
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from . import ENERGY_LEVELS


@dataclass(frozen=True)
class SuggestionBundle:
    emoji: str
    message: str
    tasks: Tuple[str, ...]
    timer_minutes: int
    tip: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "emoji": self.emoji,
            "message": self.message,
            "tasks": list(self.tasks),
            "timer": self.timer_minutes,
            "tip": self.tip,
        }


SUGGESTIONS: Dict[str, SuggestionBundle] = {
    "low": SuggestionBundle(
        emoji="🔋",
        message="Low energy is okay. Let's work WITH it, not against it.",
        tasks=(
            "Sort 1 drawer or folder",
            "Reply to 1 easy message",
            "Make a list for tomorrow",
            "Do a 5-min tidy",
            "Watch something educational (counts as productive!)",
        ),
        timer_minutes=15,
        tip="Set a 15-min timer. Anything you do in 15 min is a WIN.",
    ),
    "medium": SuggestionBundle(
        emoji="⚡",
        message="Nice! Medium energy is great for steady progress.",
        tasks=(
            "Work on your most important task for 25 min",
            "Knock out 3 small tasks",
            "Study or read for 20 min",
            "Do a workout",
            "Work on a creative project",
        ),
        timer_minutes=25,
        tip="This is your sweet spot. Pick ONE thing and ride the wave.",
    ),
    "high": SuggestionBundle(
        emoji="🔥",
        message="You're ON FIRE! Use this energy for the hard stuff!",
        tasks=(
            "Tackle that task you've been avoiding",
            "Deep work: code, write, or create for 45 min",
            "Do the thing that scares you a little",
            "Plan your whole week",
            "Start something new",
        ),
        timer_minutes=45,
        tip="Don't waste this! Do the ONE thing that matters most.",
    ),
}


def is_valid_level(level: Any) -> bool:
    return isinstance(level, str) and level in ENERGY_LEVELS


def advise(level: Any) -> SuggestionBundle:
    """Suggestion bundle for an energy level; unknown levels get medium."""
    if is_valid_level(level):
        return SUGGESTIONS[level]
    return SUGGESTIONS["medium"]
