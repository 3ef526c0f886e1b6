"""
Tool: Focus Coach
Purpose: Short supportive replies and an end-of-day summary

Both operations try the text generator first and fall back to fixed local
text when it is unavailable. Generated replies are trimmed to a few
sentences; nobody with a wandering mind wants an essay back.

Usage:
    from focusflow.ai.coach import coach_reply, daily_summary

    reply = await coach_reply("I can't start", energy="low", completed_today=0, generator=gen)
    summary = await daily_summary(stats, generator=gen)
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from focusflow.adhd.energy import is_valid_level
from focusflow.adhd.formatter import format_brief
from focusflow.errors import UpstreamUnavailable, ValidationError

logger = logging.getLogger(__name__)

POWERED_BY_AI = "ai"
POWERED_BY_FALLBACK = "fallback"

FALLBACK_COACH_REPLY = (
    "You're doing better than you think. Pick the tiniest next step and give it "
    "just 5 minutes. That's it. 🌱"
)

COACH_SYSTEM = """You are a warm, upbeat focus coach for someone with ADHD.
Reply in at most 3 short sentences. Never guilt or shame. Suggest ONE tiny,
concrete next action. No lists, no preamble."""

SUMMARY_SYSTEM = """You write a 2-3 sentence celebration of someone's day.
Name what they finished, mention their streak if it is above zero, and end
with one gentle suggestion for tomorrow. No guilt, no lists."""


@dataclass
class CoachResult:
    text: str
    powered_by: str


def _coach_prompt(message: str, energy: Optional[str], completed_today: int) -> str:
    lines = [f'The user says: "{message}"']
    if energy:
        lines.append(f"Their energy right now: {energy}.")
    lines.append(f"Tasks they have completed today: {completed_today}.")
    return "\n".join(lines)


async def coach_reply(
    message: Any,
    energy: Optional[str],
    completed_today: int,
    generator: Optional[Any],
    max_sentences: int = 3,
    max_chars: int = 2000,
) -> CoachResult:
    """
    Reply to a message from the user.

    Args:
        message: What the user wrote (required)
        energy: Optional energy level; unknown values are ignored
        completed_today: How many tasks are done today
        generator: TextGenerator, or None for the fallback reply
        max_sentences: Cap on the generated reply
        max_chars: Longest accepted message

    Raises:
        ValidationError: If message is missing or too long
    """
    if not isinstance(message, str) or not message.strip():
        raise ValidationError("Message required")
    if len(message) > max_chars:
        raise ValidationError(f"Message must be at most {max_chars} characters")

    if not is_valid_level(energy):
        energy = None

    if generator is None:
        return CoachResult(text=FALLBACK_COACH_REPLY, powered_by=POWERED_BY_FALLBACK)

    try:
        text = await generator.generate(
            _coach_prompt(message.strip(), energy, completed_today), system=COACH_SYSTEM
        )
    except UpstreamUnavailable as e:
        logger.warning(f"Coach unavailable, using fallback reply: {e}")
        return CoachResult(text=FALLBACK_COACH_REPLY, powered_by=POWERED_BY_FALLBACK)
    except Exception as e:
        logger.warning(f"Coach failed, using fallback reply: {e}")
        return CoachResult(text=FALLBACK_COACH_REPLY, powered_by=POWERED_BY_FALLBACK)

    return CoachResult(text=format_brief(text, max_sentences), powered_by=POWERED_BY_AI)


def template_summary(stats: Dict[str, Any]) -> str:
    """Local summary built from the stats snapshot."""
    count = stats.get("completedToday", 0)
    streak = stats.get("streak", 0)

    if count == 0:
        opening = "No tasks finished yet today, and that's okay."
    elif count == 1:
        opening = "You finished 1 task today. That's a real win."
    else:
        opening = f"You finished {count} tasks today. Look at you go!"

    parts = [
        opening,
        f"You're at level {stats.get('level', 1)} with {stats.get('totalXP', 0)} XP.",
    ]
    if streak > 0:
        parts.append(f"Streak: {streak} day{'s' if streak != 1 else ''} 🔥")
    parts.append("Tomorrow, start with one tiny step.")
    return " ".join(parts)


def _summary_prompt(stats: Dict[str, Any]) -> str:
    wins = ", ".join(win["name"] for win in stats.get("todaysWins", [])) or "none yet"
    return (
        f"Tasks completed today: {stats.get('completedToday', 0)} ({wins}).\n"
        f"Total XP: {stats.get('totalXP', 0)}, level {stats.get('level', 1)}.\n"
        f"Current streak: {stats.get('streak', 0)} days.\n"
        f"Tasks still waiting: {stats.get('pendingTasks', 0)}."
    )


async def daily_summary(stats: Dict[str, Any], generator: Optional[Any]) -> CoachResult:
    """Summarize today from a stats snapshot."""
    if generator is None:
        return CoachResult(text=template_summary(stats), powered_by=POWERED_BY_FALLBACK)

    try:
        text = await generator.generate(_summary_prompt(stats), system=SUMMARY_SYSTEM)
    except UpstreamUnavailable as e:
        logger.warning(f"Summary unavailable, using template: {e}")
        return CoachResult(text=template_summary(stats), powered_by=POWERED_BY_FALLBACK)
    except Exception as e:
        logger.warning(f"Summary failed, using template: {e}")
        return CoachResult(text=template_summary(stats), powered_by=POWERED_BY_FALLBACK)

    return CoachResult(text=format_brief(text, 3), powered_by=POWERED_BY_AI)
