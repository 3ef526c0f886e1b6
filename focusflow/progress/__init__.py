"""Progress - streaks, XP, levels, and the words that go with them

Components:
    ledger.py: Streak/XP ledger with explicit day reconciliation
    rewards.py: Completion XP, completion messages, encouragement ladder
"""

# XP needed per account level
XP_PER_LEVEL = 100

__all__ = ["XP_PER_LEVEL"]
