"""Task Engine - tiny timed steps and the in-memory task list

Components:
    models.py: Step, Task and CompletedTaskRecord records
    templates.py: Keyword-matched step templates (the offline breakdown)
    store.py: Ordered task collection with step advance and completion
    decompose.py: AI breakdown that falls back to the templates

Usage:
    from focusflow.tasks.templates import breakdown
    from focusflow.tasks.store import TaskStore

    store = TaskStore()
    task = store.create("Clean the kitchen", steps=breakdown("Clean the kitchen"))
"""

# XP awarded for moving to the next step
STEP_XP = 5

# Completion XP = COMPLETION_BASE_XP + COMPLETION_STEP_XP * step count
COMPLETION_BASE_XP = 10
COMPLETION_STEP_XP = 5

# Template categories in match priority order
TEMPLATE_CATEGORIES = (
    "cleaning",
    "studying",
    "email",
    "coding",
    "writing",
    "exercise",
)

__all__ = [
    "STEP_XP",
    "COMPLETION_BASE_XP",
    "COMPLETION_STEP_XP",
    "TEMPLATE_CATEGORIES",
]
