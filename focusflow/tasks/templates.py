"""
Tool: Step Templates
Purpose: Break a task into six tiny timed steps without calling any AI

Each keyword group maps to a hand-written template. Groups are checked in
declaration order and the first one with a keyword inside the task name
wins, so "clean up my study notes" is a cleaning task. Anything that
matches nothing gets the generic template, which names the task in its
first step.

Usage:
    python -m focusflow.tasks.templates "Clean the kitchen"
    python -m focusflow.tasks.templates "Write quarterly report" --category

Output:
    JSON with the category, steps, and total minutes
"""

import argparse
import json
from typing import List, Tuple

from .models import Step


# (category, keywords, steps) in priority order
TEMPLATES: Tuple[Tuple[str, Tuple[str, ...], Tuple[Step, ...]], ...] = (
    (
        "cleaning",
        ("clean", "tidy", "organize"),
        (
            Step("Pick ONE area to start (just one spot)", 2),
            Step("Set a timer for 5 minutes and start there", 5),
            Step("Put away 10 items (count them!)", 5),
            Step("Wipe down surfaces in that area", 5),
            Step("Take a 2-min break — you earned it 🎉", 2),
            Step("Move to the next area and repeat", 10),
        ),
    ),
    (
        "studying",
        ("study", "read", "learn", "homework"),
        (
            Step("Gather your materials (book, notes, laptop)", 3),
            Step("Read/review for just 10 minutes", 10),
            Step("Write 3 key points in your own words", 5),
            Step("Take a 5-min break (walk, stretch)", 5),
            Step("Do 1 practice problem or summarize", 10),
            Step("Review what you learned — done! 🧠", 2),
        ),
    ),
    (
        "email",
        ("email", "inbox", "reply", "message"),
        (
            Step("Open inbox — don't read yet, just scan", 2),
            Step("Star/flag the 3 most important ones", 2),
            Step("Reply to the easiest one first (quick win!)", 3),
            Step("Reply to the second one", 5),
            Step("Reply to the third one", 5),
            Step("Archive/delete the rest — inbox zero! 📭", 3),
        ),
    ),
    (
        "coding",
        ("code", "build", "program", "develop", "project"),
        (
            Step('Define what "done" looks like in 1 sentence', 3),
            Step("Open the file/project — just look at it", 2),
            Step("Write the smallest possible first step", 10),
            Step("Test that one thing works", 5),
            Step("Take a quick break 🎮", 5),
            Step("Build the next small piece", 15),
        ),
    ),
    (
        "writing",
        ("write", "essay", "report", "paper"),
        (
            Step("Write your main idea in 1 sentence", 3),
            Step("List 3 supporting points (bullet points only)", 5),
            Step("Write the first paragraph (ugly draft is fine!)", 10),
            Step("Take a 3-min break", 3),
            Step("Write the next section", 15),
            Step("Read it once and fix obvious things", 5),
        ),
    ),
    (
        "exercise",
        ("exercise", "workout", "gym", "run"),
        (
            Step("Put on workout clothes (that's the hardest part!)", 3),
            Step("Warm up: 2 min stretching", 2),
            Step("Do the first exercise — just 5 reps", 5),
            Step("Keep going for 10 more minutes", 10),
            Step("Cool down and stretch", 5),
            Step("Log it — you showed up! 💪", 1),
        ),
    ),
)

GENERIC_CATEGORY = "generic"


def _generic_steps(task_name: str) -> List[Step]:
    return [
        Step(f'Define what "{task_name}" looks like when DONE', 2),
        Step("What's the very first tiny action? Do that.", 5),
        Step("Do the next small piece", 10),
        Step("Quick break — check in with yourself", 3),
        Step("Continue for one more focused block", 10),
        Step("Review what you did — celebrate! 🎉", 2),
    ]


def match_category(task_name: str) -> str:
    """Return the first template category whose keywords appear in task_name."""
    name = task_name.lower()
    for category, keywords, _ in TEMPLATES:
        if any(keyword in name for keyword in keywords):
            return category
    return GENERIC_CATEGORY


def breakdown(task_name: str) -> List[Step]:
    """
    Break a task into six timed micro-steps.

    Args:
        task_name: Free-text task name

    Returns:
        List of steps; never empty, identical for identical input
    """
    category = match_category(task_name)
    for name, _, steps in TEMPLATES:
        if name == category:
            return list(steps)
    return _generic_steps(task_name)


def total_minutes(steps: List[Step]) -> int:
    """Sum of the step durations."""
    return sum(step.mins for step in steps)


def main():
    parser = argparse.ArgumentParser(description="Step Templates - break a task into tiny steps")
    parser.add_argument("task", help="Task name to break down")
    parser.add_argument("--category", action="store_true", help="Only print the matched category")

    args = parser.parse_args()

    if args.category:
        print(json.dumps({"task": args.task, "category": match_category(args.task)}))
        return

    steps = breakdown(args.task)
    result = {
        "task": args.task,
        "category": match_category(args.task),
        "steps": [s.to_dict() for s in steps],
        "totalMins": total_minutes(steps),
    }
    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
