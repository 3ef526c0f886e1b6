"""
Tool: Task Decomposer
Purpose: Break a task into tiny timed steps with AI, falling back to templates

Asks the text generator for a JSON list of steps. If the generator is
unavailable, times out, or answers with something that isn't a usable step
list, the keyword templates answer instead. The caller always gets steps.

Usage:
    python -m focusflow.tasks.decompose --task "do taxes"
    python -m focusflow.tasks.decompose --task "do taxes" --no-llm

Output:
    JSON with originalTask, steps, totalMins, poweredBy, message
"""

import argparse
import asyncio
import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from focusflow.errors import UpstreamUnavailable

from .models import Step
from .templates import breakdown, total_minutes

logger = logging.getLogger(__name__)

POWERED_BY_AI = "ai"
POWERED_BY_TEMPLATES = "templates"

DEFAULT_MAX_STEPS = 8

DECOMPOSITION_SYSTEM = """You help people with ADHD start tasks by breaking them into tiny steps.

RULES:
1. Each step starts with a concrete action and fits in 2-15 minutes
2. The first step is the easiest possible starting point
3. Include one short break around the middle
4. 4 to 8 steps, no nested subtasks
5. Keep the tone warm and brief

Respond with ONLY a JSON array, no other text:
[{"text": "Open the laptop and find the form", "mins": 3}, ...]"""


@dataclass
class BreakdownResult:
    original_task: str
    steps: List[Step]
    total_mins: int
    powered_by: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "originalTask": self.original_task,
            "steps": [s.to_dict() for s in self.steps],
            "totalMins": self.total_mins,
            "poweredBy": self.powered_by,
            "message": self.message,
        }


def parse_steps(response_text: str, max_steps: int = DEFAULT_MAX_STEPS) -> List[Step]:
    """
    Parse a generated step list.

    Tolerates markdown code fences and an object wrapper with a "steps" key.

    Raises:
        UpstreamUnavailable: If the text isn't a non-empty list of valid steps
    """
    content = response_text.strip()
    match = re.search(r"```(?:json)?\s*([\s\S]*?)```", content)
    if match:
        content = match.group(1).strip()

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise UpstreamUnavailable(f"Failed to parse generated steps as JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("steps")
    if not isinstance(data, list) or not data:
        raise UpstreamUnavailable("Generated steps were not a non-empty list")

    steps = []
    for item in data[:max_steps]:
        if not isinstance(item, dict):
            raise UpstreamUnavailable("Generated step was not an object")
        text = item.get("text")
        mins = item.get("mins")
        if not isinstance(text, str) or not text.strip():
            raise UpstreamUnavailable("Generated step has no text")
        try:
            mins = int(mins)
        except (TypeError, ValueError) as e:
            raise UpstreamUnavailable("Generated step has no usable minutes") from e
        if mins <= 0:
            raise UpstreamUnavailable("Generated step has non-positive minutes")
        steps.append(Step(text=text.strip(), mins=mins))
    return steps


def _result(task: str, steps: List[Step], powered_by: str) -> BreakdownResult:
    total = total_minutes(steps)
    return BreakdownResult(
        original_task=task,
        steps=steps,
        total_mins=total,
        powered_by=powered_by,
        message=f"Broken into {len(steps)} tiny steps (~{total} min total). You got this! 💪",
    )


def template_breakdown(task: str) -> BreakdownResult:
    """Offline breakdown from the keyword templates."""
    return _result(task, breakdown(task), POWERED_BY_TEMPLATES)


async def ai_breakdown(task: str, generator: Optional[Any], max_steps: int = DEFAULT_MAX_STEPS) -> BreakdownResult:
    """
    Break a task into steps, preferring the text generator.

    Args:
        task: Task description
        generator: TextGenerator, or None to go straight to templates
        max_steps: Cap on generated steps

    Returns:
        BreakdownResult; powered_by tells which path answered
    """
    if generator is None:
        return template_breakdown(task)

    try:
        response_text = await generator.generate(
            f"Task to break down: {task}", system=DECOMPOSITION_SYSTEM
        )
        steps = parse_steps(response_text, max_steps=max_steps)
    except UpstreamUnavailable as e:
        logger.warning(f"AI breakdown unavailable, using templates: {e}")
        return template_breakdown(task)
    except Exception as e:
        logger.warning(f"AI breakdown failed, using templates: {e}")
        return template_breakdown(task)

    return _result(task, steps, POWERED_BY_AI)


def main():
    parser = argparse.ArgumentParser(
        description="Task Decomposer - Break tasks into tiny timed steps"
    )
    parser.add_argument("--task", required=True, help="Task description to decompose")
    parser.add_argument(
        "--no-llm",
        action="store_true",
        help="Use the keyword templates instead of the text generator",
    )

    args = parser.parse_args()

    generator = None
    if not args.no_llm:
        from focusflow.ai.text_generator import AnthropicTextGenerator

        generator = AnthropicTextGenerator()

    result = asyncio.run(ai_breakdown(args.task, generator))
    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
