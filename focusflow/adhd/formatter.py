"""
Tool: Brief Response Formatter
Purpose: Keep generated coaching text short and free of filler

Long replies lose attention and "Sure! Great question!" is noise. Generated
text is trimmed to a few sentences after any leading pleasantries are
removed.

Usage:
    from focusflow.adhd.formatter import format_brief

    format_brief("Sure! Start with the dishes. Then the counter. Then rest. Then more.", 2)
    # "Start with the dishes. Then the counter."
"""

import re
from typing import List

PREAMBLES = (
    "Sure!",
    "Of course!",
    "Absolutely!",
    "Great question!",
    "That's a great question!",
    "I'd be happy to help",
    "I'd be glad to help",
    "No problem!",
    "Certainly!",
    "Let me help you with that",
)


def strip_preamble(content: str) -> str:
    """
    Remove filler phrases from the start of a response.

    Examples:
        >>> strip_preamble("Sure! I'd be happy to help. Here's the answer.")
        "Here's the answer."
    """
    result = content.strip()

    # Keep stripping until no more preambles found
    changed = True
    while changed:
        changed = False
        for preamble in PREAMBLES:
            pattern = re.compile(r"^" + re.escape(preamble) + r"[.!?,\s]*", re.IGNORECASE)
            if pattern.match(result):
                result = pattern.sub("", result, count=1).strip()
                changed = True
                break

    return result


def split_sentences(content: str) -> List[str]:
    # Protect common abbreviations from the sentence split
    content = re.sub(r"\b(Mr|Mrs|Ms|Dr|Prof|vs|etc|e\.g|i\.e)\.", r"\1<PERIOD>", content)
    sentences = re.split(r"(?<=[.!?])\s+", content)
    sentences = [s.replace("<PERIOD>", ".") for s in sentences]
    return [s.strip() for s in sentences if s.strip()]


def truncate_to_sentences(content: str, max_sentences: int) -> str:
    """
    Truncate content to a maximum number of sentences.

    Examples:
        >>> truncate_to_sentences("First. Second. Third. Fourth.", 2)
        "First. Second."
    """
    sentences = split_sentences(content)
    if len(sentences) <= max_sentences:
        return content

    result = " ".join(sentences[:max_sentences])
    if result and result[-1] not in ".!?":
        result += "."
    return result


def format_brief(content: str, max_sentences: int = 3) -> str:
    """Strip preamble, then cap at max_sentences. Falls back to the input if nothing is left."""
    stripped = strip_preamble(content)
    if not stripped:
        return content.strip()
    return truncate_to_sentences(stripped, max_sentences)
