"""
Answer parsing for checklist prompts

Free-text answers are turned into a tagged outcome before any decision is
made, so the "what counts as yes" policy lives in one place:

    y / n          -> YES / NO        (tokens configurable per prompt)
    skip           -> SKIP            (only where the prompt allows it)
    anything else  -> UNRECOGNIZED

UNRECOGNIZED is never re-asked. It counts as "no", the conservative answer.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class Answer(Enum):
    YES = "yes"
    NO = "no"
    SKIP = "skip"
    UNRECOGNIZED = "unrecognized"


SKIP_TOKEN = "skip"


def parse_answer(
    text: str,
    yes_tokens: Iterable[str] = ("y",),
    no_tokens: Iterable[str] = ("n",),
    allow_skip: bool = False,
) -> Answer:
    """
    Classify a raw answer.

    Args:
        text: What the user typed
        yes_tokens: Accepted affirmative tokens (compared case-insensitively)
        no_tokens: Accepted negative tokens
        allow_skip: Whether "skip" is a valid answer here

    Returns:
        Answer tag
    """
    token = (text or "").strip().lower()

    if token in {t.lower() for t in yes_tokens}:
        return Answer.YES
    if token in {t.lower() for t in no_tokens}:
        return Answer.NO
    if allow_skip and token == SKIP_TOKEN:
        return Answer.SKIP
    return Answer.UNRECOGNIZED


def completes_step(answer: Answer) -> bool:
    """Whether an answer marks the step complete. Skips count; unknown input does not."""
    return answer in (Answer.YES, Answer.SKIP)


def is_yes(text: str, yes_tokens: Iterable[str] = ("y",)) -> bool:
    """Shortcut for plain confirmation prompts."""
    return parse_answer(text, yes_tokens=yes_tokens) is Answer.YES
