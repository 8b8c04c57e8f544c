"""
Checklist Steps - what is asked, in which order, and how answers are read

Components:
    registry.py: The ordered step definitions
    answers.py: Answer parsing and the completion policy
    content.py: Per-step copy and reference texts
    runner.py: The single execution contract shared by every step
"""

from .registry import STEPS, StepDefinition, get_step

__all__ = ["STEPS", "StepDefinition", "get_step"]
