"""Checklist steps in execution order.

Order defines both the order steps are run in and the order they are
listed in the progress view.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StepDefinition:
    id: str
    name: str
    required: bool = True


STEPS: tuple[StepDefinition, ...] = (
    StepDefinition("jira", "JIRA Access"),
    StepDefinition("copilot", "GitHub Copilot"),
    StepDefinition("vpn", "VPN Access"),
    StepDefinition("repos", "GitHub Repositories"),
    StepDefinition("gtm", "Google Tag Manager"),
    StepDefinition("monitoring", "Monitoring Tools"),
    StepDefinition("figma", "Figma Access"),
    StepDefinition("local", "Run App Locally"),
    StepDefinition("architecture", "Architecture Walkthrough"),
    StepDefinition("jenkins", "Jenkins Access", required=False),
)

STEP_IDS: tuple[str, ...] = tuple(step.id for step in STEPS)


def get_step(step_id: str) -> StepDefinition | None:
    for step in STEPS:
        if step.id == step_id:
            return step
    return None


def step_number(step_id: str) -> int:
    """1-based position of a step in the checklist."""
    return STEP_IDS.index(step_id) + 1
