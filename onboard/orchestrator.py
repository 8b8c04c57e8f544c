"""
Onboarding Orchestrator

Runs the checklist strictly in registry order:

    NotStarted -> InProgress(i) -> Complete

Each run starts again at step 0; completed steps fast-forward through
their own "already done" check. The first pending step halts the run
(progress is already saved after every completion). Completion is worked
out from the record each time, so undoing a step moves the user back to
InProgress on the next run.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Sequence

from onboard.buddy import setup_buddy
from onboard.config import OnboardConfig
from onboard.logging_config import get_logger
from onboard.progress import presenter
from onboard.progress.store import ProgressStore
from onboard.prompt import Ask
from onboard.steps.answers import is_yes
from onboard.steps.content import STEP_CONTENT
from onboard.steps.registry import STEPS, StepDefinition
from onboard.steps.runner import StepRunner

logger = get_logger(__name__)


class OnboardingState(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


@dataclass(frozen=True)
class OnboardingResult:
    state: OnboardingState
    step_index: int | None = None
    return_to_menu: bool = False


class OnboardingOrchestrator:
    def __init__(
        self,
        store: ProgressStore,
        ask: Ask,
        config: OnboardConfig | None = None,
        clock: Callable[[], datetime] | None = None,
        steps: Sequence[StepDefinition] = STEPS,
        runner: StepRunner | None = None,
    ):
        self.store = store
        self.ask = ask
        self.config = config or OnboardConfig()
        self.clock = clock or store.clock
        self.steps = steps
        self.runner = runner or StepRunner(store, ask)

    def state(self) -> OnboardingState:
        record = self.store.load()
        if presenter.is_complete(record, self.steps):
            return OnboardingState.COMPLETE
        if presenter.completed_count(record, self.steps) == 0:
            return OnboardingState.NOT_STARTED
        return OnboardingState.IN_PROGRESS

    def welcome(self) -> None:
        print("\nHey there, Welcome aboard!\n")
        print(f"Ready to level up with {self.config.display.team_name}?\n")
        print("We've got you covered with this smooth, step-by-step onboarding.")
        print("Let's make magic happen!\n")

        record = self.store.load()
        if record.buddy:
            print(f"\nYour buddy: {record.buddy.name} ({record.buddy.contact})\n")
            return

        print(f"\n{'-' * 58}\n")
        print("Before we begin...\n")
        print("Do you have an onboarding buddy assigned to help you?")
        print("(A buddy is an experienced team member who can guide you)\n")
        if is_yes(self.ask("Would you like to add your buddy's information? (y/n): ")):
            print()
            setup_buddy(self.store, self.ask)
        else:
            print("\nNo worries! You can add buddy info anytime from the menu.\n")

    def run(self) -> OnboardingResult:
        record = self.store.load()
        if not record.completed:
            self.welcome()
        else:
            print("\nWelcome back! Let's continue where you left off.\n")
            print(
                presenter.render_progress(
                    record, self.clock(), self.config.display.bar_length, self.steps
                )
            )

        for index, step in enumerate(self.steps):
            outcome = self.runner.run(step)
            if not outcome.proceed:
                self._halt(step)
                return OnboardingResult(OnboardingState.IN_PROGRESS, step_index=index)
            if index < len(self.steps) - 1:
                print("\n-> Moving to next step...\n")

        return self._complete()

    def _halt(self, step: StepDefinition) -> None:
        content = STEP_CONTENT.get(step.id)
        halt_message = (
            content.halt_message if content else "Progress saved. Run this tool again to continue!"
        )
        print(f"\n{halt_message}")
        print(
            f"\nTip: Run `{self.config.display.command} progress` anytime to check your status"
        )
        record = self.store.load()
        if record.buddy:
            print(
                f"\nNeed help? Reach out to your buddy {record.buddy.name} "
                f"at {record.buddy.contact}"
            )
        print()
        logger.info("onboarding_halted", step=step.id)

    def _complete(self) -> OnboardingResult:
        record = self.store.load()
        print(
            presenter.render_completion_summary(
                record, self.clock(), self.config.display.team_name, self.steps
            )
        )
        logger.info("onboarding_complete", started_at=record.started_at)
        back = is_yes(self.ask("\nWould you like to return to the main menu? (y/n): "))
        return OnboardingResult(OnboardingState.COMPLETE, return_to_menu=back)
