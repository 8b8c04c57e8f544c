"""
Interactive Menu

Re-entrant action loop over the progress store and the orchestrator:

    1 continue onboarding    4 buddy setup        7 FAQs
    2 view progress          5 undo a step        8 help
    3 architecture           6 reset everything   9 exit

Every action reloads the record from the store, so the menu never shows
stale progress after an undo or reset.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from onboard.buddy import setup_buddy
from onboard.config import OnboardConfig
from onboard.logging_config import get_logger
from onboard.orchestrator import OnboardingOrchestrator, OnboardingResult
from onboard.progress import presenter
from onboard.progress.store import ProgressStore
from onboard.prompt import Ask
from onboard.steps.answers import is_yes
from onboard.steps.content import ARCHITECTURE_WALKTHROUGH, FAQS, help_text
from onboard.steps.registry import STEPS, get_step

logger = get_logger(__name__)

MENU_OPTIONS = (
    "Continue onboarding",
    "View progress checklist",
    "Architecture walkthrough",
    "Setup/Update buddy info",
    "Mark step as incomplete",
    "Reset all progress",
    "FAQs",
    "Help & Commands",
    "Exit",
)


class MenuController:
    def __init__(
        self,
        store: ProgressStore,
        ask: Ask,
        config: OnboardConfig | None = None,
        clock: Callable[[], datetime] | None = None,
        orchestrator: OnboardingOrchestrator | None = None,
    ):
        self.store = store
        self.ask = ask
        self.config = config or OnboardConfig()
        self.clock = clock or store.clock
        self.orchestrator = orchestrator or OnboardingOrchestrator(
            store, ask, config=self.config, clock=self.clock
        )
        self._running = False

    # -- loop ----------------------------------------------------------------

    def show(self) -> None:
        record = self.store.load()
        done = presenter.completed_count(record)
        print("\nWhat would you like to do?\n")
        for number, label in enumerate(MENU_OPTIONS, start=1):
            if number == 1:
                label = f"{label} ({done}/{len(STEPS)} steps completed)"
            print(f"   {number}. {label}")
        print()

    def run(self) -> None:
        """Show the menu until the user exits or onboarding ends the session."""
        self._running = True
        while self._running:
            self.show()
            self.dispatch(self.ask(f"Enter your choice (1-{len(MENU_OPTIONS)}): "))

    def dispatch(self, choice: str) -> None:
        actions: dict[str, Callable[[], object]] = {
            "1": self.continue_onboarding,
            "2": self.view_progress,
            "3": self.view_architecture,
            "4": self.setup_buddy,
            "5": self.choose_step_to_undo,
            "6": self.reset_all,
            "7": self.faqs,
            "8": self.help,
            "9": self.exit,
        }
        action = actions.get(choice.strip())
        if action is None:
            print("\nInvalid choice. Please try again.\n")
            return
        action()

    # -- actions -------------------------------------------------------------

    def continue_onboarding(self) -> OnboardingResult:
        result = self.orchestrator.run()
        # A halted run ends the session; the user comes back once access is granted
        if not result.return_to_menu:
            self._running = False
        return result

    def view_progress(self) -> None:
        print(
            presenter.render_progress(
                self.store.load(), self.clock(), self.config.display.bar_length
            )
        )

    def view_architecture(self) -> None:
        print(ARCHITECTURE_WALKTHROUGH)

    def setup_buddy(self) -> bool:
        return setup_buddy(self.store, self.ask)

    def set_buddy(self, name: str, contact: str) -> None:
        self.store.set_buddy(name, contact)

    def undo_step(self, step_id: str) -> bool:
        """Mark a step incomplete again. The only reverse mutation."""
        return self.store.mark_incomplete(step_id)

    def choose_step_to_undo(self) -> bool:
        record = self.store.load()
        completed = [step_id for step_id in record.completed if get_step(step_id)]

        if not completed:
            print("\nNo completed steps to undo.\n")
            return False

        print(f"\n{'=' * 61}")
        print("\nMark Step as Incomplete\n")
        print("Select a step to mark as incomplete:\n")
        for number, step_id in enumerate(completed, start=1):
            print(f"   {number}. {get_step(step_id).name}")
        cancel = len(completed) + 1
        print(f"   {cancel}. Cancel\n")

        choice = self.ask(f"Enter your choice (1-{cancel}): ")
        try:
            number = int(choice)
        except ValueError:
            number = cancel

        if number == cancel:
            print("\nCancelled.\n")
            return False
        if not 1 <= number <= len(completed):
            print("\nInvalid choice.\n")
            return False

        step = get_step(completed[number - 1])
        if not is_yes(self.ask(f'\nMark "{step.name}" as incomplete? (yes/no): '), ("yes",)):
            print("\nCancelled.\n")
            return False

        self.undo_step(step.id)
        print(f'\n"{step.name}" marked as incomplete.')
        print("You can complete it again by continuing onboarding.\n")
        return True

    def reset_all(self) -> bool:
        if not is_yes(
            self.ask("\nAre you sure you want to reset all progress? (yes/no): "), ("yes",)
        ):
            print("\nProgress preserved.\n")
            return False
        print_reset_result(self.store.reset())
        return True

    def faqs(self) -> None:
        print(FAQS)

    def help(self) -> None:
        print(help_text(self.config.display.command, str(self.config.progress_path())))

    def exit(self) -> None:
        print(
            f"\nSee you later! Run `{self.config.display.command}` anytime to continue.\n"
        )
        self._running = False


def print_reset_result(result: dict) -> None:
    if not result.get("success"):
        print(f"\nCould not reset progress: {result.get('error')}\n")
    elif result.get("removed"):
        print("\nProgress reset successfully!")
        print("All completion dates, timestamps, and buddy info have been cleared.\n")
    else:
        print("\nNo progress file found. Starting fresh!\n")
