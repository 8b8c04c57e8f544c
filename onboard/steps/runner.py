"""
Tool: Step Runner
Purpose: One execution shape for every checklist step

    already done?  -> SKIPPED, nothing asked
    ask / guide    -> driven by the step's StepContent row
    positive       -> store.mark_completed(id), DONE
    negative       -> PENDING, record untouched

Steps never fail. Whatever the user types is parsed into an Answer and
anything unrecognized counts as "no" (one prompt per question, no retry).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from onboard.logging_config import get_logger
from onboard.progress.store import ProgressStore
from onboard.prompt import Ask
from onboard.steps.answers import Answer, completes_step, parse_answer
from onboard.steps.content import STEP_CONTENT, StepContent
from onboard.steps.registry import StepDefinition, step_number

logger = get_logger(__name__)

DIVIDER = "-" * 58


class StepStatus(Enum):
    SKIPPED = "skipped"
    DONE = "done"
    PENDING = "pending"


@dataclass(frozen=True)
class StepOutcome:
    step_id: str
    status: StepStatus
    answer: Answer | None = None

    @property
    def already_done(self) -> bool:
        return self.status is StepStatus.SKIPPED

    @property
    def proceed(self) -> bool:
        """Whether the checklist may move on to the next step."""
        return self.status is not StepStatus.PENDING


class StepRunner:
    """Runs single checklist steps against a progress store."""

    def __init__(
        self,
        store: ProgressStore,
        ask: Ask,
        content: dict[str, StepContent] | None = None,
    ):
        self.store = store
        self.ask = ask
        self.content = content if content is not None else STEP_CONTENT

    def _parse(self, text: str, content: StepContent) -> Answer:
        return parse_answer(
            text,
            yes_tokens=content.yes_tokens,
            no_tokens=content.no_tokens,
            allow_skip=content.allow_skip,
        )

    def run(self, step: StepDefinition) -> StepOutcome:
        if self.store.is_completed(step.id):
            print(f"\n[done] [{step.name}] Already completed - Skipping")
            return StepOutcome(step.id, StepStatus.SKIPPED)

        content = self.content[step.id]
        print(f"\n{DIVIDER}")
        print(f"\nStep {step_number(step.id)}: {content.heading}\n")
        for line in content.intro:
            print(line)

        answer = self._ask_question(content)

        if completes_step(answer):
            if answer is Answer.SKIP and content.skipped:
                print(f"\n{content.skipped}\n")
            elif content.confirmed:
                print(f"\n{content.confirmed}\n")
            for block in content.on_complete:
                print(block)
            self.store.mark_completed(step.id)
            return StepOutcome(step.id, StepStatus.DONE, answer)

        logger.info("step_pending", step=step.id, answer=answer.value)
        return StepOutcome(step.id, StepStatus.PENDING, answer)

    def _ask_question(self, content: StepContent) -> Answer:
        """Ask the access question, then fall back to guidance and the follow-up."""
        if content.question is not None:
            answer = self._parse(self.ask(content.question), content)
            if completes_step(answer):
                return answer
        else:
            answer = Answer.NO

        if content.guidance:
            print()
            for line in content.guidance:
                print(line)
            print()

        if content.follow_up is None:
            return answer

        # Follow-ups are plain "type 'y' to proceed" prompts
        return parse_answer(self.ask(content.follow_up))
