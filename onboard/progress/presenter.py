"""
Tool: Progress Presenter
Purpose: Read-side views of a ProgressRecord (percentages, bars, waits, summaries)

Everything here is a pure function of the record and a caller-supplied
``now``. Nothing loads, saves, or mutates.

Wait policy:
    A pending step has been waiting since ``lastUpdated`` (or ``startedAt``
    if nothing was ever saved). Required steps waiting URGENT_WAIT_DAYS or
    more are urgent; anything waiting a day or more is a mild wait.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from enum import Enum
from typing import Sequence

from onboard.progress.record import ProgressRecord
from onboard.steps.registry import STEPS, StepDefinition

URGENT_WAIT_DAYS = 3
SECONDS_PER_DAY = 24 * 60 * 60


class WaitStatus(Enum):
    NONE = "none"
    MILD = "mild"
    URGENT = "urgent"


# =============================================================================
# Time helpers
# =============================================================================


def parse_instant(iso: str | None) -> datetime | None:
    """Parse an ISO-8601 instant. Naive values are taken as UTC; bad values give None."""
    if not iso or not isinstance(iso, str):
        return None
    try:
        value = datetime.fromisoformat(iso)
    except ValueError:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def elapsed_days(start: datetime, end: datetime) -> int:
    """Whole days between two instants, ignoring direction."""
    return math.floor(abs((end - start).total_seconds()) / SECONDS_PER_DAY)


def days_since(iso: str | None, now: datetime) -> int:
    start = parse_instant(iso)
    if start is None:
        return 0
    return elapsed_days(start, now)


def duration_label(days: int) -> str:
    if days == 0:
        return "today"
    if days == 1:
        return "1 day ago"
    return f"{days} days ago"


def format_date(iso: str | None) -> str:
    """Format as 'Jan 5, 2025'."""
    value = parse_instant(iso)
    if value is None:
        return "N/A"
    return f"{value.strftime('%b')} {value.day}, {value.year}"


# =============================================================================
# Derivations
# =============================================================================


def completed_count(record: ProgressRecord, steps: Sequence[StepDefinition] = STEPS) -> int:
    """Completed steps that are in the registry."""
    return sum(1 for step in steps if record.is_completed(step.id))


def is_complete(record: ProgressRecord, steps: Sequence[StepDefinition] = STEPS) -> bool:
    """Derived from the completed list every time, never cached."""
    return completed_count(record, steps) == len(steps)


def percent_complete(record: ProgressRecord, steps: Sequence[StepDefinition] = STEPS) -> int:
    if not steps:
        return 0
    # Half-up rounding, not banker's rounding
    return min(100, math.floor(100 * completed_count(record, steps) / len(steps) + 0.5))


def progress_bar(
    record: ProgressRecord, length: int = 30, steps: Sequence[StepDefinition] = STEPS
) -> str:
    filled = math.floor(length * completed_count(record, steps) / len(steps) + 0.5) if steps else 0
    return "█" * filled + "░" * (length - filled)


def waiting_since(record: ProgressRecord) -> str | None:
    return record.last_updated or record.started_at


def wait_status(step: StepDefinition, record: ProgressRecord, now: datetime) -> WaitStatus:
    if record.is_completed(step.id):
        return WaitStatus.NONE
    days = days_since(waiting_since(record), now)
    if step.required and days >= URGENT_WAIT_DAYS:
        return WaitStatus.URGENT
    if days >= 1:
        return WaitStatus.MILD
    return WaitStatus.NONE


def long_pending_required(
    record: ProgressRecord, now: datetime, steps: Sequence[StepDefinition] = STEPS
) -> list[StepDefinition]:
    """
    Required steps stuck for URGENT_WAIT_DAYS or more.

    Always empty until at least one step is complete, so someone who has
    not started yet is not nagged.
    """
    if not record.completed:
        return []
    return [step for step in steps if wait_status(step, record, now) is WaitStatus.URGENT]


# =============================================================================
# Rendering
# =============================================================================

RULE = "=" * 61


def _step_line(step: StepDefinition, record: ProgressRecord, now: datetime) -> str:
    optional_tag = "" if step.required else " (optional)"

    if record.is_completed(step.id):
        completed_at = record.completed_steps.get(step.id)
        label = duration_label(days_since(completed_at, now))
        return (
            f"   [x] {step.name:<25} Completed on {format_date(completed_at)} "
            f"({label}){optional_tag}"
        )

    days = days_since(waiting_since(record), now)
    status = wait_status(step, record, now)
    if status is WaitStatus.URGENT:
        wait = f"  ! waiting {days} days"
    elif status is WaitStatus.MILD:
        wait = f" ({days}d)"
    else:
        wait = ""
    return f"   [ ] {step.name:<25} Pending{wait}{optional_tag}"


def render_progress(
    record: ProgressRecord,
    now: datetime,
    bar_length: int = 30,
    steps: Sequence[StepDefinition] = STEPS,
) -> str:
    """The full progress checklist view."""
    done = completed_count(record, steps)
    lines = [
        "",
        RULE,
        "",
        "Your Onboarding Progress",
        "",
        f"Progress: [{progress_bar(record, bar_length, steps)}] "
        f"{percent_complete(record, steps)}% ({done}/{len(steps)} steps)",
        "",
    ]

    if record.started_at:
        started_days = days_since(record.started_at, now)
        lines.append(f"Started: {format_date(record.started_at)} ({duration_label(started_days)})")
        lines.append("")

    lines += [_step_line(step, record, now) for step in steps]

    stuck = long_pending_required(record, now, steps)
    if stuck:
        lines += ["", "Action Required:"]
        lines += [f"   - {step.name} - Consider reaching out to your manager or IT" for step in stuck]

    updated = parse_instant(record.last_updated)
    if updated is not None:
        lines += ["", f"Last updated: {updated.astimezone().strftime('%Y-%m-%d %H:%M')}"]

    if record.buddy:
        lines += ["", f"Your Buddy: {record.buddy.name} ({record.buddy.contact})"]

    lines += ["", RULE, ""]
    return "\n".join(lines)


def render_completion_summary(
    record: ProgressRecord,
    now: datetime,
    team_name: str = "Core Discovery Frontend",
    steps: Sequence[StepDefinition] = STEPS,
) -> str:
    total_days = days_since(record.started_at, now)
    day_word = "day" if total_days == 1 else "days"
    lines = [
        "",
        "+" + "-" * 67 + "+",
        "|" + "ONBOARDING COMPLETE!".center(67) + "|",
        "+" + "-" * 67 + "+",
        "",
        "   Congratulations on completing your onboarding journey!",
        "",
        f"   You've successfully completed all {len(steps)} steps for the",
        f"   {team_name} Team",
        "",
        f"   Started:   {format_date(record.started_at)}",
        f"   Completed: {format_date(now.isoformat())}",
        f"   Duration:  {total_days} {day_word}",
        "",
        "+" + "-" * 67 + "+",
        "|" + "WELCOME TO THE TEAM!".center(67) + "|",
        "+" + "-" * 67 + "+",
        "",
    ]
    return "\n".join(lines)
