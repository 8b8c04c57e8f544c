"""Shared test fixtures for onboarding tests.

This module provides common fixtures used across all test modules:
- A controllable clock
- Progress stores (in-memory and JSON on a temp path)
- Scripted answers standing in for stdin

Usage:
    def test_something(memory_store, scripted):
        ask = scripted(["y", "n"])
        ...
"""

import logging
from collections.abc import Callable, Iterator
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import structlog

from onboard.progress.store import InMemoryProgressStore, JsonProgressStore
from onboard.steps.registry import STEPS


# ─────────────────────────────────────────────────────────────────────────────
# Clock Fixtures
# ─────────────────────────────────────────────────────────────────────────────


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def start_time() -> datetime:
    """Fixed start instant for deterministic tests."""
    return datetime(2025, 3, 10, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def clock(start_time: datetime) -> FakeClock:
    return FakeClock(start_time)


# ─────────────────────────────────────────────────────────────────────────────
# Store Fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def progress_path(tmp_path: Path) -> Path:
    """Location of the progress file for a test (not created up front)."""
    return tmp_path / "home" / ".onboard-progress.json"


@pytest.fixture
def json_store(progress_path: Path, clock: FakeClock) -> JsonProgressStore:
    return JsonProgressStore(progress_path, clock=clock)


@pytest.fixture
def memory_store(clock: FakeClock) -> InMemoryProgressStore:
    return InMemoryProgressStore(clock=clock)


@pytest.fixture
def required_ids() -> list[str]:
    return [step.id for step in STEPS if step.required]


# ─────────────────────────────────────────────────────────────────────────────
# Input Fixtures
# ─────────────────────────────────────────────────────────────────────────────


class ScriptedAsk:
    """Replays canned answers in order and records every question asked.

    Runs out to '' (what EOF on stdin reads as).
    """

    def __init__(self, answers: list[str]):
        self.answers = list(answers)
        self.questions: list[str] = []

    def __call__(self, question: str) -> str:
        self.questions.append(question)
        if not self.answers:
            return ""
        return self.answers.pop(0).strip()


@pytest.fixture
def scripted() -> Callable[[list[str]], ScriptedAsk]:
    return ScriptedAsk


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep tests away from the real home directory and config."""
    monkeypatch.setenv("ONBOARD_PROGRESS_FILE", str(tmp_path / "env-progress.json"))
    monkeypatch.delenv("ONBOARD_CONFIG", raising=False)
    monkeypatch.delenv("ONBOARD_LOG_FORMAT", raising=False)


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo setup_logging() so handlers never outlive the captured stderr.

    Yields:
        None
    """
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
