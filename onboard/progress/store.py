"""
Tool: Progress Store
Purpose: Durable, crash-tolerant persistence of the single onboarding progress record

Handles:
- Loading progress (missing or corrupt file falls back to a fresh record)
- Saving progress (stamps lastUpdated, never raises)
- Resetting progress (deletes the backing file)
- Load-mutate-save helpers for completing/undoing steps and setting the buddy

Nothing here raises to the caller. Read and write failures are logged as
warnings and reported through the returned result dicts. There is no
locking: two processes writing at once means last writer wins.

Usage:
    store = JsonProgressStore(Path("~/.onboard-progress.json").expanduser())
    record = store.load()
    store.mark_completed("jira")
"""

from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

from onboard.logging_config import get_logger
from onboard.progress.record import ProgressRecord

logger = get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProgressStoreError(Exception):
    """Base class for progress persistence failures."""


class PersistenceReadError(ProgressStoreError):
    """The progress file exists but could not be read or decoded."""


class PersistenceWriteError(ProgressStoreError):
    """The progress file could not be written or removed."""


class ProgressStore:
    """
    Single-record progress persistence.

    Subclasses implement ``_read``, ``_write``, ``_exists`` and ``_remove``;
    everything else (fresh defaults, error recovery, mutation helpers) is
    shared.
    """

    def __init__(self, clock: Clock | None = None):
        self.clock = clock or utc_now
        # First fresh default handed out; reused until something is saved or reset
        self._fresh_started_at: str | None = None

    # -- backend hooks -------------------------------------------------------

    def _exists(self) -> bool:
        raise NotImplementedError

    def _read(self) -> dict[str, Any]:
        raise NotImplementedError

    def _write(self, data: dict[str, Any]) -> None:
        raise NotImplementedError

    def _remove(self) -> bool:
        raise NotImplementedError

    def describe(self) -> str:
        return self.__class__.__name__

    # -- core operations -----------------------------------------------------

    def _fresh(self) -> ProgressRecord:
        if self._fresh_started_at is None:
            self._fresh_started_at = self.clock().isoformat()
        return ProgressRecord(started_at=self._fresh_started_at)

    def load(self) -> ProgressRecord:
        """
        Load the progress record.

        Returns:
            The stored record, or a fresh one when nothing usable is stored
        """
        if not self._exists():
            return self._fresh()

        try:
            record = ProgressRecord.from_dict(self._read())
        except (PersistenceReadError, ValueError) as e:
            logger.warning("progress_load_failed", store=self.describe(), error=str(e))
            return self._fresh()

        if record.started_at is None:
            record.started_at = self._fresh().started_at
        return record

    def save(self, record: ProgressRecord) -> dict[str, Any]:
        """
        Save the record with a refreshed lastUpdated.

        The record passed in is left untouched.

        Returns:
            dict with success status
        """
        data = record.to_dict()
        data["lastUpdated"] = self.clock().isoformat()

        try:
            self._write(data)
        except PersistenceWriteError as e:
            logger.warning("progress_save_failed", store=self.describe(), error=str(e))
            return {"success": False, "error": str(e)}

        logger.debug("progress_saved", store=self.describe(), completed=len(record.completed))
        return {"success": True, "path": self.describe()}

    def reset(self) -> dict[str, Any]:
        """
        Delete stored progress. Missing progress is not an error.

        Records already loaded by callers are not touched; reload them.

        Returns:
            dict with success status and what was removed
        """
        self._fresh_started_at = None
        try:
            removed = self._remove()
        except PersistenceWriteError as e:
            logger.warning("progress_reset_failed", store=self.describe(), error=str(e))
            return {"success": False, "error": str(e), "removed": []}

        logger.info("progress_reset", store=self.describe(), removed=removed)
        return {"success": True, "removed": [self.describe()] if removed else []}

    # -- mutation API --------------------------------------------------------

    def is_completed(self, step_id: str) -> bool:
        return self.load().is_completed(step_id)

    def mark_completed(self, step_id: str) -> ProgressRecord:
        """Complete a step and persist. Re-completing keeps the first timestamp."""
        record = self.load()
        if record.mark_completed(step_id, self.clock()):
            self.save(record)
            logger.info("step_completed", step=step_id)
        return record

    def mark_incomplete(self, step_id: str) -> bool:
        """Undo a step and persist. Returns True if the step was complete."""
        record = self.load()
        removed = record.mark_incomplete(step_id)
        if removed:
            self.save(record)
            logger.info("step_undone", step=step_id)
        return removed

    def set_buddy(self, name: str, contact: str) -> ProgressRecord:
        record = self.load()
        record.set_buddy(name, contact)
        self.save(record)
        return record


class JsonProgressStore(ProgressStore):
    """Progress stored as a JSON document at a fixed path."""

    def __init__(self, path: Path, clock: Clock | None = None):
        super().__init__(clock)
        self.path = Path(path).expanduser()

    def describe(self) -> str:
        return str(self.path)

    def _exists(self) -> bool:
        return self.path.exists()

    def _read(self) -> dict[str, Any]:
        try:
            with open(self.path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise PersistenceReadError(f"Could not read {self.path}: {e}") from e

    def _write(self, data: dict[str, Any]) -> None:
        # Write-then-rename so an interrupted save never leaves a torn file
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise PersistenceWriteError(f"Could not save {self.path}: {e}") from e

    def _remove(self) -> bool:
        if not self.path.exists():
            return False
        try:
            self.path.unlink()
        except OSError as e:
            raise PersistenceWriteError(f"Could not remove {self.path}: {e}") from e
        return True


class InMemoryProgressStore(ProgressStore):
    """Progress kept in memory as a serialized document. Used as a test double."""

    def __init__(self, clock: Clock | None = None, data: dict[str, Any] | None = None):
        super().__init__(clock)
        self._data: str | None = json.dumps(data) if data is not None else None

    def describe(self) -> str:
        return "memory"

    def _exists(self) -> bool:
        return self._data is not None

    def _read(self) -> dict[str, Any]:
        try:
            return json.loads(self._data or "")
        except json.JSONDecodeError as e:
            raise PersistenceReadError(str(e)) from e

    def _write(self, data: dict[str, Any]) -> None:
        self._data = json.dumps(data)

    def _remove(self) -> bool:
        existed = self._data is not None
        self._data = None
        return existed

    def raw(self) -> dict[str, Any] | None:
        """The stored document, as it would appear on disk."""
        return json.loads(self._data) if self._data is not None else None
