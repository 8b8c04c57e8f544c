"""
Progress Record - the single persisted onboarding entity

Tracks which checklist steps are done, when each was done, when onboarding
started, and the optional onboarding buddy.

Invariants (held by the mutation API, never by direct field edits):
    - ``completed`` has no duplicates and keeps completion order
    - every id in ``completed`` has a timestamp in ``completed_steps``
    - every key in ``completed_steps`` is in ``completed``
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class Buddy:
    """An experienced team member helping with onboarding."""

    name: str
    contact: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "contact": self.contact}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Buddy":
        return cls(name=str(data.get("name", "")), contact=str(data.get("contact", "")))


@dataclass
class ProgressRecord:
    """
    Persistent onboarding progress.

    Serialized with camelCase keys so existing progress files stay readable.
    """

    completed: list[str] = field(default_factory=list)
    completed_steps: dict[str, str] = field(default_factory=dict)
    started_at: str | None = None
    last_updated: str | None = None
    buddy: Buddy | None = None

    def is_completed(self, step_id: str) -> bool:
        return step_id in self.completed

    def mark_completed(self, step_id: str, when: datetime) -> bool:
        """
        Record a completion.

        Idempotent: a step that is already complete keeps its original
        timestamp.

        Returns:
            True if the record changed
        """
        if step_id in self.completed:
            return False
        self.completed.append(step_id)
        self.completed_steps[step_id] = when.isoformat()
        return True

    def mark_incomplete(self, step_id: str) -> bool:
        """Remove a completion and its timestamp. Returns True if anything was removed."""
        removed = step_id in self.completed or step_id in self.completed_steps
        self.completed = [s for s in self.completed if s != step_id]
        self.completed_steps.pop(step_id, None)
        return removed

    def set_buddy(self, name: str, contact: str) -> None:
        self.buddy = Buddy(name=name.strip(), contact=contact.strip())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "completed": list(self.completed),
            "completedSteps": dict(self.completed_steps),
            "startedAt": self.started_at,
            "lastUpdated": self.last_updated,
            "buddy": self.buddy.to_dict() if self.buddy else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProgressRecord":
        """
        Create from dictionary.

        Missing keys fall back to defaults. Raises ValueError when the
        document has the wrong shape.
        """
        if not isinstance(data, dict):
            raise ValueError("progress document must be a JSON object")

        completed = data.get("completed") or []
        completed_steps = data.get("completedSteps") or {}
        buddy = data.get("buddy")

        if not isinstance(completed, list) or not all(isinstance(s, str) for s in completed):
            raise ValueError("'completed' must be a list of step ids")
        if not isinstance(completed_steps, dict):
            raise ValueError("'completedSteps' must be an object")
        if buddy is not None and not isinstance(buddy, dict):
            raise ValueError("'buddy' must be an object or null")
        for key in ("startedAt", "lastUpdated"):
            if not isinstance(data.get(key), (str, type(None))):
                raise ValueError(f"'{key}' must be a timestamp string or null")

        # Drop duplicates, keep first-completion order
        unique: list[str] = []
        for step_id in completed:
            if step_id not in unique:
                unique.append(step_id)

        return cls(
            completed=unique,
            # Timestamps only for steps that are still completed
            completed_steps={
                str(k): str(v) for k, v in completed_steps.items() if k in unique
            },
            started_at=data.get("startedAt"),
            last_updated=data.get("lastUpdated"),
            buddy=Buddy.from_dict(buddy) if buddy else None,
        )
