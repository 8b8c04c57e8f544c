"""
Progress Tracking - persisted completion state and its read-side views

Components:
    record.py: ProgressRecord / Buddy data model and mutation API
    store.py: ProgressStore interface with JSON file and in-memory backends
    presenter.py: Percentages, progress bar, wait warnings, rendered views
"""

from .record import Buddy, ProgressRecord
from .store import (
    InMemoryProgressStore,
    JsonProgressStore,
    PersistenceReadError,
    PersistenceWriteError,
    ProgressStore,
    ProgressStoreError,
)

__all__ = [
    "Buddy",
    "ProgressRecord",
    "ProgressStore",
    "JsonProgressStore",
    "InMemoryProgressStore",
    "ProgressStoreError",
    "PersistenceReadError",
    "PersistenceWriteError",
]
