"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TaskId wraps the storage-assigned integer key — never reused after delete
    - Completion state encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON and parses from query strings without custom code
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

TaskId = NewType("TaskId", int)


# ─── Enums ───────────────────────────────────────────────────────

class TaskStatus(str, Enum):
    """Task completion state — maps to the boolean `done` column."""
    PENDING = "pending"
    COMPLETED = "completed"

    @property
    def done(self) -> bool:
        return self is TaskStatus.COMPLETED
