"""Task Rules — pure validation and shaping for task data, no IO.

Invariants:
    - A persisted title is never empty after trimming and at most MAX_TITLE_LENGTH long
    - Statistics always satisfy total == pending + completed
    - NULL aggregates (empty table) become 0

Design Decisions:
    - Validation lives here, not in the service: runs before any storage access
    - build_stats derives total from its parts instead of trusting COUNT(*)
"""

from app.core.errors import TaskValidationError

MAX_TITLE_LENGTH = 10_000


def normalize_title(title: str | None) -> str:
    """Trim a raw title. Raises TaskValidationError when nothing is left or it is too long."""
    if title is None:
        raise TaskValidationError("title required", field="title")
    stripped = title.strip()
    if not stripped:
        raise TaskValidationError("title required", field="title")
    if len(stripped) > MAX_TITLE_LENGTH:
        raise TaskValidationError(
            f"title exceeds {MAX_TITLE_LENGTH} characters", field="title",
        )
    return stripped


def build_stats(pending: int | None, completed: int | None) -> dict:
    """Shape aggregate counts into the stats envelope."""
    pending = pending or 0
    completed = completed or 0
    return {
        "total": pending + completed,
        "pending": pending,
        "completed": completed,
    }
