"""Task Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - TaskCreate.title / TaskUpdate.title: required, stripped, non-empty, length
      checked after stripping (core.task_rules.MAX_TITLE_LENGTH)
    - TaskResponse.done is a JSON boolean even though SQLite stores 0/1
    - Count envelopes carry exactly one key: updated or deleted

Design Decisions:
    - field_validator delegates to core.task_rules.normalize_title: one trimming rule
      for the HTTP boundary and direct service callers
    - from_attributes on TaskResponse: ORM rows serialize without hand-written dicts
"""

from pydantic import BaseModel, ConfigDict, field_validator

from app.core.errors import TaskValidationError
from app.core.task_rules import normalize_title


class _TitleBody(BaseModel):
    title: str

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        try:
            return normalize_title(v)
        except TaskValidationError as e:
            raise ValueError(e.message) from e


class TaskCreate(_TitleBody):
    """Task creation — validates title presence and whitespace."""


class TaskUpdate(_TitleBody):
    """Title edit — same rules as creation; done is never touched."""


class TaskResponse(BaseModel):
    """Task response — public-facing task data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    done: bool


class UpdatedCount(BaseModel):
    updated: int


class DeletedCount(BaseModel):
    deleted: int


class TaskStats(BaseModel):
    """Aggregate counts. total == pending + completed."""
    total: int
    pending: int
    completed: int
