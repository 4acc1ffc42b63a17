"""Task Routes — the HTTP surface of the task service.

Invariants:
    - Literal paths (/completed, /stats, /search/..., /complete-all) are registered
      before any /{task_id} route so a path parameter never captures them
    - Request bodies are validated by Pydantic before the handler runs
    - Routes never contain SQL (delegate to TaskService)
    - The response is built only after the statement has been awaited

Design Decisions:
    - /search/{query:path}: path converter matches the empty query (/search/),
      which returns every task
    - /search without a trailing slash is its own route (query defaults to ""),
      so it is never captured by /{task_id}
    - task_id typed as a bounded int: non-numeric or out-of-range ids are rejected
      as 400 before any storage access
"""

import logging

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import TaskId, TaskStatus
from app.infrastructure.database import get_db
from app.schemas.task import (
    DeletedCount, TaskCreate, TaskResponse, TaskStats, TaskUpdate, UpdatedCount,
)
from app.services.task_service import TaskService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/tasks", tags=["tasks"])

# SQLite INTEGER is a signed 64-bit value; larger ids are rejected as 400
TASK_ID_PATH = Path(ge=-(2**63), le=2**63 - 1)


def get_task_service(db: AsyncSession = Depends(get_db)) -> TaskService:
    return TaskService(db)


# ─── Literal paths (registered first) ───────────────────────────

@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    status_filter: TaskStatus | None = Query(None, alias="status"),
    service: TaskService = Depends(get_task_service),
):
    """List tasks, newest first."""
    return await service.list_tasks(status_filter)


@router.post(
    "", response_model=TaskResponse, status_code=status.HTTP_201_CREATED,
)
async def create_task(
    body: TaskCreate, service: TaskService = Depends(get_task_service),
):
    """Create a pending task."""
    return await service.create_task(body.title)


@router.get("/stats", response_model=TaskStats)
async def get_stats(service: TaskService = Depends(get_task_service)):
    """Total, pending and completed counts."""
    return await service.get_stats()


@router.get("/search", response_model=list[TaskResponse])
@router.get("/search/{query:path}", response_model=list[TaskResponse])
async def search_tasks(
    query: str = "", service: TaskService = Depends(get_task_service),
):
    """Tasks whose title contains query, newest first."""
    return await service.search_tasks(query)


@router.delete("/completed", response_model=DeletedCount)
async def delete_completed(service: TaskService = Depends(get_task_service)):
    """Delete every completed task."""
    return DeletedCount(deleted=await service.delete_completed())


@router.patch("/complete-all", response_model=UpdatedCount)
async def complete_all(service: TaskService = Depends(get_task_service)):
    """Mark every pending task as done."""
    return UpdatedCount(updated=await service.complete_all())


# ─── Parameterized paths ─────────────────────────────────────────

@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: int = TASK_ID_PATH, service: TaskService = Depends(get_task_service),
):
    """Get one task or 404."""
    return await service.get_task(TaskId(task_id))


@router.patch("/{task_id}/toggle", response_model=UpdatedCount)
async def toggle_task(
    task_id: int = TASK_ID_PATH, service: TaskService = Depends(get_task_service),
):
    """Flip done. Unknown ids report updated=0."""
    return UpdatedCount(updated=await service.toggle_task(TaskId(task_id)))


@router.put("/{task_id}", response_model=UpdatedCount)
async def edit_task(
    body: TaskUpdate, task_id: int = TASK_ID_PATH,
    service: TaskService = Depends(get_task_service),
):
    """Replace the title of a task."""
    return UpdatedCount(
        updated=await service.edit_task(TaskId(task_id), body.title),
    )


@router.delete("/{task_id}", response_model=DeletedCount)
async def delete_task(
    task_id: int = TASK_ID_PATH, service: TaskService = Depends(get_task_service),
):
    """Delete one task. Unknown ids report deleted=0."""
    return DeletedCount(deleted=await service.delete_task(TaskId(task_id)))
