"""Task Service — one SQL statement per operation over the tasks table.

Invariants:
    - Every operation issues exactly one statement (plus commit for writes)
    - Titles are validated before any statement is built — invalid input never reaches storage
    - Toggle is a single conditional UPDATE (done = NOT done), never read-then-write
    - Counts come from the statement's rowcount; an unknown id yields 0, not an error

Design Decisions:
    - Session passed in explicitly: the service owns no ambient state
      (ADR: storage handle owned by db_manager, lent per request)
    - Bulk UPDATE/DELETE with synchronize_session=False, reads with populate_existing:
      returned rows always reflect the table, never a stale identity-map copy
    - Search is a literal, case-insensitive substring (icontains + autoescape):
      same behavior on SQLite and PostgreSQL, % and _ match themselves
"""

import logging
from collections.abc import Sequence

from sqlalchemy import delete, func, select, update, case, not_
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import TaskId, TaskStatus
from app.core.errors import ErrorContext, ResourceNotFoundError
from app.core.task_rules import build_stats, normalize_title
from app.models.task import Task

logger = logging.getLogger(__name__)

_BULK = {"synchronize_session": False}
_FRESH = {"populate_existing": True}


class TaskService:
    """Task operations bound to one database session."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_tasks(self, status: TaskStatus | None = None) -> Sequence[Task]:
        """All tasks, newest first. Optional completion-state filter."""
        query = select(Task).order_by(Task.id.desc()).execution_options(**_FRESH)
        if status is not None:
            query = query.where(Task.done.is_(status.done))
        result = await self._db.execute(query)
        return result.scalars().all()

    async def get_task(self, task_id: TaskId) -> Task:
        task = await self._db.get(Task, task_id, populate_existing=True)
        if task is None:
            raise ResourceNotFoundError(
                "Task", task_id, ErrorContext(task_id=task_id, operation="get"),
            )
        return task

    async def create_task(self, title: str | None) -> Task:
        """Insert a pending task. The id is assigned by the storage engine."""
        task = Task(title=normalize_title(title), done=False)
        self._db.add(task)
        await self._db.commit()
        logger.info(f"Task created: {task.id}", extra={"task_id": task.id})
        return task

    async def toggle_task(self, task_id: TaskId) -> int:
        result = await self._db.execute(
            update(Task)
            .where(Task.id == task_id)
            .values(done=not_(Task.done))
            .execution_options(**_BULK),
        )
        await self._db.commit()
        return result.rowcount

    async def edit_task(self, task_id: TaskId, title: str | None) -> int:
        """Replace the title only; done is left as is."""
        clean = normalize_title(title)
        result = await self._db.execute(
            update(Task)
            .where(Task.id == task_id)
            .values(title=clean)
            .execution_options(**_BULK),
        )
        await self._db.commit()
        return result.rowcount

    async def delete_completed(self) -> int:
        result = await self._db.execute(
            delete(Task).where(Task.done.is_(True)).execution_options(**_BULK),
        )
        await self._db.commit()
        if result.rowcount:
            logger.info(f"Deleted {result.rowcount} completed task(s)")
        return result.rowcount

    async def delete_task(self, task_id: TaskId) -> int:
        result = await self._db.execute(
            delete(Task).where(Task.id == task_id).execution_options(**_BULK),
        )
        await self._db.commit()
        if result.rowcount:
            logger.info(f"Task deleted: {task_id}", extra={"task_id": task_id})
        return result.rowcount

    async def get_stats(self) -> dict:
        """Single aggregate query; SUM over an empty table is NULL, coalesced to 0."""
        result = await self._db.execute(
            select(
                func.coalesce(
                    func.sum(case((Task.done.is_(False), 1), else_=0)), 0,
                ),
                func.coalesce(
                    func.sum(case((Task.done.is_(True), 1), else_=0)), 0,
                ),
            ),
        )
        pending, completed = result.one()
        return build_stats(pending, completed)

    async def search_tasks(self, query: str) -> Sequence[Task]:
        """Titles containing query (case-insensitive, literal), newest first."""
        stmt = select(Task).order_by(Task.id.desc()).execution_options(**_FRESH)
        if query:
            stmt = stmt.where(Task.title.icontains(query, autoescape=True))
        result = await self._db.execute(stmt)
        return result.scalars().all()

    async def complete_all(self) -> int:
        result = await self._db.execute(
            update(Task)
            .where(Task.done.is_(False))
            .values(done=True)
            .execution_options(**_BULK),
        )
        await self._db.commit()
        return result.rowcount
