"""TaskService — one statement per operation against a real SQLite file.

Invariants:
    - Invalid titles raise TaskValidationError before any statement runs
    - Toggle is an involution; unknown ids give 0
    - delete_completed never touches pending rows
"""

import pytest
from sqlalchemy import func, select

from app.core.domain_types import TaskId, TaskStatus
from app.core.errors import ResourceNotFoundError, TaskValidationError
from app.models.task import Task
from app.services.task_service import TaskService


@pytest.fixture
def service(test_db):
    return TaskService(test_db)


async def _row_count(db) -> int:
    return (await db.execute(select(func.count(Task.id)))).scalar_one()


async def test_create_persists_trimmed_pending_task(service, test_db):
    task = await service.create_task("  water plants ")
    assert task.id is not None
    assert task.title == "water plants"
    assert task.done is False
    assert await _row_count(test_db) == 1


async def test_create_rejects_empty_title_without_insert(service, test_db):
    for title in (None, "", "    "):
        with pytest.raises(TaskValidationError) as exc_info:
            await service.create_task(title)
        assert exc_info.value.field == "title"
    assert await _row_count(test_db) == 0


async def test_toggle_is_an_involution(service):
    task = await service.create_task("flip me")
    assert await service.toggle_task(TaskId(task.id)) == 1
    assert (await service.get_task(TaskId(task.id))).done is True
    assert await service.toggle_task(TaskId(task.id)) == 1
    assert (await service.get_task(TaskId(task.id))).done is False


async def test_toggle_missing_task_returns_zero(service):
    assert await service.toggle_task(TaskId(123)) == 0


async def test_edit_rejects_blank_title(service):
    task = await service.create_task("original")
    with pytest.raises(TaskValidationError):
        await service.edit_task(TaskId(task.id), " ")
    assert (await service.get_task(TaskId(task.id))).title == "original"


async def test_edit_keeps_done_and_id(service):
    task = await service.create_task("old")
    await service.toggle_task(TaskId(task.id))
    assert await service.edit_task(TaskId(task.id), "new") == 1
    edited = await service.get_task(TaskId(task.id))
    assert (edited.id, edited.title, edited.done) == (task.id, "new", True)


async def test_get_missing_task_raises_not_found(service):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await service.get_task(TaskId(5))
    assert exc_info.value.http_status == 404
    assert exc_info.value.context.task_id == 5


async def test_delete_completed_only_removes_done_rows(service):
    done = await service.create_task("done")
    pending = await service.create_task("pending")
    await service.toggle_task(TaskId(done.id))

    assert await service.delete_completed() == 1
    remaining = await service.list_tasks()
    assert [(t.id, t.done) for t in remaining] == [(pending.id, False)]


async def test_delete_task_counts(service):
    task = await service.create_task("bye")
    assert await service.delete_task(TaskId(task.id)) == 1
    assert await service.delete_task(TaskId(task.id)) == 0


async def test_list_filters_by_status(service):
    a = await service.create_task("a")
    b = await service.create_task("b")
    await service.toggle_task(TaskId(b.id))
    assert [t.id for t in await service.list_tasks(TaskStatus.PENDING)] == [a.id]
    assert [t.id for t in await service.list_tasks(TaskStatus.COMPLETED)] == [b.id]
    assert [t.id for t in await service.list_tasks()] == [b.id, a.id]


async def test_stats_empty_and_populated(service):
    assert await service.get_stats() == {"total": 0, "pending": 0, "completed": 0}
    for title in ("a", "b", "c"):
        await service.create_task(title)
    first = (await service.list_tasks())[0]
    await service.toggle_task(TaskId(first.id))
    assert await service.get_stats() == {"total": 3, "pending": 2, "completed": 1}


async def test_complete_all_is_idempotent(service):
    await service.create_task("a")
    await service.create_task("b")
    assert await service.complete_all() == 2
    assert await service.complete_all() == 0
    assert (await service.get_stats())["pending"] == 0


async def test_search_matches_substring_newest_first(service):
    milk = await service.create_task("buy milk")
    await service.create_task("walk dog")
    oat_milk = await service.create_task("oat MILK")
    found = await service.search_tasks("milk")
    assert [t.id for t in found] == [oat_milk.id, milk.id]


async def test_search_escapes_like_wildcards(service):
    await service.create_task("file_name")
    await service.create_task("filename")
    found = await service.search_tasks("_")
    assert [t.title for t in found] == ["file_name"]


async def test_search_empty_query_returns_everything(service):
    await service.create_task("x")
    await service.create_task("y")
    assert len(await service.search_tasks("")) == 2
