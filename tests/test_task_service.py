# tests/test_task_service.py

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import pytest

from task_board_api.app.repositories.memory import InMemoryTaskStore
from task_board_api.app.repositories.sqlite import SqliteTaskStore
from task_board_api.app.schemas.task import TaskCreate
from task_board_api.app.services.results import ResultKind
from task_board_api.app.services.task_service import TaskService

from .fakes import FailingTaskStore, FakeTaskStore, VanishingTaskStore, make_task


@pytest.mark.asyncio
async def test_get_task_returns_record_unchanged() -> None:
    task = make_task(7, "enn *w0iwnm aa//al ", is_complete=True, priority=1)
    service = TaskService(FakeTaskStore([task]))

    result = await service.get_task(7)

    assert result.kind is ResultKind.OK
    assert result.value == task


@pytest.mark.asyncio
async def test_get_task_missing_is_not_found() -> None:
    service = TaskService(FakeTaskStore([make_task(1, "task")]))

    result = await service.get_task(2)

    assert result.kind is ResultKind.NOT_FOUND
    assert result.message == "Could not find task with id 2"
    assert not result.ok


@pytest.mark.asyncio
async def test_get_all_tasks_returns_every_task() -> None:
    tasks = [make_task(i, f"task {i}", priority=1) for i in range(1, 6)]
    service = TaskService(FakeTaskStore(tasks))

    result = await service.get_all_tasks()

    assert result.kind is ResultKind.OK
    assert result.value == tasks


@pytest.mark.asyncio
async def test_get_all_tasks_orders_by_priority() -> None:
    tasks = [make_task(i, f"task {i}", priority=6 - i) for i in range(1, 6)]
    service = TaskService(FakeTaskStore(tasks))

    result = await service.get_all_tasks()

    assert [t.priority for t in result.value] == [1, 2, 3, 4, 5]
    assert result.value[0].id == 5


@pytest.mark.asyncio
async def test_get_all_tasks_puts_open_tasks_first() -> None:
    tasks = [
        make_task(1, "task 1", is_complete=True, priority=1),
        make_task(2, "task 2", is_complete=True, priority=1),
        make_task(3, "task 3", is_complete=False, priority=1),
    ]
    service = TaskService(FakeTaskStore(tasks))

    result = await service.get_all_tasks()

    assert [t.id for t in result.value] == [3, 1, 2]


@pytest.mark.asyncio
async def test_get_all_tasks_orders_by_completion_then_priority() -> None:
    tasks = [
        make_task(1, "t1", is_complete=True, priority=3),
        make_task(2, "t2", is_complete=False, priority=5),
        make_task(3, "t3", is_complete=True, priority=1),
        make_task(4, "t4", is_complete=False, priority=2),
        make_task(5, "t5", is_complete=False, priority=5),
    ]
    service = TaskService(FakeTaskStore(tasks))

    result = await service.get_all_tasks()

    # Equal keys (2 and 5) keep store order.
    assert [t.id for t in result.value] == [4, 2, 5, 3, 1]
    flags = [t.is_complete for t in result.value]
    assert flags == sorted(flags)


@pytest.mark.asyncio
async def test_scenario_a_b_c_order() -> None:
    service = TaskService(InMemoryTaskStore())
    for name, done, prio in (("A", False, 2), ("B", True, 1), ("C", True, 2)):
        await service.add_task(TaskCreate(name=name, is_complete=done, priority=prio))

    result = await service.get_all_tasks()

    assert [t.name for t in result.value] == ["A", "B", "C"]


@pytest.mark.asyncio
async def test_empty_store_lists_are_not_found() -> None:
    service = TaskService(FakeTaskStore())

    all_result = await service.get_all_tasks()
    complete_result = await service.get_complete_tasks()

    assert all_result.kind is ResultKind.NOT_FOUND
    assert all_result.message == "There are no tasks"
    assert complete_result.kind is ResultKind.NOT_FOUND
    assert complete_result.message == "There are no complete tasks"


@pytest.mark.asyncio
async def test_get_complete_tasks_returns_only_complete_by_priority() -> None:
    tasks = [
        make_task(1, "a", is_complete=True, priority=3),
        make_task(2, "b", is_complete=False, priority=0),
        make_task(3, "c", is_complete=True, priority=1),
        make_task(4, "d", is_complete=True, priority=3),
    ]
    service = TaskService(FakeTaskStore(tasks))

    result = await service.get_complete_tasks()

    assert result.kind is ResultKind.OK
    assert [t.id for t in result.value] == [3, 1, 4]


@pytest.mark.asyncio
async def test_get_complete_tasks_without_complete_is_not_found() -> None:
    service = TaskService(FakeTaskStore([make_task(1, "open")]))

    result = await service.get_complete_tasks()

    assert result.kind is ResultKind.NOT_FOUND


@pytest.mark.asyncio
async def test_add_task_ignores_input_id() -> None:
    store = FakeTaskStore([make_task(1, "existing")])
    service = TaskService(store)

    result = await service.add_task(TaskCreate(id=99, name="new", is_complete=True, priority=4))

    assert result.kind is ResultKind.CREATED
    assert result.value.id == 2
    fetched = await service.get_task(result.value.id)
    assert fetched.value.model_dump(exclude={"id"}) == {"name": "new", "is_complete": True, "priority": 4}


@pytest.mark.asyncio
async def test_add_task_store_failure_does_not_leak_detail(caplog: pytest.LogCaptureFixture) -> None:
    service = TaskService(FailingTaskStore())

    with caplog.at_level(logging.ERROR):
        result = await service.add_task(TaskCreate(name="x"))

    assert result.kind is ResultKind.STORE_FAILURE
    assert result.message == "Could not add task"
    assert "secret-detail" not in result.message
    assert "secret-detail" in caplog.text


@pytest.mark.asyncio
async def test_timeout_is_store_failure() -> None:
    service = TaskService(FailingTaskStore(asyncio.TimeoutError()))

    assert (await service.add_task(TaskCreate(name="x"))).kind is ResultKind.STORE_FAILURE
    assert (await service.get_all_tasks()).kind is ResultKind.STORE_FAILURE
    assert (await service.get_task(1)).kind is ResultKind.STORE_FAILURE
    assert (await service.update_task(1, TaskCreate(name="x"))).kind is ResultKind.STORE_FAILURE
    assert (await service.delete_task(1)).kind is ResultKind.STORE_FAILURE


@pytest.mark.asyncio
async def test_update_task_replaces_mutable_fields_and_keeps_id() -> None:
    store = FakeTaskStore([make_task(3, "old", is_complete=False, priority=5)])
    service = TaskService(store)

    result = await service.update_task(3, TaskCreate(id=42, name="new", is_complete=True, priority=1))

    assert result.kind is ResultKind.NO_CONTENT
    assert result.value is None
    fetched = await service.get_task(3)
    assert fetched.value == make_task(3, "new", is_complete=True, priority=1)
    assert (await service.get_task(42)).kind is ResultKind.NOT_FOUND


@pytest.mark.asyncio
async def test_update_missing_task_is_not_found_and_does_not_save() -> None:
    store = FakeTaskStore([make_task(1, "task")])
    service = TaskService(store)

    result = await service.update_task(2, TaskCreate(name="x"))

    assert result.kind is ResultKind.NOT_FOUND
    assert "save" not in store.calls


@pytest.mark.asyncio
async def test_update_task_deleted_concurrently_is_not_found() -> None:
    service = TaskService(VanishingTaskStore([make_task(1, "task")]))

    result = await service.update_task(1, TaskCreate(name="x"))

    assert result.kind is ResultKind.NOT_FOUND


@pytest.mark.asyncio
async def test_delete_task_then_get_is_not_found() -> None:
    store = FakeTaskStore([make_task(1, "a"), make_task(2, "b")])
    service = TaskService(store)

    result = await service.delete_task(1)

    assert result.kind is ResultKind.NO_CONTENT
    assert (await service.get_task(1)).kind is ResultKind.NOT_FOUND
    assert await store.count() == 1


@pytest.mark.asyncio
async def test_delete_missing_task_leaves_store_unchanged() -> None:
    store = FakeTaskStore([make_task(1, "a"), make_task(2, "b"), make_task(3, "c")])
    service = TaskService(store)

    result = await service.delete_task(10)

    assert result.kind is ResultKind.NOT_FOUND
    assert await store.count() == 3
    assert "delete" not in store.calls


@pytest.mark.asyncio
async def test_delete_task_removed_concurrently_is_not_found() -> None:
    service = TaskService(VanishingTaskStore([make_task(1, "a")]))

    result = await service.delete_task(1)

    assert result.kind is ResultKind.NOT_FOUND


@pytest.mark.asyncio
async def test_injected_logger_receives_events(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("tests.task_service")
    service = TaskService(FakeTaskStore(), logger=logger)

    with caplog.at_level(logging.INFO, logger="tests.task_service"):
        await service.get_task(5)

    messages = [(r.name, r.levelno, r.getMessage()) for r in caplog.records]
    assert ("tests.task_service", logging.INFO, "Requesting task with id 5") in messages
    assert ("tests.task_service", logging.WARNING, "Could not find task with id 5") in messages


@pytest.mark.asyncio
async def test_huge_ids_on_sqlite_are_not_found(tmp_path: Path) -> None:
    service = TaskService(SqliteTaskStore(str(tmp_path / "huge.db")))
    await service.add_task(TaskCreate(name="real"))

    assert (await service.get_task(2**63)).kind is ResultKind.NOT_FOUND
    assert (await service.update_task(2**63, TaskCreate(name="x"))).kind is ResultKind.NOT_FOUND
    assert (await service.delete_task(-(2**63) - 1)).kind is ResultKind.NOT_FOUND
