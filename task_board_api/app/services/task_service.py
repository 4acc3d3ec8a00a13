"""
Service for managing task board items.

``TaskService`` is the only place that knows the board's business
rules: how task lists are ordered, which fields an update replaces and
how store outcomes are classified.  It holds no state of its own; the
task store it is given owns every record and is shared by all
concurrent requests.

Ordering rules:

* ``get_all_tasks`` lists open tasks before completed ones, each group
  ascending by ``priority``.
* ``get_complete_tasks`` lists completed tasks ascending by
  ``priority``.

Both sorts are stable, so tasks with equal keys keep the order the
store returned them in.  An empty list is reported as ``NOT_FOUND``
rather than as an empty success, matching the single‑task lookup.

No exception raised by the store escapes this class.  Store faults are
logged with their detail and reported as ``STORE_FAILURE`` with a
generic message that is safe to show to clients.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from task_board_api.app.repositories.base import TaskStore
from task_board_api.app.schemas.task import TaskCreate, TaskRead
from task_board_api.app.services.results import ServiceResult

_logger = logging.getLogger(__name__)


class TaskService:
    """Business rules for creating, listing, updating and deleting tasks."""

    def __init__(self, store: TaskStore, logger: Optional[logging.Logger] = None) -> None:
        self._store = store
        self._logger = logger or _logger

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    async def get_all_tasks(self) -> ServiceResult:
        """Return every task, open ones first, then by priority."""
        self._logger.info("Requesting all tasks")
        try:
            tasks = await self._store.get_all()
        except Exception:
            return self._store_failure("get_all_tasks", "Could not retrieve tasks")

        if not tasks:
            self._logger.warning("There are no tasks")
            return ServiceResult.not_found("There are no tasks")

        ordered = sorted(tasks, key=lambda t: (t.is_complete, t.priority))
        self._logger.info("Retrieved %s tasks", len(ordered))
        return ServiceResult.success(ordered)

    async def get_task(self, task_id: int) -> ServiceResult:
        """Return the task with ``task_id``."""
        self._logger.info("Requesting task with id %s", task_id)
        try:
            task = await self._store.get_by_id(task_id)
        except Exception:
            return self._store_failure("get_task", f"Could not retrieve task with id {task_id}", task_id)

        if task is None:
            return self._not_found(task_id)

        self._logger.info("Retrieved task with id %s", task_id)
        return ServiceResult.success(task)

    async def get_complete_tasks(self) -> ServiceResult:
        """Return completed tasks ordered by priority."""
        self._logger.info("Requesting complete tasks")
        try:
            tasks = await self._store.get_completed()
        except Exception:
            return self._store_failure("get_complete_tasks", "Could not retrieve complete tasks")

        if not tasks:
            self._logger.warning("There are no complete tasks")
            return ServiceResult.not_found("There are no complete tasks")

        ordered: List[TaskRead] = sorted(tasks, key=lambda t: t.priority)
        self._logger.info("Retrieved %s complete tasks", len(ordered))
        return ServiceResult.success(ordered)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    async def add_task(self, data: TaskCreate) -> ServiceResult:
        """Store a new task.  Any ``id`` on ``data`` is ignored."""
        self._logger.info("Adding task %r", data.name)
        try:
            task = await self._store.add(data)
        except Exception:
            return self._store_failure("add_task", "Could not add task")

        self._logger.info("Added task with id %s", task.id)
        return ServiceResult.created(task)

    async def update_task(self, task_id: int, data: TaskCreate) -> ServiceResult:
        """Replace ``name``, ``is_complete`` and ``priority`` of a task.

        The id of the stored task never changes, whatever ``data.id``
        holds.  Returns ``NO_CONTENT`` on success; callers re‑fetch the
        task to observe its new state.
        """
        self._logger.info("Updating task with id %s", task_id)
        try:
            task = await self._store.get_by_id(task_id)
            if task is None:
                return self._not_found(task_id)

            task.name = data.name
            task.is_complete = data.is_complete
            task.priority = data.priority

            saved = await self._store.save(task)
        except Exception:
            return self._store_failure("update_task", f"Could not update task with id {task_id}", task_id)

        if not saved:
            # Deleted between the lookup and the save.
            return self._not_found(task_id)

        self._logger.info("Updated task with id %s", task_id)
        return ServiceResult.no_content()

    async def delete_task(self, task_id: int) -> ServiceResult:
        """Remove the task with ``task_id``."""
        self._logger.info("Deleting task with id %s", task_id)
        try:
            task = await self._store.get_by_id(task_id)
            if task is None:
                return self._not_found(task_id)
            deleted = await self._store.delete(task_id)
        except Exception:
            return self._store_failure("delete_task", f"Could not delete task with id {task_id}", task_id)

        if not deleted:
            return self._not_found(task_id)

        self._logger.info("Deleted task with id %s", task_id)
        return ServiceResult.no_content()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _not_found(self, task_id: int) -> ServiceResult:
        message = f"Could not find task with id {task_id}"
        self._logger.warning(message)
        return ServiceResult.not_found(message)

    def _store_failure(self, operation: str, message: str, task_id: Optional[int] = None) -> ServiceResult:
        """Log the active store exception and wrap it as a failure result.

        Must be called from inside an ``except`` block.
        """
        self._logger.exception("Task store failed during %s (id=%s)", operation, task_id)
        return ServiceResult.store_failure(message)
