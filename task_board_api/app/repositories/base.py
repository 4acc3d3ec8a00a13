"""
Storage port for task records.

``TaskStore`` is the narrow interface the task service depends on.
Stores keep custody of records and know nothing about ordering or
result classification; those rules live in the service layer.  All
methods are coroutines because a store may wait on I/O.

Updating a task is expressed as ``get_by_id`` followed by ``save``:
the caller modifies the returned copy and hands it back.  Stores apply
``save`` atomically to the record identified by ``task.id``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from task_board_api.app.schemas.task import TaskCreate, TaskRead


class TaskStore(ABC):
    """Abstract task storage."""

    @abstractmethod
    async def get_all(self) -> List[TaskRead]:
        """Return all stored tasks in no particular order."""

    @abstractmethod
    async def get_by_id(self, task_id: int) -> Optional[TaskRead]:
        """Return the task with ``task_id`` or ``None`` if absent."""

    @abstractmethod
    async def get_completed(self) -> List[TaskRead]:
        """Return all tasks whose ``is_complete`` flag is set."""

    @abstractmethod
    async def add(self, task: TaskCreate) -> TaskRead:
        """Store a new task under a freshly assigned id.

        Any ``id`` carried by ``task`` is ignored.  Raises
        :class:`~task_board_api.app.core.errors.StoreError` when the
        underlying medium rejects the write.
        """

    @abstractmethod
    async def save(self, task: TaskRead) -> bool:
        """Persist a modified task.

        Returns ``False`` if no task with ``task.id`` exists.
        """

    @abstractmethod
    async def delete(self, task_id: int) -> bool:
        """Remove a task.  Returns ``True`` if a task was removed."""

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored tasks."""

    def close(self) -> None:
        """Release resources held by the store."""
        return
