"""
In‑memory task store.

Records live in a dictionary keyed by id for the lifetime of the
process.  Ids come from a counter that only moves forward, so an id is
never handed out twice even after its task is deleted.  Callers always
receive copies, never the stored objects themselves.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from typing import Dict, List, Optional

from task_board_api.app.repositories.base import TaskStore
from task_board_api.app.schemas.task import TaskCreate, TaskRead

logger = logging.getLogger(__name__)


class InMemoryTaskStore(TaskStore):
    """Dictionary‑backed :class:`TaskStore`."""

    def __init__(self) -> None:
        self._tasks: Dict[int, TaskRead] = {}
        self._ids = itertools.count(1)
        # Serialises writers; readers take a snapshot without awaiting.
        self._lock = asyncio.Lock()

    async def get_all(self) -> List[TaskRead]:
        return [task.model_copy() for task in self._tasks.values()]

    async def get_by_id(self, task_id: int) -> Optional[TaskRead]:
        task = self._tasks.get(task_id)
        return task.model_copy() if task is not None else None

    async def get_completed(self) -> List[TaskRead]:
        return [task.model_copy() for task in self._tasks.values() if task.is_complete]

    async def add(self, task: TaskCreate) -> TaskRead:
        async with self._lock:
            stored = TaskRead(
                id=next(self._ids),
                name=task.name,
                is_complete=task.is_complete,
                priority=task.priority,
            )
            self._tasks[stored.id] = stored
        logger.debug("Stored task %s", stored.id)
        return stored.model_copy()

    async def save(self, task: TaskRead) -> bool:
        async with self._lock:
            if task.id not in self._tasks:
                return False
            self._tasks[task.id] = task.model_copy()
        return True

    async def delete(self, task_id: int) -> bool:
        async with self._lock:
            return self._tasks.pop(task_id, None) is not None

    async def count(self) -> int:
        return len(self._tasks)
