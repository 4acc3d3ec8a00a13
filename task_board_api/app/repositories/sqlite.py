"""
SQLite task store.

Each operation opens its own connection and runs in a worker thread
via ``asyncio.to_thread`` so that a slow disk never blocks the event
loop.  ``sqlite3`` errors are wrapped in
:class:`~task_board_api.app.core.errors.StoreError`.
Ids outside SQLite's 64-bit integer range cannot exist and are
reported as absent.

All queries use parameterized statements.
"""

from __future__ import annotations

import asyncio
import logging
import sqlite3
from typing import List, Optional, Tuple

from task_board_api.app.core.db import get_connection, get_database_path, init_db
from task_board_api.app.core.errors import StoreError
from task_board_api.app.repositories.base import TaskStore
from task_board_api.app.schemas.task import TaskCreate, TaskRead

logger = logging.getLogger(__name__)

# SQLite INTEGER PRIMARY KEY range; no stored row can have an id outside it.
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


def _in_range(task_id: int) -> bool:
    return _MIN_ID <= task_id <= _MAX_ID


class SqliteTaskStore(TaskStore):
    """:class:`TaskStore` backed by a single SQLite table."""

    def __init__(self, database_url: Optional[str] = None) -> None:
        self._db_path = get_database_path(database_url)
        init_db(self._db_path)
        logger.info("SqliteTaskStore ready db=%s", self._db_path)

    @property
    def db_path(self) -> str:
        return self._db_path

    # ---- low-level helpers ----

    def _connect(self) -> sqlite3.Connection:
        try:
            return get_connection(self._db_path)
        except sqlite3.Error as exc:
            raise StoreError(f"Cannot open database {self._db_path}: {exc}") from exc

    def _query(self, sql: str, params: tuple = ()) -> List[sqlite3.Row]:
        conn = self._connect()
        try:
            return conn.execute(sql, params).fetchall()
        except (sqlite3.Error, OverflowError) as exc:
            raise StoreError(f"SQLite query failed: {exc}") from exc
        finally:
            conn.close()

    def _write(self, sql: str, params: tuple = ()) -> Tuple[Optional[int], int]:
        """Execute a write and return ``(lastrowid, rowcount)``."""
        conn = self._connect()
        try:
            cursor = conn.execute(sql, params)
            conn.commit()
            return cursor.lastrowid, cursor.rowcount
        except (sqlite3.Error, OverflowError) as exc:
            conn.rollback()
            raise StoreError(f"SQLite write failed: {exc}") from exc
        finally:
            conn.close()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> TaskRead:
        """Convert a database row to a TaskRead instance."""
        return TaskRead(
            id=row["id"],
            name=row["name"],
            is_complete=bool(row["is_complete"]),
            priority=row["priority"],
        )

    def _add_sync(self, task: TaskCreate) -> TaskRead:
        task_id, _ = self._write(
            "INSERT INTO tasks (name, is_complete, priority) VALUES (?, ?, ?)",
            (task.name, int(task.is_complete), task.priority),
        )
        if task_id is None:
            raise StoreError("SQLite did not report an id for the new task")
        return TaskRead(id=task_id, name=task.name, is_complete=task.is_complete, priority=task.priority)

    # ---- TaskStore ----

    async def get_all(self) -> List[TaskRead]:
        rows = await asyncio.to_thread(self._query, "SELECT * FROM tasks")
        return [self._row_to_task(row) for row in rows]

    async def get_by_id(self, task_id: int) -> Optional[TaskRead]:
        if not _in_range(task_id):
            return None
        rows = await asyncio.to_thread(self._query, "SELECT * FROM tasks WHERE id = ?", (task_id,))
        return self._row_to_task(rows[0]) if rows else None

    async def get_completed(self) -> List[TaskRead]:
        rows = await asyncio.to_thread(self._query, "SELECT * FROM tasks WHERE is_complete = 1")
        return [self._row_to_task(row) for row in rows]

    async def add(self, task: TaskCreate) -> TaskRead:
        stored = await asyncio.to_thread(self._add_sync, task)
        logger.debug("Inserted task %s", stored.id)
        return stored

    async def save(self, task: TaskRead) -> bool:
        if not _in_range(task.id):
            return False
        _, affected = await asyncio.to_thread(
            self._write,
            "UPDATE tasks SET name = ?, is_complete = ?, priority = ? WHERE id = ?",
            (task.name, int(task.is_complete), task.priority, task.id),
        )
        return affected > 0

    async def delete(self, task_id: int) -> bool:
        if not _in_range(task_id):
            return False
        _, affected = await asyncio.to_thread(self._write, "DELETE FROM tasks WHERE id = ?", (task_id,))
        return affected > 0

    async def count(self) -> int:
        rows = await asyncio.to_thread(self._query, "SELECT COUNT(*) AS total FROM tasks")
        return int(rows[0]["total"])
