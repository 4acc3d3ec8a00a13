"""
Task store implementations.

The service layer depends only on :class:`TaskStore`.  Which engine
backs it is decided once, at application start, by
:func:`build_task_store`.
"""

from task_board_api.app.core.config import Settings
from task_board_api.app.repositories.base import TaskStore
from task_board_api.app.repositories.memory import InMemoryTaskStore
from task_board_api.app.repositories.sqlite import SqliteTaskStore

__all__ = ["TaskStore", "InMemoryTaskStore", "SqliteTaskStore", "build_task_store"]


def build_task_store(settings: Settings) -> TaskStore:
    """Create the task store selected by ``settings.task_store_backend``."""
    backend = settings.task_store_backend.strip().lower()
    if backend == "memory":
        return InMemoryTaskStore()
    if backend == "sqlite":
        return SqliteTaskStore(settings.database_url)
    raise ValueError(f"Unknown task store backend: {settings.task_store_backend!r}")
