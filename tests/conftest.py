# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from task_board_api.app.core.config import Settings
from task_board_api.app.main import create_app
from task_board_api.app.repositories.memory import InMemoryTaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pinned for tests, independent of the developer's environment.
    """
    return Settings(
        project_name="TaskBoardAPI-test",
        debug=False,
        log_level="DEBUG",
        log_file=None,
        api_prefix="",
        task_store_backend="memory",
        database_url=str(tmp_path / "tasks.db"),
        correlation_header="Correlation-Id-Header",
        request_logging=True,
    )


@pytest.fixture()
def memory_store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture()
def client(settings: Settings, memory_store: InMemoryTaskStore) -> Iterator[TestClient]:
    """HTTP client over an app wired to a fresh in-memory store."""
    app = create_app(settings=settings, store=memory_store)
    with TestClient(app) as test_client:
        yield test_client
