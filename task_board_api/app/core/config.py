"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts with an in‑memory task store and console logging when no
environment is configured.  In a deployment you should override these
via environment variables.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "TaskBoardAPI")
    api_version: str = os.getenv("API_VERSION", "v1")
    debug: bool = _env_bool("DEBUG", False)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Prefix under which the task routes are mounted.  Empty by default
    # so that tasks live at ``/tasks``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Storage engine behind the task store port: ``memory`` or ``sqlite``.
    task_store_backend: str = os.getenv("TASK_STORE_BACKEND", "memory")

    # Path to the SQLite database file, used only by the ``sqlite``
    # backend.  Relative paths are resolved against the current working
    # directory by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "tasks.db")

    # Request header carrying the correlation id.  When a request does
    # not send it, a new id is generated and echoed back.
    correlation_header: str = os.getenv("CORRELATION_HEADER", "Correlation-Id-Header")
    request_logging: bool = _env_bool("REQUEST_LOGGING", True)

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at import time, environment variables should be set
# before importing this module.
settings = Settings()
