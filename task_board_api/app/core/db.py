"""
SQLite database integration.

This module provides functions for resolving the database path
(``get_database_path``), obtaining a connection (``get_connection``)
and creating the tasks table (``init_db``).  It is used only by the
SQLite task store; the in‑memory store needs no database at all.

There is no migration system: ``init_db`` creates the table when it is
missing and leaves an existing table untouched.
"""

import os
import sqlite3
from pathlib import Path
from typing import Optional

from .config import settings


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the URL is an absolute path, use it directly.  Otherwise resolve
    it relative to the current working directory.  ``None`` falls back
    to ``settings.database_url``.
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    return str(Path(db_url).resolve())


def get_connection(db_path: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.  A
    busy timeout lets concurrent writers wait for the file lock instead
    of failing immediately.
    """
    conn = sqlite3.connect(db_path, timeout=30.0)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path: str) -> None:
    """Create the ``tasks`` table if it does not exist.

    ``AUTOINCREMENT`` guarantees that ids of deleted tasks are never
    handed out again for the lifetime of the database file.
    """
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = get_connection(db_path)
    try:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS tasks (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                is_complete INTEGER NOT NULL DEFAULT 0,
                priority INTEGER NOT NULL DEFAULT 0
            )
            """
        )
        conn.commit()
    finally:
        conn.close()
