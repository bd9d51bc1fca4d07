"""Database connection management for the SQLite key-value file.

Opens a connection configured for TaskVault usage: WAL mode, owner-only file
permissions, automatic directory creation and the key-value schema applied.
"""

from __future__ import annotations

import os
import sqlite3
import time
from pathlib import Path

from platformdirs import user_data_dir

DEFAULT_DB_NAME = "taskvault.db"

CREATE_KV_TABLE = """
CREATE TABLE IF NOT EXISTS kv (
    key         TEXT PRIMARY KEY,
    value       BLOB NOT NULL,
    updated_at  TEXT NOT NULL
)
"""


def default_db_path() -> Path:
    """Default database location inside the per-user data directory."""
    return Path(user_data_dir("taskvault")) / DEFAULT_DB_NAME


def connect(db_path: str | Path | None = None) -> sqlite3.Connection:
    """Open a connection to the key-value database.

    Args:
        db_path: Path to database file. If None, uses default location.
            ``":memory:"`` opens a private in-memory database.

    Returns:
        sqlite3.Connection with the schema applied
    """
    if db_path == ":memory:":
        connection = sqlite3.connect(":memory:")
    else:
        db_path = default_db_path() if db_path is None else Path(db_path)
        db_path.parent.mkdir(parents=True, exist_ok=True)

        is_new_database = not db_path.exists()

        connection = sqlite3.connect(
            str(db_path),
            timeout=30.0,  # Wait up to 30s for locks held by another process
        )
        connection.execute("PRAGMA journal_mode = WAL")

        # Owner read/write only: passwords are stored verbatim
        if is_new_database:
            os.chmod(db_path, 0o600)

    connection.row_factory = sqlite3.Row
    connection.execute(CREATE_KV_TABLE)
    connection.commit()
    return connection


def execute_with_retry(
    connection: sqlite3.Connection,
    sql: str,
    params: tuple | dict | None = None,
    max_retries: int = 3,
) -> sqlite3.Cursor:
    """Execute SQL with retry logic for database locked errors.

    Args:
        connection: Database connection
        sql: SQL statement to execute
        params: Parameters for SQL statement
        max_retries: Maximum number of retry attempts

    Returns:
        Cursor after successful execution

    Raises:
        sqlite3.OperationalError: If database remains locked after retries
    """
    for attempt in range(max_retries):
        try:
            if params:
                return connection.execute(sql, params)
            return connection.execute(sql)
        except sqlite3.OperationalError as e:
            if "database is locked" in str(e) and attempt < max_retries - 1:
                # Exponential backoff: 0.1s, 0.2s, 0.4s
                time.sleep(0.1 * (2**attempt))
                continue
            raise

    raise sqlite3.OperationalError("Max retries exceeded")
