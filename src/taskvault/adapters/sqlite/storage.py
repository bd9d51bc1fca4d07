"""SQLite-backed key-value storage.

Each key is one row; ``save`` replaces the row and commits immediately, so a
collection write is atomic but two processes writing the same key still
resolve as last-write-wins.
"""

from __future__ import annotations

import sqlite3
from datetime import UTC, datetime
from pathlib import Path

from taskvault.adapters.sqlite.connection import connect, execute_with_retry
from taskvault.repositories.storage import KeyValueStorage


class SqliteStorage(KeyValueStorage):
    """Key-value storage adapter over a single SQLite table."""

    def __init__(
        self,
        db_path: str | Path | None = None,
        connection: sqlite3.Connection | None = None,
    ):
        """Open (or reuse) the database.

        Args:
            db_path: Database file path; None uses the data dir default
            connection: Pre-opened connection, mainly for tests
        """
        self.db_path = db_path
        self._connection = connection if connection is not None else connect(db_path)

    def load(self, key: str) -> bytes | None:
        row = execute_with_retry(
            self._connection, "SELECT value FROM kv WHERE key = ?", (key,)
        ).fetchone()
        if row is None:
            return None
        return bytes(row["value"])

    def save(self, key: str, value: bytes) -> None:
        now = datetime.now(UTC).isoformat()
        with self._connection:
            execute_with_retry(
                self._connection,
                """
                INSERT INTO kv (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (key, sqlite3.Binary(value), now),
            )

    def remove(self, key: str) -> None:
        with self._connection:
            execute_with_retry(self._connection, "DELETE FROM kv WHERE key = ?", (key,))

    def close(self) -> None:
        self._connection.close()
