"""SQLite adapter for local key-value storage."""

from .connection import connect, default_db_path
from .storage import SqliteStorage

__all__ = ["SqliteStorage", "connect", "default_db_path"]
