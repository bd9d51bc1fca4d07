"""Storage adapters for TaskVault.

This package contains the concrete implementations of ``KeyValueStorage``
and a factory that picks one from the application configuration.
"""

from __future__ import annotations

from taskvault.models.config_models import StorageConfig
from taskvault.repositories.storage import KeyValueStorage

from .memory import InMemoryStorage
from .sqlite import SqliteStorage


def create_storage(config: StorageConfig) -> KeyValueStorage:
    """Build the storage backend named by the configuration.

    Args:
        config: Storage section of the application config

    Returns:
        A ready-to-use KeyValueStorage
    """
    if config.backend == "memory":
        return InMemoryStorage()
    return SqliteStorage(db_path=config.path)


__all__ = ["InMemoryStorage", "SqliteStorage", "create_storage"]
