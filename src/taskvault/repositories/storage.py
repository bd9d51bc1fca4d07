"""Key-value storage port for TaskVault.

Stores persist whole serialized collections under a small set of fixed keys.
This module defines the abstract interface they write through (the "Port" in
the hexagonal architecture); concrete backends live in ``taskvault.adapters``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

# Keys of the persisted layout
USERS_KEY = "users"
CURRENT_USER_KEY = "currentUser"
TASKS_KEY = "tasks"


class KeyValueStorage(ABC):
    """Abstract base class for synchronous key-value persistence.

    Values are opaque bytes; callers own serialization. Every method either
    completes or raises the backend's own exception, which the stores convert
    into ``PersistenceError``.
    """

    @abstractmethod
    def load(self, key: str) -> bytes | None:
        """Read the value stored under a key.

        Args:
            key: Entry name

        Returns:
            The stored bytes, or None if the key is absent

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError("KeyValueStorage.load() must be implemented by adapter")

    @abstractmethod
    def save(self, key: str, value: bytes) -> None:
        """Overwrite the value stored under a key.

        Args:
            key: Entry name
            value: Serialized bytes to store

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError("KeyValueStorage.save() must be implemented by adapter")

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete a key. Removing an absent key is not an error.

        Args:
            key: Entry name

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError(
            "KeyValueStorage.remove() must be implemented by adapter"
        )

    def close(self) -> None:
        """Release backend resources. No-op by default."""
