"""In-process key-value storage.

Nothing survives the process; used by tests and by the ``memory`` backend
for throwaway sessions.
"""

from __future__ import annotations

from taskvault.repositories.storage import KeyValueStorage


class InMemoryStorage(KeyValueStorage):
    """Dict-backed storage adapter."""

    def __init__(self, initial: dict[str, bytes] | None = None):
        self._data: dict[str, bytes] = dict(initial or {})

    def load(self, key: str) -> bytes | None:
        return self._data.get(key)

    def save(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)
