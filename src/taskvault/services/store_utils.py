"""Shared persistence helpers for the record stores.

Serialization goes through pydantic ``TypeAdapter`` codecs; every storage
fault is converted into ``PersistenceError`` here so both stores expose the
same error taxonomy.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from pydantic import TypeAdapter

from taskvault.exceptions import PersistenceError, ValidationError
from taskvault.repositories.storage import KeyValueStorage

T = TypeVar("T")

logger = logging.getLogger(__name__)


def require_fields(**fields: object) -> None:
    """Raise ValidationError naming every empty or absent field."""
    missing = [name for name, value in fields.items() if value is None or value == ""]
    if missing:
        raise ValidationError(f"All fields are required (missing: {', '.join(missing)})")


def load_value(
    storage: KeyValueStorage, key: str, codec: TypeAdapter[T], default: T
) -> T:
    """Read and decode one persisted entry.

    Missing or unparsable entries yield ``default``; a backend failure raises
    PersistenceError.
    """
    try:
        raw = storage.load(key)
    except Exception as e:
        logger.error("storage read failed for '%s': %s", key, e)
        raise PersistenceError(f"Failed to read '{key}' from storage: {e}") from e

    if raw is None:
        return default

    try:
        return codec.validate_json(raw)
    except ValueError as e:
        logger.warning("ignoring unparsable '%s' entry: %s", key, e)
        return default


def save_value(
    storage: KeyValueStorage, key: str, codec: TypeAdapter[T], value: T
) -> None:
    """Encode and overwrite one persisted entry."""
    data = codec.dump_json(value, by_alias=True)
    try:
        storage.save(key, data)
    except Exception as e:
        logger.error("storage write failed for '%s': %s", key, e)
        raise PersistenceError(f"Failed to save '{key}': {e}") from e


def remove_value(storage: KeyValueStorage, key: str) -> None:
    """Delete one persisted entry."""
    try:
        storage.remove(key)
    except Exception as e:
        logger.error("storage remove failed for '%s': %s", key, e)
        raise PersistenceError(f"Failed to remove '{key}': {e}") from e
