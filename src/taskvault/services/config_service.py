"""Configuration service for managing TaskVault configuration.

This module provides the ConfigService class, the single source of truth for
configuration. It handles:

- Loading and saving config.json in the per-user config directory
- Dotted-key access (``storage.backend``) for the ``config`` commands
- Resolving the effective storage settings, including the TASKVAULT_DB
  environment override
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel

from taskvault.models.config_models import AppConfig, StorageConfig

DB_ENV_VAR = "TASKVAULT_DB"


class ConfigService:
    """Service for loading, editing and saving the application configuration."""

    def __init__(self):
        """Initialize the config service."""
        self.config_dir = Path(user_config_dir("taskvault"))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir("taskvault"))

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from disk, falling back to defaults on first run."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run: defaults are not written until something is set
            self._config = AppConfig()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to disk."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        value: Any = self.config
        for k in key.split("."):
            if isinstance(value, BaseModel) and k in type(value).model_fields:
                value = getattr(value, k)
            else:
                raise KeyError(f"Unknown config key '{key}'")
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key and save.

        Raises:
            KeyError: If the key does not exist
            pydantic.ValidationError: If the value is not valid for the key
        """
        self.get(key)
        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        self._config = AppConfig.model_validate(config_dict)
        self.save_config()

    def reset(self, key: str | None = None) -> None:
        """Reset the whole configuration, or one key, to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            return

        default_value: Any = AppConfig()
        for k in key.split("."):
            default_value = getattr(default_value, k)
        if isinstance(default_value, BaseModel):
            default_value = default_value.model_dump()
        self.set(key, default_value)

    def get_storage_config(self) -> StorageConfig:
        """Effective storage settings with defaults and env override applied."""
        storage = self.config.storage
        path = os.getenv(DB_ENV_VAR) or storage.path
        if path is None:
            path = str(self.data_dir / "taskvault.db")
        return storage.model_copy(update={"path": str(Path(path).expanduser())})


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Return the process-wide config service."""
    return ConfigService()
