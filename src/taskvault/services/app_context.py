"""Application context wiring storage and stores together.

One ``AppContext`` is built per process and handed to the CLI commands
through Typer's context object.
"""

from __future__ import annotations

from dataclasses import dataclass

from taskvault.adapters import create_storage
from taskvault.models.config_models import AppConfig
from taskvault.repositories.storage import KeyValueStorage

from .account_store import AccountStore
from .config_service import ConfigService
from .task_store import TaskStore


@dataclass
class AppContext:
    """Explicit container for the objects a command needs."""

    config: AppConfig
    storage: KeyValueStorage
    accounts: AccountStore
    tasks: TaskStore

    @classmethod
    def from_storage(
        cls, storage: KeyValueStorage, config: AppConfig | None = None
    ) -> AppContext:
        """Build both stores over an existing storage backend."""
        return cls(
            config=config or AppConfig(),
            storage=storage,
            accounts=AccountStore(storage),
            tasks=TaskStore(storage),
        )

    @classmethod
    def from_config_service(cls, config_service: ConfigService) -> AppContext:
        """Build storage and stores from the user's configuration."""
        storage = create_storage(config_service.get_storage_config())
        return cls.from_storage(storage, config_service.config)

    def close(self) -> None:
        self.storage.close()
