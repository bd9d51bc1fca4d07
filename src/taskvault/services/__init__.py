"""Service layer: record stores, configuration and application wiring."""

from .account_store import AccountStore
from .app_context import AppContext
from .config_service import ConfigService, get_config_service
from .task_store import TaskStore

__all__ = [
    "AccountStore",
    "TaskStore",
    "AppContext",
    "ConfigService",
    "get_config_service",
]
