"""TaskVault domain models.

Pydantic models for the records the stores own and for the application
configuration.
"""

from .config_models import AppConfig, LoggingConfig, OutputConfig, StorageConfig
from .core import ACCOUNT_LIST, TASK_LIST, Account, Task

__all__ = [
    # Record models
    "Account",
    "Task",
    "ACCOUNT_LIST",
    "TASK_LIST",
    # Config models
    "AppConfig",
    "StorageConfig",
    "OutputConfig",
    "LoggingConfig",
]
