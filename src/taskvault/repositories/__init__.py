"""Storage interfaces for TaskVault.

Implementations (Adapters) are in:
- taskvault.adapters.memory (in-process, used by tests)
- taskvault.adapters.sqlite (local file)
"""

from .storage import CURRENT_USER_KEY, TASKS_KEY, USERS_KEY, KeyValueStorage

__all__ = [
    "KeyValueStorage",
    "USERS_KEY",
    "CURRENT_USER_KEY",
    "TASKS_KEY",
]
