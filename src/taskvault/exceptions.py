"""Custom exceptions for TaskVault.

Stores raise these so callers can branch on the cause of a failure instead of
parsing messages.
"""


class TaskVaultError(Exception):
    """Base exception for all TaskVault errors."""


class ValidationError(TaskVaultError):
    """Raised when a required field is missing or a value fails a format check."""


class ConflictError(TaskVaultError):
    """Raised when a uniqueness constraint is violated (duplicate email)."""


class AuthenticationError(TaskVaultError):
    """Raised when credentials do not match or no account is logged in."""


class PersistenceError(TaskVaultError):
    """Raised when the storage backend fails to read or write a collection."""
