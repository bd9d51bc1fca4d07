"""
Exit codes for TaskVault.

Semantic exit codes let scripts tell what went wrong without parsing output.
"""

from taskvault.exceptions import (
    AuthenticationError,
    ConflictError,
    PersistenceError,
    TaskVaultError,
    ValidationError,
)

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Authentication failure (not logged in, invalid credentials)
ERROR_AUTH_FAILURE = 3

# Resource not found
ERROR_NOT_FOUND = 5

# Uniqueness conflict (email already registered)
ERROR_CONFLICT = 7

# Storage backend failure
ERROR_STORAGE = 8


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_AUTH_FAILURE: "ERROR_AUTH_FAILURE",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_CONFLICT: "ERROR_CONFLICT",
        ERROR_STORAGE: "ERROR_STORAGE",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def exit_code_for(error: TaskVaultError) -> int:
    """Map a TaskVault error to its exit code."""
    if isinstance(error, ValidationError):
        return ERROR_INVALID_ARGS
    if isinstance(error, AuthenticationError):
        return ERROR_AUTH_FAILURE
    if isinstance(error, ConflictError):
        return ERROR_CONFLICT
    if isinstance(error, PersistenceError):
        return ERROR_STORAGE
    return ERROR_GENERAL
