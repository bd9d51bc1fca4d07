"""Decorators shared by TaskVault commands."""

from __future__ import annotations

import functools
import time
import traceback
from collections.abc import Callable

import typer

from taskvault.exceptions import TaskVaultError
from taskvault.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_NOT_FOUND,
    exit_code_for,
    get_exit_code_name,
)
from taskvault.utils.logger import get_logger
from taskvault.utils.task_helpers import TaskNotFoundError
from taskvault.utils.ui.formatters import format_error

from .context import get_app_context


def _require_auth(ctx: typer.Context) -> None:
    """Raise AuthenticationError unless an account is logged in."""
    get_app_context(ctx).accounts.require_current_user()


def command_wrapper(_func: Callable | None = None, *, auth_required: bool = False):
    """Wrap a command with logging, the login check and error reporting.

    TaskVault errors are shown as ``Error: <message>`` and turned into the
    matching exit code. Commands using ``auth_required`` must take a
    ``ctx: typer.Context`` parameter.
    """

    def decorator(func: Callable):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger()
            cmd = func.__name__
            start = time.monotonic()
            logger.info("command started: %s", cmd)
            try:
                if auth_required:
                    _require_auth(kwargs["ctx"])

                result = func(*args, **kwargs)

                elapsed = time.monotonic() - start
                logger.info("command completed: %s (%.3fs)", cmd, elapsed)
                return result

            except TaskVaultError as e:
                elapsed = time.monotonic() - start
                code = exit_code_for(e)
                logger.error(
                    "command failed: %s (%.3fs) [%s] - %s",
                    cmd,
                    elapsed,
                    get_exit_code_name(code),
                    e,
                )
                format_error(str(e))
                raise typer.Exit(code=code) from e

            except TaskNotFoundError as e:
                logger.error(
                    "command failed: %s [%s] - %s",
                    cmd,
                    get_exit_code_name(ERROR_NOT_FOUND),
                    e,
                )
                format_error(str(e))
                raise typer.Exit(code=ERROR_NOT_FOUND) from e

            except (typer.Exit, typer.Abort):
                raise

            except Exception as e:
                elapsed = time.monotonic() - start
                logger.error(
                    "command failed: %s (%.3fs) - %s\n%s",
                    cmd,
                    elapsed,
                    str(e),
                    traceback.format_exc(),
                )
                format_error(f"An unexpected error occurred: {str(e)}")
                raise typer.Exit(code=ERROR_GENERAL) from e

        return wrapper

    if _func is None:
        return decorator
    return decorator(_func)
