"""Tests for the application logger utility."""

from __future__ import annotations

import logging

from taskvault.services.task_store import TaskStore
from taskvault.adapters.memory import InMemoryStorage
from taskvault.utils.logger import get_logger


def test_get_logger_creates_log_file(isolated_dirs):
    logger = get_logger()

    assert (isolated_dirs / "logs" / "taskvault.log").exists()
    assert isinstance(logger, logging.Logger)
    assert logger.propagate is False


def test_get_logger_returns_singleton():
    assert get_logger() is get_logger()


def test_level_argument_is_applied():
    logger = get_logger("warning")
    assert logger.level == logging.WARNING


def test_module_loggers_write_to_app_log(isolated_dirs):
    logger = get_logger("DEBUG")

    TaskStore(InMemoryStorage()).create_task("T", "D", "2099-01-01", "u1")
    for handler in logger.handlers:
        handler.flush()

    content = (isolated_dirs / "logs" / "taskvault.log").read_text()
    assert "[taskvault.services.task_store]" in content
    assert "created task" in content


def test_passwords_are_not_logged(isolated_dirs):
    from taskvault.services.account_store import AccountStore

    logger = get_logger("DEBUG")
    accounts = AccountStore(InMemoryStorage())
    accounts.register("A", "a@b.com", "hunter22")
    accounts.login("a@b.com", "hunter22")
    for handler in logger.handlers:
        handler.flush()

    assert "hunter22" not in (isolated_dirs / "logs" / "taskvault.log").read_text()
