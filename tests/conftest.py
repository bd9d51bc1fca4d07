"""Shared test fixtures and configuration.

Keeps tests away from the real config, data and log directories and provides
stores backed by in-memory storage.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from taskvault.adapters.memory import InMemoryStorage
from taskvault.services.account_store import AccountStore
from taskvault.services.app_context import AppContext
from taskvault.services.task_store import TaskStore



# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


def _reset_app_logger() -> None:
    import taskvault.utils.logger as logger_mod

    app_logger = logging.getLogger("taskvault")
    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)
    app_logger.propagate = True
    app_logger.setLevel(logging.NOTSET)
    logger_mod._logger = None


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Point platformdirs lookups at tmp_path and reset cached singletons."""
    from taskvault.services.config_service import get_config_service

    monkeypatch.delenv("TASKVAULT_DB", raising=False)
    _reset_app_logger()
    get_config_service.cache_clear()

    config_dir = str(tmp_path / "config")
    data_dir = str(tmp_path / "data")
    log_dir = str(tmp_path / "logs")
    with (
        patch("taskvault.services.config_service.user_config_dir", return_value=config_dir),
        patch("taskvault.services.config_service.user_data_dir", return_value=data_dir),
        patch("taskvault.adapters.sqlite.connection.user_data_dir", return_value=data_dir),
        patch("taskvault.utils.logger.user_log_dir", return_value=log_dir),
    ):
        yield tmp_path

    get_config_service.cache_clear()
    _reset_app_logger()


# ---------------------------------------------------------------------------
# Stores
# ---------------------------------------------------------------------------


@pytest.fixture()
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture()
def accounts(storage) -> AccountStore:
    return AccountStore(storage)


@pytest.fixture()
def tasks(storage) -> TaskStore:
    return TaskStore(storage)


@pytest.fixture()
def app_context(storage) -> AppContext:
    return AppContext.from_storage(storage)


@pytest.fixture()
def logged_in(app_context):
    """An AppContext with a registered, logged-in account."""
    app_context.accounts.register("Ada", "ada@lovelace.org", "engine1")
    app_context.accounts.login("ada@lovelace.org", "engine1")
    return app_context
