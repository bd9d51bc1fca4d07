"""Unit tests for AccountStore."""

from __future__ import annotations

import json

import pytest

from fakes import FailingStorage
from taskvault.adapters.memory import InMemoryStorage
from taskvault.exceptions import (
    AuthenticationError,
    ConflictError,
    PersistenceError,
    ValidationError,
)
from taskvault.services.account_store import AccountStore


class TestRegister:
    def test_returns_account_with_fields(self, accounts):
        account = accounts.register("Ada", "ada@lovelace.org", "engine1")

        assert account.name == "Ada"
        assert account.email == "ada@lovelace.org"
        assert account.password == "engine1"
        assert account.id

    def test_ids_are_unique(self, accounts):
        ids = {
            accounts.register(f"User {i}", f"user{i}@x.com", "secret1").id
            for i in range(50)
        }
        assert len(ids) == 50

    def test_duplicate_email_conflicts(self, accounts):
        accounts.register("A", "dup@x.com", "secret1")
        with pytest.raises(ConflictError):
            accounts.register("B", "dup@x.com", "secret2")
        assert len(accounts.accounts) == 1

    def test_email_match_is_case_sensitive(self, accounts):
        accounts.register("A", "dup@x.com", "secret1")
        accounts.register("B", "DUP@x.com", "secret2")
        assert len(accounts.accounts) == 2

    @pytest.mark.parametrize(
        "name,email,password",
        [
            ("", "a@b.com", "pw"),
            ("A", "", "pw"),
            ("A", "a@b.com", ""),
            (None, "a@b.com", "pw"),
        ],
    )
    def test_missing_field_is_validation_error(self, accounts, storage, name, email, password):
        with pytest.raises(ValidationError):
            accounts.register(name, email, password)
        assert storage.load("users") is None

    def test_whitespace_values_are_not_missing(self, accounts):
        account = accounts.register("A", "a@b.com", "      ")

        assert account.password == "      "
        assert accounts.login("a@b.com", "      ") == account

    def test_whitespace_name_is_kept_verbatim(self, accounts):
        account = accounts.register(" ", "b@b.com", "secret1")
        assert account.name == " "

    def test_persists_whole_collection(self, accounts, storage):
        accounts.register("A", "a@x.com", "secret1")
        accounts.register("B", "b@x.com", "secret2")

        users = json.loads(storage.load("users"))
        assert [u["email"] for u in users] == ["a@x.com", "b@x.com"]
        assert set(users[0]) == {"id", "name", "email", "password"}

    def test_write_failure_raises_persistence_error_and_rolls_back(self):
        storage = FailingStorage()
        accounts = AccountStore(storage)
        storage.fail_writes = True

        with pytest.raises(PersistenceError) as exc_info:
            accounts.register("A", "a@x.com", "secret1")

        assert isinstance(exc_info.value.__cause__, OSError)
        assert accounts.accounts == []

        # The same email can be registered once storage recovers
        storage.fail_writes = False
        accounts.register("A", "a@x.com", "secret1")
        assert len(accounts.accounts) == 1


class TestLogin:
    def test_wrong_password_fails(self, accounts):
        accounts.register("A", "a@b.com", "pw123")
        with pytest.raises(AuthenticationError):
            accounts.login("a@b.com", "wrong")
        assert accounts.current_user is None

    def test_unknown_email_fails(self, accounts):
        with pytest.raises(AuthenticationError):
            accounts.login("nobody@b.com", "pw123")

    def test_success_sets_session(self, accounts, storage):
        account = accounts.register("A", "a@b.com", "pw123")

        result = accounts.login("a@b.com", "pw123")

        assert result == account
        assert accounts.current_user == account
        assert accounts.is_authenticated is True
        assert json.loads(storage.load("currentUser"))["id"] == account.id

    def test_login_replaces_previous_session(self, accounts):
        accounts.register("A", "a@b.com", "pw123")
        second = accounts.register("B", "b@b.com", "pw456")
        accounts.login("a@b.com", "pw123")

        accounts.login("b@b.com", "pw456")

        assert accounts.current_user == second

    def test_session_write_failure_keeps_previous_session(self):
        storage = FailingStorage()
        accounts = AccountStore(storage)
        first = accounts.register("A", "a@b.com", "pw123")
        accounts.register("B", "b@b.com", "pw456")
        accounts.login("a@b.com", "pw123")
        storage.fail_writes = True

        with pytest.raises(PersistenceError):
            accounts.login("b@b.com", "pw456")

        assert accounts.current_user == first


class TestLogout:
    def test_logout_clears_session(self, accounts, storage):
        accounts.register("A", "a@b.com", "pw123")
        accounts.login("a@b.com", "pw123")

        accounts.logout()

        assert accounts.current_user is None
        assert storage.load("currentUser") is None

    def test_logout_is_idempotent(self, accounts):
        accounts.logout()
        accounts.logout()
        assert accounts.current_user is None

    def test_require_current_user(self, accounts):
        with pytest.raises(AuthenticationError):
            accounts.require_current_user()

        account = accounts.register("A", "a@b.com", "pw123")
        accounts.login("a@b.com", "pw123")
        assert accounts.require_current_user() == account


class TestReload:
    def test_state_survives_reconstruction(self, storage):
        first = AccountStore(storage)
        account = first.register("A", "a@b.com", "pw123")
        first.login("a@b.com", "pw123")

        second = AccountStore(storage)

        assert second.accounts == [account]
        assert second.current_user == account
        assert second.get_account(account.id) == account
        assert second.get_account("missing") is None

    def test_unparsable_entries_default_to_empty(self):
        storage = InMemoryStorage({"users": b"{not json", "currentUser": b"[]"})

        accounts = AccountStore(storage)

        assert accounts.accounts == []
        assert accounts.current_user is None

    def test_read_failure_raises_persistence_error(self):
        storage = FailingStorage()
        storage.fail_reads = True
        with pytest.raises(PersistenceError):
            AccountStore(storage)
