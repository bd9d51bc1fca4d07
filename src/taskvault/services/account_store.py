"""Account store - registration, login and the current session.

The store owns the full account collection and the single session pointer.
Both are loaded from storage at construction and written back synchronously
after every mutation. In-memory state only changes once the write succeeded,
so a ``PersistenceError`` leaves the store exactly as it was.
"""

from __future__ import annotations

import logging
import uuid

from pydantic import TypeAdapter

from taskvault.exceptions import AuthenticationError, ConflictError
from taskvault.models import ACCOUNT_LIST, Account
from taskvault.repositories.storage import (
    CURRENT_USER_KEY,
    USERS_KEY,
    KeyValueStorage,
)

from .store_utils import load_value, remove_value, require_fields, save_value

SESSION_CODEC: TypeAdapter[Account] = TypeAdapter(Account)

logger = logging.getLogger(__name__)


class AccountStore:
    """Store for user accounts and the active session."""

    def __init__(self, storage: KeyValueStorage):
        """Load accounts and the session from storage.

        Args:
            storage: Key-value backend shared with the task store
        """
        self.storage = storage
        self._accounts: list[Account] = load_value(storage, USERS_KEY, ACCOUNT_LIST, [])
        self._current_user: Account | None = load_value(
            storage, CURRENT_USER_KEY, SESSION_CODEC, None
        )
        logger.debug(
            "loaded %d account(s), session=%s",
            len(self._accounts),
            self._current_user.id if self._current_user else None,
        )

    @property
    def accounts(self) -> list[Account]:
        """Snapshot of all accounts in registration order."""
        return list(self._accounts)

    @property
    def current_user(self) -> Account | None:
        """The logged-in account, if any."""
        return self._current_user

    @property
    def is_authenticated(self) -> bool:
        return self._current_user is not None

    def require_current_user(self) -> Account:
        """Return the logged-in account.

        Raises:
            AuthenticationError: If nobody is logged in
        """
        if self._current_user is None:
            raise AuthenticationError("Not logged in. Use 'taskvault login' first.")
        return self._current_user

    def get_account(self, account_id: str) -> Account | None:
        return next((a for a in self._accounts if a.id == account_id), None)

    def register(self, name: str, email: str, password: str) -> Account:
        """Create a new account.

        Args:
            name: Display name
            email: Login email, must not be taken
            password: Password, stored as given

        Returns:
            The created Account

        Raises:
            ValidationError: If any argument is empty
            ConflictError: If the email is already registered
            PersistenceError: If the collection cannot be saved
        """
        require_fields(name=name, email=email, password=password)

        if any(a.email == email for a in self._accounts):
            logger.info("registration rejected, email already used")
            raise ConflictError(f"Email '{email}' is already registered")

        account = Account(id=str(uuid.uuid4()), name=name, email=email, password=password)
        accounts = [*self._accounts, account]
        save_value(self.storage, USERS_KEY, ACCOUNT_LIST, accounts)
        self._accounts = accounts

        logger.info("registered account %s", account.id)
        return account

    def login(self, email: str, password: str) -> Account:
        """Start a session for the account matching both credentials.

        Raises:
            AuthenticationError: If no account matches
            PersistenceError: If the session cannot be saved
        """
        account = next(
            (a for a in self._accounts if a.email == email and a.password == password),
            None,
        )
        if account is None:
            logger.info("login failed")
            raise AuthenticationError("Incorrect email or password")

        save_value(self.storage, CURRENT_USER_KEY, SESSION_CODEC, account)
        self._current_user = account

        logger.info("account %s logged in", account.id)
        return account

    def logout(self) -> None:
        """End the current session. Safe to call when nobody is logged in."""
        remove_value(self.storage, CURRENT_USER_KEY)
        if self._current_user is not None:
            logger.info("account %s logged out", self._current_user.id)
        self._current_user = None
