"""Local account management and the current-user session.

Accounts live in the key-value store, never on a server:

- ``users``: JSON array of ``{"id", "username", "password_hash"}``
- ``user``: JSON object ``{"id", "username"}`` of whoever is signed in

`AuthStore` is a small state machine. It starts in ``LOADING``, and `load`
settles it into ``AUTHENTICATED`` or ``ANONYMOUS``. Every public operation
returns an `Outcome`; storage problems are logged and reported as
`FailureKind.FAULT` without changing the state.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any

from biaslens.domain.errors import InvalidRecordError
from biaslens.domain.models import User
from biaslens.interfaces.id_generator import IdGenerator
from biaslens.interfaces.key_value_store import KeyValueStore, StorageError
from biaslens.interfaces.password_hasher import PasswordHasher

from .outcomes import Failure, FailureKind, Outcome, Success

logger = logging.getLogger(__name__)

CURRENT_USER_KEY = "user"
USERS_KEY = "users"

USERNAME_TAKEN = "Username already exists"
INVALID_CREDENTIALS = "Invalid username or password"
STORAGE_FAULT = "Account storage is unavailable."

# Undecodable or structurally wrong persisted JSON
_DECODE_ERRORS = (ValueError, KeyError, TypeError, InvalidRecordError)


class AuthState(Enum):
    """Where the session is in its lifecycle."""

    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"


class AuthStore:
    """Registers users, signs them in and out, and remembers who is signed in.

    Args:
        storage: Where the registry and the current user are persisted.
        hasher: Turns passwords into salted hashes and verifies them.
        id_generator: Source of new user ids.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        hasher: PasswordHasher,
        id_generator: IdGenerator[str],
    ) -> None:
        self._storage = storage
        self._hasher = hasher
        self._ids = id_generator
        self._state = AuthState.LOADING
        self._current: dict[str, str] | None = None

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def current_user(self) -> dict[str, str] | None:
        """The signed-in user's ``{"id", "username"}``, or None."""
        return dict(self._current) if self._current is not None else None

    @property
    def is_authenticated(self) -> bool:
        return self._state is AuthState.AUTHENTICATED

    # --- Operations ---

    def load(self) -> Outcome[dict[str, str] | None]:
        """Restore the persisted session.

        A missing or unreadable ``user`` entry leaves the session anonymous;
        this never fails.
        """
        try:
            raw = self._storage.get_item(CURRENT_USER_KEY)
            current = None if raw is None else self._decode_current(raw)
        except (StorageError, *_DECODE_ERRORS):
            logger.exception("Failed to load the current user; continuing signed out")
            current = None

        self._set_current(current)
        logger.debug("Session loaded: %s", self._state.value)
        return Success(self.current_user)

    def register(self, username: str, password: str) -> Outcome[dict[str, str]]:
        """Create an account and sign it in."""
        username = (username or "").strip()
        if not username or not password:
            return Failure(FailureKind.VALIDATION, "Username and password are required")

        try:
            users = self._read_users()
            if any(user.username == username for user in users):
                logger.info("Registration refused: username %r is taken", username)
                return Failure(FailureKind.CONFLICT, USERNAME_TAKEN)

            user = User(
                id=self._ids.new_id(),
                username=username,
                password_hash=self._hasher.hash(password),
            )
            self._write_users([*users, user])
            self._storage.set_item(
                CURRENT_USER_KEY, json.dumps(user.to_current_user_blob())
            )
        except (StorageError, *_DECODE_ERRORS):
            logger.exception("Failed to register user %r", username)
            return Failure(FailureKind.FAULT, STORAGE_FAULT)

        self._set_current(user.to_current_user_blob())
        logger.info("Registered user %r (%s)", username, user.id)
        return Success(self.current_user)

    def login(self, username: str, password: str) -> Outcome[dict[str, str]]:
        """Sign in with existing credentials.

        Unknown usernames and wrong passwords fail the same way, and neither
        touches the current session.
        """
        username = (username or "").strip()
        try:
            users = self._read_users()
            match = next(
                (
                    user
                    for user in users
                    if user.username == username
                    and self._hasher.verify(password or "", user.password_hash)
                ),
                None,
            )
            if match is None:
                logger.info("Login failed for %r", username)
                return Failure(FailureKind.DENIED, INVALID_CREDENTIALS)

            self._storage.set_item(
                CURRENT_USER_KEY, json.dumps(match.to_current_user_blob())
            )
        except (StorageError, *_DECODE_ERRORS):
            logger.exception("Failed to log in user %r", username)
            return Failure(FailureKind.FAULT, STORAGE_FAULT)

        self._set_current(match.to_current_user_blob())
        logger.info("Logged in user %r", username)
        return Success(self.current_user)

    def logout(self) -> Outcome[None]:
        """Forget the signed-in user."""
        try:
            self._storage.remove_item(CURRENT_USER_KEY)
        except StorageError:
            logger.exception("Failed to clear the current user")
            return Failure(FailureKind.FAULT, STORAGE_FAULT)

        self._set_current(None)
        logger.info("Logged out")
        return Success(None)

    # --- Internal Helpers ---

    def _set_current(self, current: dict[str, str] | None) -> None:
        self._current = current
        self._state = (
            AuthState.AUTHENTICATED if current is not None else AuthState.ANONYMOUS
        )

    @staticmethod
    def _decode_current(raw: str) -> dict[str, str]:
        data: Any = json.loads(raw)
        return {"id": str(data["id"]), "username": str(data["username"])}

    def _read_users(self) -> list[User]:
        raw = self._storage.get_item(USERS_KEY)
        if raw is None:
            return []
        entries: Any = json.loads(raw)
        if not isinstance(entries, list):
            raise TypeError("user registry must be a JSON array")
        return [
            User(
                id=str(entry["id"]),
                username=entry["username"],
                password_hash=entry["password_hash"],
            )
            for entry in entries
        ]

    def _write_users(self, users: list[User]) -> None:
        payload = [
            {"id": u.id, "username": u.username, "password_hash": u.password_hash}
            for u in users
        ]
        self._storage.set_item(USERS_KEY, json.dumps(payload))
