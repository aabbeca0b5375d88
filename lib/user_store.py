# =============================================================================
# lib/user_store.py - In-Memory User Store
# =============================================================================
# This module holds the user records for the lifetime of the process.
# Nothing is persisted: a restart brings back the seed users only.
#
# The mutation surface is limited to insert / replace / delete.
# Every call takes the store lock, so each call is atomic on its own.
#
# Usage:
#   from lib.user_store import InMemoryUserStore
#   store = InMemoryUserStore.with_seed_users()
#   user = store.insert("Dana", "dana@x.com")
# =============================================================================

from __future__ import annotations

import logging
import threading

from core.models.user import User

# Set up logging for this module
logger = logging.getLogger(__name__)


# Demo records the API starts with (ids 1-3)
SEED_USERS: list[tuple[str, str]] = [
    ("Alice Johnson", "alice@techhive.com"),
    ("Bob Smith", "bob@techhive.com"),
    ("Charlie Davis", "charlie@techhive.com"),
]


class InMemoryUserStore:
    """
    Ordered collection of User records.

    Ids are assigned by the store: the next id is one more than the
    highest id ever assigned, which is max(existing id) + 1 unless the
    highest user was deleted. Ids are never reused. Records are kept in
    insertion order, which is also id order.

    Example:
        store = InMemoryUserStore()
        alice = store.insert("Alice", "alice@x.com")   # id 1
        store.replace(alice.id, "Alice B.", "ab@x.com")
        store.delete(alice.id)                         # True
    """

    def __init__(self) -> None:
        self._users: list[User] = []
        self._last_id = 0
        self._lock = threading.Lock()

    @classmethod
    def with_seed_users(cls) -> InMemoryUserStore:
        """Create a store pre-populated with the demo users."""
        store = cls()
        for name, email in SEED_USERS:
            store.insert(name, email)
        logger.info(f"Seeded user store with {len(SEED_USERS)} users")
        return store

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def list_all(self) -> list[User]:
        """Return a snapshot of every user, id ascending."""
        with self._lock:
            return sorted(self._users, key=lambda user: user.id)

    def find_by_id(self, user_id: int) -> User | None:
        """Return the user with this id, or None."""
        with self._lock:
            return self._find(user_id)

    def count(self) -> int:
        """Return the number of stored users."""
        with self._lock:
            return len(self._users)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def insert(self, name: str, email: str) -> User:
        """
        Append a new user with the next id.

        Args:
            name: Already validated and trimmed name
            email: Already validated and trimmed email

        Returns:
            The stored User, including its assigned id
        """
        with self._lock:
            highest = max((user.id for user in self._users), default=0)
            next_id = max(highest, self._last_id) + 1
            user = User(id=next_id, name=name, email=email)
            self._users.append(user)
            self._last_id = next_id

        logger.debug(f"Inserted user {user.id}")
        return user

    def replace(self, user_id: int, name: str, email: str) -> User | None:
        """
        Replace the record with this id in place (same position, same id).

        Returns:
            The new User, or None if no user has this id
        """
        with self._lock:
            for index, existing in enumerate(self._users):
                if existing.id == user_id:
                    updated = User(id=user_id, name=name, email=email)
                    self._users[index] = updated
                    logger.debug(f"Replaced user {user_id}")
                    return updated
        return None

    def delete(self, user_id: int) -> bool:
        """
        Remove the first user with this id.

        Returns:
            True if a user was removed, False if none matched
        """
        with self._lock:
            user = self._find(user_id)
            if user is None:
                return False
            self._users.remove(user)

        logger.debug(f"Deleted user {user_id}")
        return True

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    def _find(self, user_id: int) -> User | None:
        # Caller must hold the lock
        for user in self._users:
            if user.id == user_id:
                return user
        return None
