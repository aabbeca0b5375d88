# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Handles user CRUD operations and business logic.
# Separates HTTP concerns from store access and validation.
# =============================================================================

import logging
import math

from core.models.user import User, UserCreateRequest, UserPage, UserUpdateRequest
from core.validation import validate_user
from lib.user_store import InMemoryUserStore
from app.exceptions import UserNotFoundError, UserValidationError

logger = logging.getLogger(__name__)


class UserService:
    """
    Service for user management operations.

    Provides a clean interface between API routes and the store.
    Raises UserNotFoundError / UserValidationError; the API layer turns
    those into envelopes.
    """

    def __init__(self, store: InMemoryUserStore, default_page_size: int = 10):
        self.store = store
        self.default_page_size = default_page_size

    def list_users(self, page: int | None = None, page_size: int | None = None) -> UserPage:
        """
        Get one page of users, id ascending.

        Args:
            page: 1-indexed page; None or non-positive means 1
            page_size: Items per page; None or non-positive means the default

        Returns:
            UserPage with the slice and the totals
        """
        current_page = page if page is not None and page > 0 else 1
        size = page_size if page_size is not None and page_size > 0 else self.default_page_size

        users = self.store.list_all()
        total = len(users)
        start = (current_page - 1) * size

        return UserPage(
            page=current_page,
            page_size=size,
            total_items=total,
            total_pages=math.ceil(total / size),
            items=users[start:start + size],
        )

    def get_user(self, user_id: int) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If no user has this ID
        """
        user = self.store.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def create_user(self, request: UserCreateRequest) -> User:
        """
        Validate and store a new user.

        Name and email are trimmed before storing.

        Raises:
            UserValidationError: If name or email is invalid
        """
        self._validate(request.name, request.email)

        user = self.store.insert(request.name.strip(), request.email.strip())
        logger.info(f"Created user: {user.id}")
        return user

    def update_user(self, user_id: int, request: UserUpdateRequest) -> User:
        """
        Replace an existing user's name and email.

        Existence is checked before validation, so an unknown ID is a 404
        even when the body is also invalid.

        Raises:
            UserNotFoundError: If no user has this ID
            UserValidationError: If name or email is invalid
        """
        self.get_user(user_id)
        self._validate(request.name, request.email)

        updated = self.store.replace(user_id, request.name.strip(), request.email.strip())
        if updated is None:
            # Deleted between the lookup and the replace
            raise UserNotFoundError(user_id)

        logger.info(f"Updated user: {user_id}")
        return updated

    def delete_user(self, user_id: int) -> None:
        """
        Delete a user.

        Raises:
            UserNotFoundError: If no user has this ID
        """
        if not self.store.delete(user_id):
            raise UserNotFoundError(user_id)
        logger.info(f"Deleted user: {user_id}")

    @staticmethod
    def _validate(name: str | None, email: str | None) -> None:
        error = validate_user(name, email)
        if error is not None:
            logger.debug(f"Rejected user input: {error}")
            raise UserValidationError(error)
