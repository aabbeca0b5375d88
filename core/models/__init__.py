# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: User record, request bodies and the paginated listing
#
# These models define the "contract" between API and clients.
# =============================================================================

from .user import (
    User,
    UserCreateRequest,
    UserPage,
    UserUpdateRequest,
)

__all__ = [
    "User",
    "UserCreateRequest",
    "UserPage",
    "UserUpdateRequest",
]
