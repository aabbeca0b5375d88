# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - User: A stored user record
# - UserCreateRequest / UserUpdateRequest: Inputs for create and update
# - UserPage: One page of the user listing
#
# Request fields are optional on purpose: a missing name or email is
# reported by validate_user() with a 400, not by pydantic with a 422.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    A user record owned by the in-memory store.

    Records are immutable. An update replaces the whole record while
    keeping its id.

    Example:
        {"id": 1, "name": "Alice Johnson", "email": "alice@techhive.com"}
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1, description="Store-assigned identifier")
    name: str = Field(..., description="Display name (trimmed)")
    email: str = Field(..., description="Email address (trimmed)")


class UserCreateRequest(BaseModel):
    """Body of POST /api/users."""

    name: str | None = Field(default=None, examples=["Dana"])
    email: str | None = Field(default=None, examples=["dana@x.com"])


class UserUpdateRequest(BaseModel):
    """Body of PUT /api/users/{id}."""

    name: str | None = Field(default=None, examples=["Dana Scully"])
    email: str | None = Field(default=None, examples=["dana@fbi.gov"])


class UserPage(BaseModel):
    """
    One page of users, id ascending.

    Serialized with camelCase keys (pageSize, totalItems, totalPages)
    so use model_dump(by_alias=True) when rendering.

    Example:
        {
            "page": 1,
            "pageSize": 10,
            "totalItems": 3,
            "totalPages": 1,
            "items": [...]
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    page: int = Field(..., ge=1, description="Current page number (1-indexed)")
    page_size: int = Field(..., ge=1, alias="pageSize", description="Items per page")
    total_items: int = Field(..., ge=0, alias="totalItems", description="Users in the store")
    total_pages: int = Field(..., ge=0, alias="totalPages", description="ceil(totalItems / pageSize)")
    items: list[User] = Field(default_factory=list, description="Users on this page")
