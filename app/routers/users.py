# =============================================================================
# app/routers/users.py - User CRUD Endpoints
# =============================================================================
# Every endpoint answers with an envelope whose "status" matches the HTTP
# status code:
#   {"status": 200, "data": ...}   or   {"status": 404, "message": ...}
#
# Authentication happens in AuthMiddleware, before any of these run.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Query, Path
from fastapi.responses import JSONResponse

from app.dependencies import UserServiceDep
from app.exceptions import handler_errors
from core.models.user import UserCreateRequest, UserUpdateRequest

router = APIRouter()


def data_response(status_code: int, data) -> JSONResponse:
    """Wrap a payload in a data envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"status": status_code, "data": data}
    )


# =============================================================================
# Endpoints
# =============================================================================

@router.get("")
async def list_users(
    service: UserServiceDep,
    page: Annotated[int | None, Query(description="Page number (non-positive means 1)")] = None,
    page_size: Annotated[
        int | None,
        Query(alias="pageSize", description="Items per page (non-positive means the default)")
    ] = None,
):
    """
    List users with pagination, ordered by id.

    Returns page, pageSize, totalItems, totalPages and the page's items.
    """
    with handler_errors("retrieving users"):
        user_page = service.list_users(page=page, page_size=page_size)
        return data_response(200, user_page.model_dump(by_alias=True))


@router.get("/{user_id}")
async def get_user(
    user_id: Annotated[int, Path(description="User ID")],
    service: UserServiceDep,
):
    """Get a single user. 404 if the ID is unknown."""
    with handler_errors("retrieving user"):
        user = service.get_user(user_id)
        return data_response(200, user.model_dump())


@router.post("")
async def create_user(
    request: UserCreateRequest,
    service: UserServiceDep,
):
    """
    Create a user.

    Name and email are validated, trimmed, and stored under the next id.
    Returns 201 with the new record, or 400 with the validation message.
    """
    with handler_errors("creating user"):
        user = service.create_user(request)
        return data_response(201, user.model_dump())


@router.put("/{user_id}")
async def update_user(
    user_id: Annotated[int, Path(description="User ID")],
    request: UserUpdateRequest,
    service: UserServiceDep,
):
    """
    Replace a user's name and email.

    404 if the ID is unknown, 400 if the new values are invalid.
    """
    with handler_errors("updating user"):
        user = service.update_user(user_id, request)
        return data_response(200, user.model_dump())


@router.delete("/{user_id}")
async def delete_user(
    user_id: Annotated[int, Path(description="User ID")],
    service: UserServiceDep,
):
    """
    Delete a user.

    Answers 200 with a confirmation message (not 204) so the envelope
    shape stays the same for every endpoint.
    """
    with handler_errors("deleting user"):
        service.delete_user(user_id)
        return JSONResponse(
            status_code=200,
            content={"status": 200, "message": "User deleted successfully."}
        )
