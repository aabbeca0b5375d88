# =============================================================================
# app/exceptions.py - Custom Exceptions and Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error leaves the API as an envelope: {"status": <code>, "message": ...}
# =============================================================================

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class UserApiException(Exception):
    """
    Base exception for the User Management API.

    All custom exceptions inherit from this class.
    The status code is mirrored in the envelope and in the HTTP response.
    """

    def __init__(
        self,
        message: str,
        code: str = "USER_API_ERROR",
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to an API envelope."""
        return {
            "status": self.status_code,
            "message": self.message,
        }


# =============================================================================
# User Exceptions
# =============================================================================

class UserNotFoundError(UserApiException):
    """Raised when a user ID doesn't exist."""

    def __init__(self, user_id: int):
        super().__init__(
            message=f"User with Id {user_id} not found.",
            code="USER_NOT_FOUND",
            status_code=404
        )


class UserValidationError(UserApiException):
    """Raised when a name/email pair fails validation."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=400,
        )


class UnexpectedUserError(UserApiException):
    """
    Raised by route handlers for faults they did not anticipate.

    Unlike the global error middleware, the message carries the
    underlying detail.
    """

    def __init__(self, action: str, error: Exception):
        super().__init__(
            message=f"Error {action}: {error}",
            code="INTERNAL_ERROR",
            status_code=500
        )


@contextmanager
def handler_errors(action: str) -> Iterator[None]:
    """
    Handler-local safety net.

    API exceptions pass through untouched; anything else becomes an
    UnexpectedUserError naming the action.

    Usage:
        with handler_errors("creating user"):
            user = service.create_user(body)
    """
    try:
        yield
    except UserApiException:
        raise
    except Exception as e:
        logger.error(f"Error {action}: {e}")
        raise UnexpectedUserError(action, e) from e


# =============================================================================
# Exception Handlers
# =============================================================================

def envelope_response(status_code: int, message: str) -> JSONResponse:
    """Build a message envelope whose status mirrors the HTTP status."""
    return JSONResponse(
        status_code=status_code,
        content={"status": status_code, "message": message}
    )


async def user_api_exception_handler(
    request: Request,
    exc: UserApiException
) -> JSONResponse:
    """Convert UserApiException to a JSON envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request parsing errors (bad path id, bad query, malformed body).

    Reported as 400 so every client error shares one status code.
    """
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in exc.errors()
    )
    return envelope_response(400, f"Invalid request: {problems}")


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap framework HTTP errors (unknown route, wrong method) in an envelope."""
    response = envelope_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response
