# =============================================================================
# app/middleware/ - Request Pipeline Stages
# =============================================================================
# Every request passes through these stages in a fixed order:
#
#   ErrorHandling -> Auth -> RequestLogging -> (HTTPS redirect) -> route
#
# Starlette runs the most recently added middleware first, so main.py
# adds them in reverse.
# =============================================================================

from app.middleware.auth import AuthMiddleware
from app.middleware.errors import ErrorHandlingMiddleware
from app.middleware.request_logging import RequestLoggingMiddleware

__all__ = [
    "AuthMiddleware",
    "ErrorHandlingMiddleware",
    "RequestLoggingMiddleware",
]
