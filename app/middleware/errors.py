# =============================================================================
# app/middleware/errors.py - Global Error Handler
# =============================================================================
# Outermost stage of the pipeline. Anything that escapes the auth stage,
# the logging stage, the exception handlers or a route becomes a 500 with
# a generic message. The fault detail goes to the log, never to the client.
# =============================================================================

import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from app.exceptions import envelope_response

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Last-resort conversion of unhandled exceptions into a 500 envelope."""

    def __init__(self, app: ASGIApp, message: str):
        super().__init__(app)
        self.message = message

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            logger.exception(f"Unexpected error: {e}")
            return envelope_response(500, self.message)
