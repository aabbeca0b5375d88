# =============================================================================
# app/middleware/request_logging.py - Request/Response Logging
# =============================================================================
# Logs one line when a request arrives and one when its response is ready:
#
#   Request: POST /api/users
#   Response: 201 {"status":201,"data":{...}}
#
# The response body is drained into a buffer so it can be logged, then
# sent to the client byte for byte.
# =============================================================================

import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "..."


def body_snippet(body: bytes, max_chars: int) -> str:
    """
    Decode a response body for the log, cut to max_chars.

    A truncated snippet ends with "...".
    """
    text = body.decode("utf-8", errors="replace")
    if len(text) > max_chars:
        return text[:max_chars] + TRUNCATION_MARKER
    return text


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method/path on entry and status/body snippet on exit."""

    def __init__(self, app: ASGIApp, max_body_chars: int = 500):
        super().__init__(app)
        self.max_body_chars = max_body_chars

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        logger.info(f"Request: {request.method} {request.url.path}")

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(f"Request failed: {request.method} {request.url.path} ({type(e).__name__})")
            raise

        buffer = bytearray()
        async for chunk in response.body_iterator:
            buffer.extend(chunk if isinstance(chunk, bytes) else chunk.encode("utf-8"))
        body = bytes(buffer)

        logger.info(f"Response: {response.status_code} {body_snippet(body, self.max_body_chars)}")

        async def replay_body():
            yield body

        # Status, raw headers and background tasks stay those of the downstream response
        response.body_iterator = replay_body()
        return response
