# =============================================================================
# app/middleware/auth.py - Bearer Token Middleware
# =============================================================================
# Rejects any request without a valid bearer token before it reaches the
# logging stage or a route handler.
#
#   no header / not "Bearer ..."  -> 401
#   bad signature, iss, aud, exp  -> 401
#   valid                         -> request.state.token, call next stage
# =============================================================================

import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from app.auth.tokens import TokenValidationError, extract_bearer_token, verify_token
from app.config import Settings
from app.exceptions import envelope_response

logger = logging.getLogger(__name__)


class AuthMiddleware(BaseHTTPMiddleware):
    """Verify the Authorization header on every non-public request."""

    def __init__(self, app: ASGIApp, settings: Settings):
        super().__init__(app)
        self.settings = settings
        self.public_paths = set(settings.auth_public_paths_list)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in self.public_paths:
            return await call_next(request)

        try:
            token = extract_bearer_token(request.headers.get("Authorization"))
            payload = verify_token(token, self.settings)
        except TokenValidationError as e:
            logger.info(f"Rejected {request.method} {request.url.path}: {e.message}")
            response = envelope_response(401, e.message)
            response.headers["WWW-Authenticate"] = "Bearer"
            return response

        # Verified claims for downstream handlers
        request.state.token = payload
        logger.debug(f"Authenticated subject: {payload.sub}")
        return await call_next(request)
