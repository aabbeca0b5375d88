# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the User Management API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
#   poetry run user-management-api
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

from app import __version__
from app.config import Settings, settings as default_settings
from app.exceptions import (
    UserApiException,
    http_exception_handler,
    user_api_exception_handler,
    validation_exception_handler,
)
from app.middleware import AuthMiddleware, ErrorHandlingMiddleware, RequestLoggingMiddleware
from app.routers import health, users
from lib.user_store import InMemoryUserStore

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if default_settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Nothing to open or close: the store lives in app.state.
    """
    logger.info(f"Starting User Management API in {app.state.settings.ENVIRONMENT} mode")
    logger.info(f"Users in store: {app.state.user_store.count()}")

    yield

    logger.info("Shutting down User Management API")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application with its own user store.

    Args:
        settings: Overrides for tests; defaults to the environment settings

    Returns:
        FastAPI: A fully wired application
    """
    settings = settings or default_settings

    app = FastAPI(
        title="User Management API",
        description="""
## In-memory user management

CRUD over user records. Every `/api` request needs a bearer token
signed with the shared secret (issuer `TechHive`, audience `TechHiveUsers`).

Every response is an envelope: `{"status": <http status>, "data" | "message": ...}`.

### Quick Start

```bash
curl http://localhost:8000/api/users?page=1&pageSize=10 \\
  -H "Authorization: Bearer $TOKEN"

curl -X POST http://localhost:8000/api/users \\
  -H "Authorization: Bearer $TOKEN" \\
  -H "Content-Type: application/json" \\
  -d '{"name": "Dana", "email": "dana@x.com"}'
```
""",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Users",
                "description": "Create, read, update and delete users",
            },
            {
                "name": "Health",
                "description": "API health check",
            },
        ],
    )

    app.state.settings = settings
    app.state.user_store = (
        InMemoryUserStore.with_seed_users() if settings.SEED_USERS else InMemoryUserStore()
    )

    # =========================================================================
    # Middleware
    # =========================================================================
    # Starlette runs the last-added middleware first. Resulting order:
    # ErrorHandling -> Auth -> RequestLogging -> HTTPSRedirect -> route

    if settings.HTTPS_REDIRECT:
        app.add_middleware(HTTPSRedirectMiddleware)

    app.add_middleware(RequestLoggingMiddleware, max_body_chars=settings.LOG_BODY_MAX_CHARS)
    app.add_middleware(AuthMiddleware, settings=settings)
    app.add_middleware(ErrorHandlingMiddleware, message=settings.INTERNAL_ERROR_MESSAGE)

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(UserApiException, user_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(
        health.router,
        tags=["Health"]
    )

    app.include_router(
        users.router,
        prefix="/api/users",
        tags=["Users"]
    )

    return app


# Module-level app for uvicorn
app = create_app()


def run() -> None:
    """Start the API server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=default_settings.API_HOST,
        port=default_settings.API_PORT,
        reload=default_settings.DEBUG,
    )


if __name__ == "__main__":
    run()
