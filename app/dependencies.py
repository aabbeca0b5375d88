# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from core.services.user_service import UserService
from lib.user_store import InMemoryUserStore


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings


def get_user_store(request: Request) -> InMemoryUserStore:
    """
    Get the application's user store.

    Each application instance owns one store (created in create_app).
    """
    return request.app.state.user_store


def get_user_service(
    store: Annotated[InMemoryUserStore, Depends(get_user_store)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> UserService:
    """Build a UserService over the application's store."""
    return UserService(store, default_page_size=settings.DEFAULT_PAGE_SIZE)


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]
