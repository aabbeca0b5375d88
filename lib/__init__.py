# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - user_store.py: In-memory, process-local user store
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.user_store import InMemoryUserStore, SEED_USERS

__all__ = [
    "InMemoryUserStore",
    "SEED_USERS",
]
