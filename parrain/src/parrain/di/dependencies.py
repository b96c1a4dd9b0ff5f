"""
FastAPI dependency injection.

Provides dependencies for FastAPI routes using the DI container.
"""

from parrain.application.use_cases.get_leaderboard import GetLeaderboard
from parrain.application.use_cases.get_stats import GetStats
from parrain.application.use_cases.get_user_by_wallet import GetUserByWallet
from parrain.application.use_cases.resolve_or_create_user import (
    ResolveOrCreateUser,
)
from parrain.application.use_cases.update_user_profile import (
    UpdateUserProfile,
)
from parrain.di.container import get_container
from parrain.domain.repositories.i_user_store import IUserStore

# ================================================================
# Infrastructure Dependencies
# ================================================================


def get_user_store() -> IUserStore:
    """Get user store dependency."""
    return get_container().user_store


# ================================================================
# Use Case Dependencies
# ================================================================


def get_resolve_or_create_user() -> ResolveOrCreateUser:
    """Get ResolveOrCreateUser use case dependency."""
    return get_container().get_resolve_or_create_user()


def get_get_user_by_wallet() -> GetUserByWallet:
    """Get GetUserByWallet use case dependency."""
    return get_container().get_get_user_by_wallet()


def get_update_user_profile() -> UpdateUserProfile:
    """Get UpdateUserProfile use case dependency."""
    return get_container().get_update_user_profile()


def get_get_leaderboard() -> GetLeaderboard:
    """Get GetLeaderboard use case dependency."""
    return get_container().get_get_leaderboard()


def get_get_stats() -> GetStats:
    """Get GetStats use case dependency."""
    return get_container().get_get_stats()
