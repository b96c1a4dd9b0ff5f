"""
Dependency Injection module for Parrain.

Provides container and dependency functions for FastAPI routes.
"""

from parrain.di.container import (
    DIContainer,
    get_container,
    initialize_container,
    reset_container,
    shutdown_container,
)
from parrain.di.dependencies import (
    get_get_leaderboard,
    get_get_stats,
    get_get_user_by_wallet,
    get_resolve_or_create_user,
    get_update_user_profile,
    get_user_store,
)

__all__ = [
    # Container
    "DIContainer",
    "get_container",
    "initialize_container",
    "shutdown_container",
    "reset_container",
    # Dependencies
    "get_user_store",
    "get_resolve_or_create_user",
    "get_get_user_by_wallet",
    "get_update_user_profile",
    "get_get_leaderboard",
    "get_get_stats",
]
