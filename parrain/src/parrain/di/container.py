"""
Dependency Injection Container for Parrain.

Manages all service instances and their dependencies.
"""

from typing import Optional

from parrain.application.use_cases.get_leaderboard import GetLeaderboard
from parrain.application.use_cases.get_stats import GetStats
from parrain.application.use_cases.get_user_by_wallet import GetUserByWallet
from parrain.application.use_cases.resolve_or_create_user import (
    ResolveOrCreateUser,
)
from parrain.application.use_cases.update_user_profile import (
    UpdateUserProfile,
)
from parrain.config.settings import get_settings
from parrain.domain.repositories.i_user_store import IUserStore
from parrain.infrastructure.persistence.json_user_store import JsonUserStore


class DIContainer:
    """
    Dependency Injection Container.

    Holds the singleton user store. The store owns the writer lock, so
    every request must go through the same instance.
    """

    def __init__(self):
        """Initialize container with None instances."""
        self._user_store: Optional[IUserStore] = None

    async def initialize(self) -> None:
        """Initialize all services (creates store document if missing)."""
        await self.user_store.initialize()

    async def shutdown(self) -> None:
        """Cleanup resources."""
        # Every transaction flushes before releasing the lock
        self._user_store = None

    # Infrastructure Getters

    @property
    def user_store(self) -> IUserStore:
        """Get user store instance."""
        if self._user_store is None:
            settings = get_settings()
            self._user_store = JsonUserStore(
                path=settings.STORE_PATH,
                referral_reward=settings.REFERRAL_REWARD,
            )
        return self._user_store

    # Use Case Getters

    def get_resolve_or_create_user(self) -> ResolveOrCreateUser:
        """Get resolve-or-create user use case."""
        return ResolveOrCreateUser(user_store=self.user_store)

    def get_get_user_by_wallet(self) -> GetUserByWallet:
        """Get user-by-wallet use case."""
        return GetUserByWallet(user_store=self.user_store)

    def get_update_user_profile(self) -> UpdateUserProfile:
        """Get update user profile use case."""
        return UpdateUserProfile(user_store=self.user_store)

    def get_get_leaderboard(self) -> GetLeaderboard:
        """Get leaderboard use case."""
        return GetLeaderboard(user_store=self.user_store)

    def get_get_stats(self) -> GetStats:
        """Get stats use case."""
        return GetStats(user_store=self.user_store)


# Global container instance
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """Get global DI container instance."""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


async def initialize_container() -> DIContainer:
    """Initialize and return DI container."""
    container = get_container()
    await container.initialize()
    return container


async def shutdown_container() -> None:
    """Shutdown DI container."""
    container = get_container()
    await container.shutdown()


def reset_container() -> None:
    """Drop global container (for testing)."""
    global _container
    _container = None
