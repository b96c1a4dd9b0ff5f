"""
User store interface.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager

from parrain.domain.entities.user_registry import UserRegistry


class IUserStore(ABC):
    """
    Interface for transactional registry persistence.

    Every mutating request runs inside transaction(): the registry is
    loaded fresh under a single writer lock and flushed before the
    lock is released.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Create the backing document if it does not exist."""

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[UserRegistry]:
        """
        Open a lock-protected load-mutate-store scope.

        Yields:
            Freshly loaded UserRegistry. Flushed on normal exit when
            dirty; discarded when an exception escapes.
        """

    @abstractmethod
    async def snapshot(self) -> UserRegistry:
        """
        Load current registry for reading.

        Returns:
            UserRegistry that is never written back
        """

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check that the backing document is readable.

        Returns:
            True if healthy
        """
