"""
Get leaderboard use case.
"""

from dataclasses import dataclass

from parrain.domain.entities.user import UserRecord
from parrain.domain.exceptions import ValidationError
from parrain.domain.repositories.i_user_store import IUserStore
from parrain.domain.services.referral_accounting import (
    DEFAULT_LEADERBOARD_SIZE,
    leaderboard,
)


@dataclass
class GetLeaderboardCommand:
    """Command to get leaderboard."""

    limit: int = DEFAULT_LEADERBOARD_SIZE


class GetLeaderboard:
    """Top referrers, highest referral count first."""

    def __init__(self, user_store: IUserStore):
        self.user_store = user_store

    async def execute(self, command: GetLeaderboardCommand) -> list[UserRecord]:
        """
        Rank users by referral count.

        Args:
            command: Command with leaderboard size

        Returns:
            Up to `limit` users; ties keep registry order

        Raises:
            ValidationError: If limit is not positive
        """
        if command.limit < 1:
            raise ValidationError(field="limit", reason="must be positive")

        registry = await self.user_store.snapshot()
        return leaderboard(registry.snapshot(), top_n=command.limit)
