"""
Update user profile use case.

Handles username, referral code and avatar updates.
"""

from dataclasses import dataclass
from typing import Optional

from parrain.domain.entities.user import UserRecord
from parrain.domain.exceptions import ConflictError, EntityNotFoundError
from parrain.domain.repositories.i_user_store import IUserStore
from parrain.infrastructure.monitoring import get_logger, metrics

logger = get_logger(__name__)


@dataclass
class UpdateUserProfileCommand:
    """
    Command to update user profile.

    None means "not provided". avatar_url="" clears the avatar.
    """

    wallet_address: str
    username: Optional[str] = None
    referral_code: Optional[str] = None
    avatar_url: Optional[str] = None


class UpdateUserProfile:
    """
    Use case for updating user profile.

    All uniqueness checks run before any write; a single conflict
    rejects the whole update.
    """

    def __init__(self, user_store: IUserStore):
        """
        Initialize use case.

        Args:
            user_store: Transactional user store
        """
        self.user_store = user_store

    async def execute(self, command: UpdateUserProfileCommand) -> UserRecord:
        """
        Update user profile.

        Args:
            command: Command with updated fields

        Returns:
            Updated UserRecord

        Raises:
            EntityNotFoundError: If user not found
            ConflictError: If username or referral code is taken
        """
        async with self.user_store.transaction() as registry:
            user = registry.find_by_wallet(command.wallet_address)
            if user is None:
                raise EntityNotFoundError("User", command.wallet_address)

            try:
                registry.update_profile(
                    user,
                    username=command.username,
                    referral_code=command.referral_code,
                    avatar_url=command.avatar_url,
                )
            except ConflictError as e:
                metrics.profile_conflicts_total.labels(field=e.field).inc()
                logger.info(
                    f"Profile update rejected for {command.wallet_address}: "
                    f"{e.message}"
                )
                raise

        logger.info(
            f"Profile updated for {command.wallet_address}",
            extra={"username": user.username, "referral_code": user.referral_code},
        )
        return user
