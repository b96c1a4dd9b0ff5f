"""
Get user by wallet address use case.

Fetching an unknown wallet registers it (no referral attribution).
"""

from dataclasses import dataclass

from parrain.domain.entities.user import UserRecord
from parrain.domain.exceptions import ValidationError
from parrain.domain.repositories.i_user_store import IUserStore
from parrain.infrastructure.monitoring import get_logger, metrics

logger = get_logger(__name__)


@dataclass
class GetUserByWalletCommand:
    """Command to get user by wallet address."""

    wallet_address: str


class GetUserByWallet:
    """
    Use case for retrieving a user by wallet address.

    Known users are touched. Unknown wallets are auto-created with no
    referrer; this path never applies referral credit.
    """

    def __init__(self, user_store: IUserStore):
        """
        Initialize use case.

        Args:
            user_store: Transactional user store
        """
        self.user_store = user_store

    async def execute(self, command: GetUserByWalletCommand) -> UserRecord:
        """
        Get (or auto-create) user by wallet address.

        Args:
            command: Command with wallet_address

        Returns:
            UserRecord

        Raises:
            ValidationError: If wallet address is empty
        """
        if not command.wallet_address or not command.wallet_address.strip():
            raise ValidationError(field="walletAddress", reason="is required")

        async with self.user_store.transaction() as registry:
            user = registry.find_by_wallet(command.wallet_address)
            if user is not None:
                registry.touch(user)
                return user

            user = registry.create(command.wallet_address)

        metrics.users_created_total.inc()
        logger.info(
            f"User {command.wallet_address} auto-created on fetch",
            extra={"username": user.username, "referral_code": user.referral_code},
        )
        return user
