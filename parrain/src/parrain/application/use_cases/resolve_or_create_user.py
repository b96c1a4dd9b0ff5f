"""
Resolve or create user use case.

Entry point of the signup flow: returns the user for a wallet,
registering it (and crediting its referrer) on first sight.
"""

from dataclasses import dataclass
from typing import Optional

from parrain.domain.entities.user import UserRecord
from parrain.domain.exceptions import ValidationError
from parrain.domain.repositories.i_user_store import IUserStore
from parrain.infrastructure.monitoring import get_logger, metrics

logger = get_logger(__name__)


@dataclass
class ResolveOrCreateUserCommand:
    """Command to resolve or register a wallet."""

    wallet_address: str
    referred_by: Optional[str] = None


@dataclass
class ResolveOrCreateResult:
    """Outcome of resolve-or-create."""

    user: UserRecord
    created: bool
    referrer: Optional[UserRecord] = None


class ResolveOrCreateUser:
    """
    Create-or-fetch user by wallet address.

    Business rules:
    - Existing user is touched and returned; referred_by is ignored
      (referral attribution happens once, at creation)
    - New user stores referred_by as given
    - Referrer resolved by referral code is credited once
    - Unknown referral code is kept on the new user and credits no one
    """

    def __init__(self, user_store: IUserStore):
        """
        Initialize use case with dependencies.

        Args:
            user_store: Transactional user store
        """
        self.user_store = user_store

    async def execute(self, command: ResolveOrCreateUserCommand) -> ResolveOrCreateResult:
        """
        Execute resolve-or-create.

        Args:
            command: Wallet address and optional referral code

        Returns:
            ResolveOrCreateResult with the user and what happened

        Raises:
            ValidationError: If wallet address is empty
            IdentifierGenerationError: If identifiers could not be generated
        """
        wallet_address = command.wallet_address
        if not wallet_address or not wallet_address.strip():
            raise ValidationError(field="walletAddress", reason="is required")

        referred_by = command.referred_by or None

        async with self.user_store.transaction() as registry:
            user = registry.find_by_wallet(wallet_address)
            if user is not None:
                registry.touch(user)
                logger.debug(f"User {wallet_address} touched")
                return ResolveOrCreateResult(user=user, created=False)

            user = registry.create(wallet_address, referred_by=referred_by)

            referrer = None
            if referred_by:
                referrer = registry.find_by_referral_code(referred_by)
                if referrer is not None and referrer is not user:
                    registry.credit_referral(referrer)
                else:
                    referrer = None

        metrics.users_created_total.inc()
        logger.info(
            f"User {wallet_address} registered",
            extra={"username": user.username, "referral_code": user.referral_code},
        )

        if referrer is not None:
            metrics.referrals_credited_total.inc()
            logger.info(
                f"Referral credited to {referrer.wallet_address}",
                extra={
                    "referral_code": referred_by,
                    "referral_count": referrer.referral_count,
                    "referrer_level": referrer.level,
                },
            )
        elif referred_by:
            metrics.orphaned_referrals_total.inc()
            logger.warning(
                f"Referral code {referred_by} matched no user; stored as-is",
                extra={"wallet_address": wallet_address},
            )

        return ResolveOrCreateResult(user=user, created=True, referrer=referrer)
