"""
Get referral stats use case.
"""

from parrain.domain.repositories.i_user_store import IUserStore
from parrain.domain.services.referral_accounting import ReferralStats, compute_stats


class GetStats:
    """Total users and total successful referrals."""

    def __init__(self, user_store: IUserStore):
        self.user_store = user_store

    async def execute(self) -> ReferralStats:
        """Aggregate stats over the current registry."""
        registry = await self.user_store.snapshot()
        return compute_stats(registry.snapshot())
