"""
Stats API schemas.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from parrain.domain.services.referral_accounting import ReferralStats


class StatsResponse(BaseModel):
    """Aggregate referral stats."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_users: int
    total_referrals: int

    @classmethod
    def from_stats(cls, stats: ReferralStats) -> "StatsResponse":
        """Build response from domain stats."""
        return cls(
            total_users=stats.total_users,
            total_referrals=stats.total_referrals,
        )


class StatsEnvelope(BaseModel):
    """Stats success payload."""

    success: bool = True
    stats: StatsResponse
