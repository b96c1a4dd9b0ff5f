"""
Referral accounting.

Stateless views derived from registry contents: tier, leaderboard
and aggregate stats.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence

from parrain.domain.entities.user import UserRecord
from parrain.domain.value_objects.level import level_for

REFERRAL_REWARD = 100
DEFAULT_LEADERBOARD_SIZE = 10

__all__ = [
    "DEFAULT_LEADERBOARD_SIZE",
    "REFERRAL_REWARD",
    "ReferralStats",
    "compute_stats",
    "leaderboard",
    "level_for",
]


@dataclass(frozen=True)
class ReferralStats:
    """Aggregate referral program statistics."""

    total_users: int
    total_referrals: int

    def to_dict(self) -> dict:
        """Convert to camelCase representation."""
        return {
            "totalUsers": self.total_users,
            "totalReferrals": self.total_referrals,
        }


def leaderboard(
    records: Sequence[UserRecord],
    top_n: int = DEFAULT_LEADERBOARD_SIZE,
) -> list[UserRecord]:
    """
    Rank users by referral count.

    Python's sort is stable, so users with equal counts keep their
    registry order.

    Args:
        records: Users in registry order
        top_n: Maximum number of entries

    Returns:
        Up to top_n users, highest referral_count first
    """
    if top_n <= 0:
        return []
    ranked = sorted(records, key=lambda record: record.referral_count, reverse=True)
    return ranked[:top_n]


def compute_stats(records: Iterable[UserRecord]) -> ReferralStats:
    """Count users and sum their referral counts."""
    total_users = 0
    total_referrals = 0
    for record in records:
        total_users += 1
        total_referrals += record.referral_count
    return ReferralStats(total_users=total_users, total_referrals=total_referrals)
