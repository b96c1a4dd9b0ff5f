"""
Domain services package.
"""

from parrain.domain.services.identifiers import (
    generate_referral_code,
    generate_username,
    generate_username_suffix,
)
from parrain.domain.services.referral_accounting import (
    DEFAULT_LEADERBOARD_SIZE,
    REFERRAL_REWARD,
    ReferralStats,
    compute_stats,
    leaderboard,
    level_for,
)

__all__ = [
    # Identifiers
    "generate_username",
    "generate_referral_code",
    "generate_username_suffix",
    # Accounting
    "REFERRAL_REWARD",
    "DEFAULT_LEADERBOARD_SIZE",
    "ReferralStats",
    "compute_stats",
    "leaderboard",
    "level_for",
]
