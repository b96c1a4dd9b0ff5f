"""
Level value object.

Referral tier derived from a user's referral count.
"""

from enum import Enum


class Level(str, Enum):
    """
    Referral tier.

    Values are part of the public wire format ("Legend" is capitalised).
    """

    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    DIAMOND = "diamond"
    LEGEND = "Legend"

    @classmethod
    def for_referral_count(cls, referral_count: int) -> "Level":
        """
        Resolve tier for a referral count.

        Thresholds are evaluated from highest to lowest, lower bound
        inclusive.

        Args:
            referral_count: Number of successful referrals

        Returns:
            Matching Level

        Raises:
            ValueError: If referral_count is negative
        """
        if referral_count < 0:
            raise ValueError(f"Referral count cannot be negative: {referral_count}")

        for threshold, level in LEVEL_THRESHOLDS:
            if referral_count >= threshold:
                return level
        return cls.BRONZE


# Highest threshold first
LEVEL_THRESHOLDS = (
    (100, Level.LEGEND),
    (50, Level.DIAMOND),
    (25, Level.GOLD),
    (10, Level.SILVER),
    (0, Level.BRONZE),
)


def level_for(referral_count: int) -> str:
    """Return tier label for a referral count."""
    return Level.for_referral_count(referral_count).value
