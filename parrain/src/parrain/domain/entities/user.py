"""
User entity - Domain model for referral program members.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from parrain.domain.value_objects.level import level_for


def utc_now() -> datetime:
    """Current UTC time truncated to milliseconds."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def format_timestamp(value: datetime) -> str:
    """Format datetime as ISO-8601 UTC with milliseconds and Z suffix."""
    return (
        value.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def parse_timestamp(value: str) -> datetime:
    """
    Parse ISO-8601 timestamp (accepts Z suffix).

    Raises:
        ValueError: If value is not an ISO-8601 string
    """
    if not isinstance(value, str):
        raise ValueError(f"Timestamp must be an ISO-8601 string, got {value!r}")

    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass
class UserRecord:
    """
    User entity - one record per wallet address.

    Wallet address, referrer and join date never change after creation.
    Referral counters are only moved by the registry's credit operation;
    level is always derived from referral_count.
    """

    wallet_address: str
    username: str
    referral_code: str
    referred_by: Optional[str] = None
    referral_count: int = 0
    total_rewards: int = 0
    joined_at: datetime = field(default_factory=utc_now)
    last_active: datetime = field(default_factory=utc_now)
    avatar_url: str = ""

    def __post_init__(self):
        """Validate user data after initialization."""
        if not self.wallet_address:
            raise ValueError("Wallet address is required")

        if self.referral_count < 0:
            raise ValueError(
                f"Referral count cannot be negative: {self.referral_count}"
            )

        if self.total_rewards < 0:
            raise ValueError(f"Total rewards cannot be negative: {self.total_rewards}")

    @property
    def level(self) -> str:
        """Tier label derived from referral_count."""
        return level_for(self.referral_count)

    def to_dict(self) -> dict[str, Any]:
        """Convert entity to its camelCase document representation."""
        return {
            "walletAddress": self.wallet_address,
            "username": self.username,
            "referralCode": self.referral_code,
            "referredBy": self.referred_by,
            "referralCount": self.referral_count,
            "totalRewards": self.total_rewards,
            "level": self.level,
            "joinedAt": format_timestamp(self.joined_at),
            "lastActive": format_timestamp(self.last_active),
            "avatarUrl": self.avatar_url,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserRecord":
        """
        Rebuild entity from its document representation.

        The stored "level" is ignored; it is recomputed from referralCount.

        Args:
            data: Document dict as produced by to_dict()

        Returns:
            UserRecord instance

        Raises:
            ValueError: If required fields are missing or invalid
        """
        try:
            return cls(
                wallet_address=data["walletAddress"],
                username=data["username"],
                referral_code=data["referralCode"],
                referred_by=data.get("referredBy"),
                referral_count=int(data.get("referralCount", 0)),
                total_rewards=int(data.get("totalRewards", 0)),
                joined_at=parse_timestamp(data["joinedAt"]),
                last_active=parse_timestamp(data["lastActive"]),
                avatar_url=data.get("avatarUrl") or "",
            )
        except KeyError as e:
            raise ValueError(f"Missing user field: {e.args[0]}") from e
