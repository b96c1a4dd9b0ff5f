"""
User API schemas.

Wire format is camelCase; Python attributes are snake_case.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from parrain.domain.entities.user import UserRecord, format_timestamp


class CamelModel(BaseModel):
    """Base model accepting and emitting camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CreateUserRequest(CamelModel):
    """Request to create or fetch a user."""

    wallet_address: str = Field(
        ...,
        min_length=1,
        description="Wallet address (primary key)",
    )
    referred_by: Optional[str] = Field(
        default=None,
        description="Referral code of the user who referred this wallet",
    )


class UpdateUserRequest(CamelModel):
    """
    Request to update user profile.

    Omitted fields are left unchanged. Empty username/referralCode are
    ignored; an empty avatarUrl clears the avatar.
    """

    username: Optional[str] = None
    referral_code: Optional[str] = None
    avatar_url: Optional[str] = None

    def avatar_update(self) -> Optional[str]:
        """
        Avatar value to apply, or None when avatarUrl was not sent.

        An explicit null clears the avatar like "".
        """
        if "avatar_url" not in self.model_fields_set:
            return None
        return self.avatar_url or ""


class UserResponse(CamelModel):
    """User record as returned by the API."""

    wallet_address: str
    username: str
    referral_code: str
    referred_by: Optional[str] = None
    referral_count: int
    total_rewards: int
    level: str
    joined_at: str
    last_active: str
    avatar_url: str = ""

    @classmethod
    def from_entity(cls, user: UserRecord) -> "UserResponse":
        """Build response from domain entity."""
        return cls(
            wallet_address=user.wallet_address,
            username=user.username,
            referral_code=user.referral_code,
            referred_by=user.referred_by,
            referral_count=user.referral_count,
            total_rewards=user.total_rewards,
            level=user.level,
            joined_at=format_timestamp(user.joined_at),
            last_active=format_timestamp(user.last_active),
            avatar_url=user.avatar_url,
        )


class UserEnvelope(BaseModel):
    """Single-user success payload."""

    success: bool = True
    user: UserResponse


class LeaderboardEnvelope(BaseModel):
    """Leaderboard success payload."""

    success: bool = True
    leaderboard: List[UserResponse]


class ErrorResponse(BaseModel):
    """Error payload."""

    success: bool = False
    error: str
    code: str = Field(default="", description="Machine-readable error code")
