"""
Application use cases.
"""

from parrain.application.use_cases.get_leaderboard import (
    GetLeaderboard,
    GetLeaderboardCommand,
)
from parrain.application.use_cases.get_stats import GetStats
from parrain.application.use_cases.get_user_by_wallet import (
    GetUserByWallet,
    GetUserByWalletCommand,
)
from parrain.application.use_cases.resolve_or_create_user import (
    ResolveOrCreateResult,
    ResolveOrCreateUser,
    ResolveOrCreateUserCommand,
)
from parrain.application.use_cases.update_user_profile import (
    UpdateUserProfile,
    UpdateUserProfileCommand,
)

__all__ = [
    "ResolveOrCreateUser",
    "ResolveOrCreateUserCommand",
    "ResolveOrCreateResult",
    "GetUserByWallet",
    "GetUserByWalletCommand",
    "UpdateUserProfile",
    "UpdateUserProfileCommand",
    "GetLeaderboard",
    "GetLeaderboardCommand",
    "GetStats",
]
