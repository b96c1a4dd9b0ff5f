"""
API request/response schemas.
"""

from parrain.presentation.schemas.stats_schemas import StatsEnvelope, StatsResponse
from parrain.presentation.schemas.user_schemas import (
    CreateUserRequest,
    ErrorResponse,
    LeaderboardEnvelope,
    UpdateUserRequest,
    UserEnvelope,
    UserResponse,
)

__all__ = [
    "CreateUserRequest",
    "UpdateUserRequest",
    "UserResponse",
    "UserEnvelope",
    "LeaderboardEnvelope",
    "StatsResponse",
    "StatsEnvelope",
    "ErrorResponse",
]
