"""
Leaderboard and stats API routes.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from parrain.application.use_cases.get_leaderboard import (
    GetLeaderboard,
    GetLeaderboardCommand,
)
from parrain.application.use_cases.get_stats import GetStats
from parrain.config.settings import get_settings
from parrain.di.dependencies import get_get_leaderboard, get_get_stats
from parrain.presentation.schemas.stats_schemas import StatsEnvelope, StatsResponse
from parrain.presentation.schemas.user_schemas import (
    LeaderboardEnvelope,
    UserResponse,
)

router = APIRouter(tags=["Referrals"])


@router.get(
    "/leaderboard",
    response_model=LeaderboardEnvelope,
    status_code=status.HTTP_200_OK,
    summary="Referral leaderboard",
    description="Top users by referral count",
)
async def get_leaderboard(
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    use_case: GetLeaderboard = Depends(get_get_leaderboard),
) -> LeaderboardEnvelope:
    """
    Get top referrers.

    Args:
        limit: Number of entries (defaults to LEADERBOARD_SIZE)
        use_case: GetLeaderboard use case (injected)

    Returns:
        Leaderboard envelope
    """
    size = limit if limit is not None else get_settings().LEADERBOARD_SIZE
    users = await use_case.execute(GetLeaderboardCommand(limit=size))
    return LeaderboardEnvelope(
        leaderboard=[UserResponse.from_entity(user) for user in users]
    )


@router.get(
    "/stats",
    response_model=StatsEnvelope,
    status_code=status.HTTP_200_OK,
    summary="Referral stats",
    description="Total users and total successful referrals",
)
async def get_stats(
    use_case: GetStats = Depends(get_get_stats),
) -> StatsEnvelope:
    """Get aggregate referral stats."""
    stats = await use_case.execute()
    return StatsEnvelope(stats=StatsResponse.from_stats(stats))
