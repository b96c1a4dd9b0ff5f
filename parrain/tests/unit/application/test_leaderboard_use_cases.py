"""
Unit tests for GetLeaderboard and GetStats use cases.
"""

import pytest

from parrain.application.use_cases import (
    GetLeaderboard,
    GetLeaderboardCommand,
    GetStats,
    ResolveOrCreateUser,
    ResolveOrCreateUserCommand,
)
from parrain.domain.exceptions import ValidationError


async def _seed(user_store):
    """Register A, B referred by A twice over, C referred by B."""
    use_case = ResolveOrCreateUser(user_store)
    a = (await use_case.execute(ResolveOrCreateUserCommand("WalletA00000001"))).user
    b = (
        await use_case.execute(
            ResolveOrCreateUserCommand("WalletB00000002", referred_by=a.referral_code)
        )
    ).user
    await use_case.execute(
        ResolveOrCreateUserCommand("WalletC00000003", referred_by=a.referral_code)
    )
    await use_case.execute(
        ResolveOrCreateUserCommand("WalletD00000004", referred_by=b.referral_code)
    )


class TestGetLeaderboard:
    """Tests for GetLeaderboard use case."""

    async def test_ranked_by_referral_count(self, user_store):
        """Test ordering and tie stability."""
        await _seed(user_store)

        board = await GetLeaderboard(user_store).execute(GetLeaderboardCommand())

        assert [u.wallet_address for u in board] == [
            "WalletA00000001",
            "WalletB00000002",
            "WalletC00000003",
            "WalletD00000004",
        ]
        assert [u.referral_count for u in board] == [2, 1, 0, 0]

    async def test_limit(self, user_store):
        """Test board size limit."""
        await _seed(user_store)

        board = await GetLeaderboard(user_store).execute(GetLeaderboardCommand(limit=2))

        assert len(board) == 2

    async def test_empty_store(self, user_store):
        """Test empty store yields empty board."""
        assert await GetLeaderboard(user_store).execute(GetLeaderboardCommand()) == []

    async def test_invalid_limit(self, user_store):
        """Test non-positive limit is rejected."""
        with pytest.raises(ValidationError):
            await GetLeaderboard(user_store).execute(GetLeaderboardCommand(limit=0))


class TestGetStats:
    """Tests for GetStats use case."""

    async def test_stats(self, user_store):
        """Test totals over seeded registry."""
        await _seed(user_store)

        stats = await GetStats(user_store).execute()

        assert stats.total_users == 4
        assert stats.total_referrals == 3

    async def test_stats_empty(self, user_store):
        """Test stats on empty store."""
        stats = await GetStats(user_store).execute()

        assert (stats.total_users, stats.total_referrals) == (0, 0)
