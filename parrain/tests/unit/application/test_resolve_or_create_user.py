"""
Unit tests for ResolveOrCreateUser use case.

Tests signup flow and referral crediting against a temporary store.

Usage:
    pytest parrain/tests/unit/application/test_resolve_or_create_user.py -v
"""

import asyncio

import pytest

from parrain.application.use_cases import (
    ResolveOrCreateUser,
    ResolveOrCreateUserCommand,
)
from parrain.domain.exceptions import ValidationError


@pytest.fixture
def use_case(user_store) -> ResolveOrCreateUser:
    return ResolveOrCreateUser(user_store)


class TestResolveOrCreateUser:
    """Tests for ResolveOrCreateUser use case."""

    # ================================================================
    # Creation
    # ================================================================

    async def test_create_new_user(self, use_case, user_store, test_wallet_address):
        """Test first sight of a wallet registers it."""
        result = await use_case.execute(
            ResolveOrCreateUserCommand(wallet_address=test_wallet_address)
        )

        assert result.created
        assert result.referrer is None
        assert result.user.wallet_address == test_wallet_address
        assert result.user.username == "user_56789012"
        assert result.user.level == "bronze"

        registry = await user_store.snapshot()
        assert registry.find_by_wallet(test_wallet_address) is not None

    async def test_existing_user_is_returned(self, use_case, test_wallet_address):
        """Test second call returns the same record."""
        first = await use_case.execute(
            ResolveOrCreateUserCommand(wallet_address=test_wallet_address)
        )
        second = await use_case.execute(
            ResolveOrCreateUserCommand(wallet_address=test_wallet_address)
        )

        assert not second.created
        assert second.user.referral_code == first.user.referral_code
        assert second.user.joined_at == first.user.joined_at
        assert second.user.last_active >= first.user.last_active

    async def test_empty_wallet_rejected(self, use_case):
        """Test blank wallet is a validation error."""
        with pytest.raises(ValidationError):
            await use_case.execute(ResolveOrCreateUserCommand(wallet_address="  "))

    # ================================================================
    # Referrals
    # ================================================================

    async def test_referrer_credited(
        self, use_case, user_store, test_wallet_address, another_wallet_address
    ):
        """Test signup with a valid code credits the referrer once."""
        referrer = (
            await use_case.execute(
                ResolveOrCreateUserCommand(wallet_address=test_wallet_address)
            )
        ).user

        result = await use_case.execute(
            ResolveOrCreateUserCommand(
                wallet_address=another_wallet_address,
                referred_by=referrer.referral_code,
            )
        )

        assert result.referrer is not None
        assert result.user.referred_by == referrer.referral_code

        registry = await user_store.snapshot()
        stored = registry.find_by_wallet(test_wallet_address)
        assert stored.referral_count == 1
        assert stored.total_rewards == 100

    async def test_repeat_signup_does_not_recredit(
        self, use_case, user_store, test_wallet_address, another_wallet_address
    ):
        """Test referral attribution happens only at creation."""
        referrer = (
            await use_case.execute(
                ResolveOrCreateUserCommand(wallet_address=test_wallet_address)
            )
        ).user
        command = ResolveOrCreateUserCommand(
            wallet_address=another_wallet_address,
            referred_by=referrer.referral_code,
        )

        await use_case.execute(command)
        await use_case.execute(command)

        registry = await user_store.snapshot()
        assert registry.find_by_wallet(test_wallet_address).referral_count == 1

    async def test_unknown_code_is_kept(self, use_case, user_store, test_wallet_address):
        """Test orphaned referral code is stored and credits no one."""
        result = await use_case.execute(
            ResolveOrCreateUserCommand(
                wallet_address=test_wallet_address, referred_by="NOSUCH99"
            )
        )

        assert result.created
        assert result.referrer is None
        assert result.user.referred_by == "NOSUCH99"

        stats = [u.referral_count for u in (await user_store.snapshot()).snapshot()]
        assert sum(stats) == 0

    async def test_empty_code_means_no_referrer(self, use_case, test_wallet_address):
        """Test empty referredBy is treated as absent."""
        result = await use_case.execute(
            ResolveOrCreateUserCommand(wallet_address=test_wallet_address, referred_by="")
        )

        assert result.user.referred_by is None

    async def test_concurrent_signups_credit_every_referral(
        self, use_case, user_store, test_wallet_address
    ):
        """Test parallel signups do not lose referral credits."""
        referrer = (
            await use_case.execute(
                ResolveOrCreateUserCommand(wallet_address=test_wallet_address)
            )
        ).user

        await asyncio.gather(
            *(
                use_case.execute(
                    ResolveOrCreateUserCommand(
                        wallet_address=f"ConcurrentWallet{i:08d}",
                        referred_by=referrer.referral_code,
                    )
                )
                for i in range(20)
            )
        )

        registry = await user_store.snapshot()
        stored = registry.find_by_wallet(test_wallet_address)
        assert len(registry) == 21
        assert stored.referral_count == 20
        assert stored.total_rewards == 2000
        assert stored.level == "silver"

    async def test_concurrent_same_wallet_creates_once(
        self, use_case, user_store, test_wallet_address
    ):
        """Test parallel requests for one wallet produce a single record."""
        results = await asyncio.gather(
            *(
                use_case.execute(
                    ResolveOrCreateUserCommand(wallet_address=test_wallet_address)
                )
                for _ in range(5)
            )
        )

        assert sum(result.created for result in results) == 1
        assert len(await user_store.snapshot()) == 1
