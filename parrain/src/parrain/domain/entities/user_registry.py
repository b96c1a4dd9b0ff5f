"""
User registry aggregate.

Authoritative in-memory view of one loaded store snapshot. Owns every
mutation of user records and enforces wallet, username and referral
code uniqueness.
"""

from typing import Any, Callable, Iterable, Optional

from parrain.domain.entities.user import UserRecord, utc_now
from parrain.domain.exceptions import (
    ConflictError,
    DuplicateEntityError,
    IdentifierGenerationError,
)
from parrain.domain.services.identifiers import (
    generate_referral_code,
    generate_username,
    generate_username_suffix,
)
from parrain.domain.services.referral_accounting import REFERRAL_REWARD

MAX_IDENTIFIER_ATTEMPTS = 10


class UserRegistry:
    """
    Ordered collection of user records with secondary indices.

    Indices (wallet, username, referral code) are transient: rebuilt on
    load and kept current by every mutation. Records keep insertion
    order, which the leaderboard uses to break ties.
    """

    def __init__(
        self,
        records: Optional[Iterable[UserRecord]] = None,
        referral_reward: int = REFERRAL_REWARD,
        code_generator: Callable[[], str] = generate_referral_code,
        suffix_generator: Callable[[], str] = generate_username_suffix,
    ):
        """
        Initialize registry.

        Args:
            records: Existing records in registry order
            referral_reward: Reward credited per successful referral
            code_generator: Referral code source
            suffix_generator: Username disambiguation suffix source

        Raises:
            ValueError: If records contain duplicate wallet addresses
        """
        self.referral_reward = referral_reward
        self._code_generator = code_generator
        self._suffix_generator = suffix_generator

        self._records: list[UserRecord] = []
        self._by_wallet: dict[str, UserRecord] = {}
        self._by_username: dict[str, UserRecord] = {}
        self._by_code: dict[str, UserRecord] = {}
        self._dirty = False

        for record in records or []:
            if record.wallet_address in self._by_wallet:
                raise ValueError(
                    f"Duplicate wallet address in registry: {record.wallet_address}"
                )
            self._append(record)

    # ================================================================
    # Lookups
    # ================================================================

    def find_by_wallet(self, wallet_address: str) -> Optional[UserRecord]:
        """Exact-match lookup by wallet address."""
        return self._by_wallet.get(wallet_address)

    def find_by_referral_code(self, code: str) -> Optional[UserRecord]:
        """Exact-match lookup by current referral code."""
        return self._by_code.get(code)

    def find_by_username(self, username: str) -> Optional[UserRecord]:
        """Exact-match lookup by username."""
        return self._by_username.get(username)

    def snapshot(self) -> list[UserRecord]:
        """All records in registry order."""
        return list(self._records)

    @property
    def dirty(self) -> bool:
        """True when the registry was mutated since load."""
        return self._dirty

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, wallet_address: object) -> bool:
        return wallet_address in self._by_wallet

    # ================================================================
    # Mutations
    # ================================================================

    def create(
        self,
        wallet_address: str,
        referred_by: Optional[str] = None,
    ) -> UserRecord:
        """
        Create new user record.

        Generated username and referral code are checked against the
        registry and regenerated on collision, up to
        MAX_IDENTIFIER_ATTEMPTS each.

        Args:
            wallet_address: Wallet address (primary key)
            referred_by: Raw referral code the user signed up with

        Returns:
            Created UserRecord

        Raises:
            DuplicateEntityError: If wallet already registered
            IdentifierGenerationError: If no free identifier was found
        """
        if wallet_address in self._by_wallet:
            raise DuplicateEntityError("User", f"wallet {wallet_address}")

        username = self._unique_username(wallet_address)
        referral_code = self._unique_referral_code()

        now = utc_now()
        record = UserRecord(
            wallet_address=wallet_address,
            username=username,
            referral_code=referral_code,
            referred_by=referred_by,
            joined_at=now,
            last_active=now,
        )
        self._append(record)
        self._dirty = True
        return record

    def touch(self, record: UserRecord) -> None:
        """Mark user as seen now."""
        record.last_active = utc_now()
        self._dirty = True

    def update_profile(
        self,
        record: UserRecord,
        username: Optional[str] = None,
        referral_code: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> UserRecord:
        """
        Update mutable profile fields.

        Empty username/referral_code are ignored. avatar_url is applied
        whenever it is not None, so "" clears the avatar. Every
        uniqueness check runs before any field is written.

        Args:
            record: Record to update (must belong to this registry)
            username: New username
            referral_code: New referral code
            avatar_url: New avatar URL

        Returns:
            Updated record

        Raises:
            ConflictError: If username or referral code belongs to
                another user
        """
        if username:
            holder = self._by_username.get(username)
            if holder is not None and holder is not record:
                raise ConflictError("username", "Username already taken")

        if referral_code:
            holder = self._by_code.get(referral_code)
            if holder is not None and holder is not record:
                raise ConflictError("referralCode", "Referral code already taken")

        if username and username != record.username:
            self._reindex(self._by_username, record.username, username, record)
            record.username = username

        if referral_code and referral_code != record.referral_code:
            self._reindex(self._by_code, record.referral_code, referral_code, record)
            record.referral_code = referral_code

        if avatar_url is not None:
            record.avatar_url = avatar_url

        self._dirty = True
        return record

    def credit_referral(self, referrer: UserRecord) -> UserRecord:
        """
        Credit one successful referral.

        Level follows from referral_count, so it is recomputed here
        implicitly.
        """
        referrer.referral_count += 1
        referrer.total_rewards += self.referral_reward
        self._dirty = True
        return referrer

    # ================================================================
    # Document conversion
    # ================================================================

    def to_document(self) -> dict[str, Any]:
        """Persisted layout: ordered list of user dicts."""
        return {"users": [record.to_dict() for record in self._records]}

    @classmethod
    def from_document(
        cls,
        document: dict[str, Any],
        referral_reward: int = REFERRAL_REWARD,
    ) -> "UserRegistry":
        """
        Build registry from persisted document.

        Args:
            document: {"users": [...]} document
            referral_reward: Reward credited per referral

        Returns:
            UserRegistry

        Raises:
            ValueError: If document is malformed
        """
        users = document.get("users") or []
        if not isinstance(users, list):
            raise ValueError("Document field 'users' must be a list")
        records = [UserRecord.from_dict(item) for item in users]
        return cls(records, referral_reward=referral_reward)

    # ================================================================
    # Internals
    # ================================================================

    def _append(self, record: UserRecord) -> None:
        self._records.append(record)
        self._by_wallet[record.wallet_address] = record
        # Historical documents may hold duplicates; first holder wins
        self._by_username.setdefault(record.username, record)
        self._by_code.setdefault(record.referral_code, record)

    @staticmethod
    def _reindex(
        index: dict[str, UserRecord],
        old_key: str,
        new_key: str,
        record: UserRecord,
    ) -> None:
        if index.get(old_key) is record:
            del index[old_key]
        index[new_key] = record

    def _unique_username(self, wallet_address: str) -> str:
        base = generate_username(wallet_address)
        if base not in self._by_username:
            return base

        for _ in range(MAX_IDENTIFIER_ATTEMPTS):
            candidate = f"{base}_{self._suffix_generator()}"
            if candidate not in self._by_username:
                return candidate

        raise IdentifierGenerationError("username", MAX_IDENTIFIER_ATTEMPTS)

    def _unique_referral_code(self) -> str:
        for _ in range(MAX_IDENTIFIER_ATTEMPTS):
            candidate = self._code_generator()
            if candidate not in self._by_code:
                return candidate

        raise IdentifierGenerationError("referral code", MAX_IDENTIFIER_ATTEMPTS)
