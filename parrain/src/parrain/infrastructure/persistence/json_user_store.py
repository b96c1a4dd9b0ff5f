"""
JSON document user store.

Persists the whole registry as a single {"users": [...]} document.
"""

import asyncio
import json
import os
import tempfile
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator

from parrain.domain.entities.user_registry import UserRegistry
from parrain.domain.exceptions import StoreError
from parrain.domain.repositories.i_user_store import IUserStore
from parrain.domain.services.referral_accounting import REFERRAL_REWARD
from parrain.infrastructure.monitoring import get_logger, log_performance, metrics

logger = get_logger(__name__)

EMPTY_DOCUMENT: dict[str, Any] = {"users": []}


class JsonUserStore(IUserStore):
    """
    File-backed implementation of the user store.

    Concurrency:
    - transaction() holds a single asyncio.Lock for the whole
      load-check-mutate-store sequence, so there is one writer at a time
    - snapshot() reads without the lock; writes replace the file
      atomically, so a reader always sees a complete document

    The lock is per process: run one worker per store file.
    """

    def __init__(self, path: str | Path, referral_reward: int = REFERRAL_REWARD):
        """
        Initialize store.

        Args:
            path: Location of the JSON document
            referral_reward: Reward credited per referral
        """
        self.path = Path(path)
        self.referral_reward = referral_reward
        self._lock = asyncio.Lock()

    async def initialize(self) -> None:
        """Create parent directory and empty document if missing."""
        async with self._lock:
            if not self.path.exists():
                await asyncio.to_thread(self._write_document, EMPTY_DOCUMENT)
                logger.info(f"Initialized empty user store at {self.path}")

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[UserRegistry]:
        """
        Lock-protected load-mutate-store scope.

        Yields:
            Freshly loaded registry. Flushed on exit if dirty; nothing is
            written when the body raises.
        """
        async with self._lock:
            registry = await self._load()
            yield registry
            if registry.dirty:
                await self._flush(registry)

    async def snapshot(self) -> UserRegistry:
        """Load registry for reading (no lock, never written back)."""
        return await self._load()

    async def health_check(self) -> bool:
        """Check that the document can be loaded."""
        try:
            await self._load()
            return True
        except StoreError as e:
            logger.error(f"User store health check failed: {e.message}")
            return False

    # ================================================================
    # Internals
    # ================================================================

    async def _load(self) -> UserRegistry:
        start = time.time()
        try:
            document = await asyncio.to_thread(self._read_document)
            registry = UserRegistry.from_document(
                document, referral_reward=self.referral_reward
            )
        except (OSError, ValueError, TypeError) as e:
            raise StoreError("load", str(e)) from e
        finally:
            metrics.store_operation_duration_seconds.labels(operation="load").observe(
                time.time() - start
            )

        metrics.store_operations_total.labels(operation="load").inc()
        log_performance(logger, "User store load", start)
        return registry

    async def _flush(self, registry: UserRegistry) -> None:
        start = time.time()
        document = registry.to_document()
        try:
            await asyncio.to_thread(self._write_document, document)
        except (OSError, TypeError) as e:
            raise StoreError("flush", str(e)) from e
        finally:
            metrics.store_operation_duration_seconds.labels(
                operation="flush"
            ).observe(time.time() - start)

        metrics.store_operations_total.labels(operation="flush").inc()
        metrics.registered_users.set(len(registry))
        logger.debug(
            "User store flushed",
            extra={"users": len(registry), "path": str(self.path)},
        )

    def _read_document(self) -> dict[str, Any]:
        if not self.path.exists():
            return {"users": []}

        with open(self.path, "r", encoding="utf-8") as f:
            content = f.read()

        if not content.strip():
            return {"users": []}

        document = json.loads(content)
        if not isinstance(document, dict):
            raise ValueError("Store document must be a JSON object")
        return document

    def _write_document(self, document: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent,
            prefix=f".{self.path.name}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
