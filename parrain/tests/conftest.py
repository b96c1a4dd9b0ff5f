"""
Test fixtures and configuration.
"""

from pathlib import Path
from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio

from parrain.config.settings import Settings, reset_settings
from parrain.di.container import reset_container
from parrain.infrastructure.persistence.json_user_store import JsonUserStore
from parrain.main import create_app


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Location of a per-test JSON store document."""
    return tmp_path / "data" / "db.json"


@pytest.fixture
def user_store(store_path: Path) -> JsonUserStore:
    """Provide a fresh JSON user store."""
    return JsonUserStore(store_path)


@pytest.fixture
def test_settings(store_path: Path) -> Settings:
    """Settings pointing at the per-test store."""
    return Settings(
        ENV="test",
        STORE_PATH=str(store_path),
        LOG_LEVEL="WARNING",
    )


@pytest_asyncio.fixture(scope="function")
async def client(test_settings: Settings) -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    Provide HTTP client for API testing.

    Each test gets its own app, container and store document.
    """
    reset_container()
    app = create_app(test_settings)

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client

    reset_container()
    reset_settings()


@pytest.fixture
def test_wallet_address() -> str:
    """Provide test wallet address."""
    return "FakeWalletAddress1234567890123456789012"


@pytest.fixture
def another_wallet_address() -> str:
    """Provide another test wallet address."""
    return "AnotherWalletAddr9876543210987654321098"
