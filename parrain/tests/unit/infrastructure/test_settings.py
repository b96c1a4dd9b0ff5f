"""
Unit tests for Settings and configuration loading.
"""

import pytest
from pydantic import ValidationError

from parrain.config.settings import Settings, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Strip variables that would leak into Settings."""
    for key in ("ENV", "PORT", "API_PORT", "STORE_PATH", "LOG_LEVEL", "REFERRAL_REWARD"):
        monkeypatch.delenv(key, raising=False)


class TestSettings:
    """Tests for Settings model."""

    def test_defaults(self):
        """Test built-in defaults."""
        settings = Settings()

        assert settings.API_PORT == 3009
        assert settings.STORE_PATH == "data/db.json"
        assert settings.REFERRAL_REWARD == 100
        assert settings.LEADERBOARD_SIZE == 10
        assert settings.LOG_LEVEL == "INFO"

    def test_port_alias(self, monkeypatch):
        """Test PORT env var sets API_PORT."""
        monkeypatch.setenv("PORT", "4000")

        assert Settings().API_PORT == 4000

    def test_log_level_normalized(self):
        """Test log level is upper-cased."""
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_invalid_log_level(self):
        """Test unknown log level is rejected."""
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="LOUD")

    def test_invalid_reward(self):
        """Test reward must be positive."""
        with pytest.raises(ValidationError):
            Settings(REFERRAL_REWARD=0)

    def test_empty_store_path(self):
        """Test store path cannot be blank."""
        with pytest.raises(ValidationError):
            Settings(STORE_PATH="  ")

    def test_settings_are_frozen(self):
        """Test settings are immutable after load."""
        settings = Settings()

        with pytest.raises(ValidationError):
            settings.API_PORT = 5000


class TestLoadConfig:
    """Tests for YAML + env layering."""

    def test_production_yaml_overrides_default(self):
        """Test environment file wins over default.yaml."""
        settings = load_config(env="production")

        assert settings.ENV == "production"
        assert settings.STORE_PATH == "/app/data/db.json"

    def test_env_var_overrides_yaml(self, monkeypatch, tmp_path):
        """Test environment variables beat YAML values."""
        store_path = str(tmp_path / "db.json")
        monkeypatch.setenv("STORE_PATH", store_path)

        settings = load_config(env="production")

        assert settings.STORE_PATH == store_path
