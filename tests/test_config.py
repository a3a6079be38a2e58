"""Tests for configuration management."""

import os
from pathlib import Path
from unittest.mock import patch

from addon_releases.config import (
    CacheConfig,
    ClassifierConfig,
    LoggingConfig,
    Settings,
    get_settings,
)


class TestLoggingConfig:
    """Test logging configuration."""

    def test_default_values(self):
        """Test default logging configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            config = LoggingConfig()
        assert config.level == "INFO"
        assert config.format == "json"
        assert config.log_dir == Path("logs")
        assert config.max_bytes == 5_242_880
        assert config.backup_count == 3

    def test_env_overrides(self):
        """Test environment variables override logging values."""
        env = {
            "LOG_LEVEL": "debug",
            "LOG_FORMAT": "text",
            "LOG_DIR": "/var/log/addons",
            "LOG_MAX_BYTES": "1000",
            "LOG_BACKUP_COUNT": "9",
        }
        with patch.dict(os.environ, env, clear=True):
            config = LoggingConfig()
        assert config.level == "DEBUG"
        assert config.format == "text"
        assert config.log_dir == Path("/var/log/addons")
        assert config.max_bytes == 1000
        assert config.backup_count == 9


class TestCacheConfig:
    """Test cache configuration."""

    def test_default_values(self):
        """Test default cache configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            config = CacheConfig()
        assert config.cache_dir == Path(".cache") / "addon-releases"
        assert config.ttl_seconds == 86400
        assert config.single_flight is False

    def test_custom_values(self):
        """Test explicit cache configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            config = CacheConfig(cache_dir=Path("/tmp/c"), ttl_seconds=60, single_flight=True)
        assert config.cache_dir == Path("/tmp/c")
        assert config.ttl_seconds == 60
        assert config.single_flight is True

    def test_env_overrides(self):
        """Test environment variables override cache values."""
        env = {"CACHE_DIR": "/srv/cache", "CACHE_TTL_SECONDS": "3600", "CACHE_SINGLE_FLIGHT": "yes"}
        with patch.dict(os.environ, env, clear=True):
            config = CacheConfig()
        assert config.cache_dir == Path("/srv/cache")
        assert config.ttl_seconds == 3600
        assert config.single_flight is True

    def test_single_flight_falsey_values(self):
        """Test unrecognised flags disable single flight."""
        with patch.dict(os.environ, {"CACHE_SINGLE_FLIGHT": "off"}, clear=True):
            assert CacheConfig().single_flight is False


class TestClassifierConfig:
    """Test classifier configuration."""

    def test_default_policy(self):
        with patch.dict(os.environ, {}, clear=True):
            assert ClassifierConfig().policy == "legacy-offset"

    def test_env_override(self):
        with patch.dict(os.environ, {"CLASSIFIER_POLICY": "semver"}, clear=True):
            assert ClassifierConfig().policy == "semver"


class TestSettings:
    """Test main settings."""

    def test_sections(self):
        """Test settings aggregate every section."""
        settings = Settings()
        assert isinstance(settings.logging, LoggingConfig)
        assert isinstance(settings.cache, CacheConfig)
        assert isinstance(settings.classifier, ClassifierConfig)

    def test_loads_env_file(self, tmp_path):
        """Test values are loaded from the file named by ENV_FILE."""
        env_file = tmp_path / ".env"
        env_file.write_text("# comment\nCLASSIFIER_POLICY=semver\nCACHE_TTL_SECONDS=120\n")

        with patch.dict(os.environ, {"ENV_FILE": str(env_file)}, clear=True):
            settings = Settings()

        assert settings.classifier.policy == "semver"
        assert settings.cache.ttl_seconds == 120

    def test_missing_env_file_is_ignored(self, tmp_path):
        """Test a missing ENV_FILE leaves defaults in place."""
        with patch.dict(os.environ, {"ENV_FILE": str(tmp_path / "nope.env")}, clear=True):
            settings = Settings()
        assert settings.cache.ttl_seconds == 86400

    def test_get_settings_is_cached(self):
        """Test get_settings returns a singleton."""
        assert get_settings() is get_settings()
