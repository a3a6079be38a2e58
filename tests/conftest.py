"""Shared fixtures."""

from datetime import UTC, datetime, timedelta

import pytest

from addon_releases.config import get_settings
from addon_releases.errors.logger import get_logger

ENV_VARS = (
    "ENV_FILE",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_MAX_BYTES",
    "LOG_BACKUP_COUNT",
    "CACHE_TTL_SECONDS",
    "CACHE_SINGLE_FLIGHT",
    "CLASSIFIER_POLICY",
)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point logs and cache at a temp directory and reset cached singletons."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("CACHE_DIR", str(tmp_path / "cache"))

    get_settings.cache_clear()
    get_logger.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()


class FakeClock:
    """Controllable time source for freshness tests."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 6, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()
