"""Configuration management for the release cache and classifier."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Logging level")
    format: str = Field(default="json", description="Log format (json or text)")
    log_dir: Path = Field(default=Path("logs"), description="Directory for log files")
    max_bytes: int = Field(default=5_242_880, description="Max size of log file in bytes")
    backup_count: int = Field(default=3, description="Number of backup log files to keep")

    def __init__(self, **data: Any) -> None:
        """Initialize with environment variable overrides."""
        data["level"] = os.environ.get("LOG_LEVEL", data.get("level", "INFO")).upper()
        data["format"] = os.environ.get("LOG_FORMAT", data.get("format", "json"))
        if log_dir := os.environ.get("LOG_DIR"):
            data["log_dir"] = Path(log_dir)
        if max_bytes := os.environ.get("LOG_MAX_BYTES"):
            data["max_bytes"] = int(max_bytes)
        if backup_count := os.environ.get("LOG_BACKUP_COUNT"):
            data["backup_count"] = int(backup_count)
        super().__init__(**data)


class CacheConfig(BaseModel):
    """Result cache configuration."""

    cache_dir: Path = Field(
        default=Path(".cache") / "addon-releases", description="Directory for cache files"
    )
    ttl_seconds: int = Field(default=86400, description="Time to live of a cache entry")
    single_flight: bool = Field(
        default=False, description="Allow at most one in-flight compute per key"
    )

    def __init__(self, **data: Any) -> None:
        """Initialize with environment variable overrides."""
        if cache_dir := os.environ.get("CACHE_DIR"):
            data["cache_dir"] = Path(cache_dir)
        if ttl := os.environ.get("CACHE_TTL_SECONDS"):
            data["ttl_seconds"] = int(ttl)
        if single_flight := os.environ.get("CACHE_SINGLE_FLIGHT"):
            data["single_flight"] = single_flight.lower() in ("true", "1", "yes")
        super().__init__(**data)


class ClassifierConfig(BaseModel):
    """Release classifier configuration."""

    policy: str = Field(default="legacy-offset", description="Name of the classification policy")

    def __init__(self, **data: Any) -> None:
        """Initialize with environment variable overrides."""
        data["policy"] = os.environ.get("CLASSIFIER_POLICY", data.get("policy", "legacy-offset"))
        super().__init__(**data)


class Settings(BaseModel):
    """Main application settings."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    classifier: ClassifierConfig = Field(default_factory=ClassifierConfig)

    def __init__(self, **data: Any) -> None:
        """Initialize settings, optionally loading from .env file."""
        if env_file := os.environ.get("ENV_FILE"):
            env_path = Path(env_file)
            if env_path.exists():
                load_dotenv(env_path, override=True)
        super().__init__(**data)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance."""
    return Settings()
