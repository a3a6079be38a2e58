"""Data models for addons and their releases."""

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from addon_releases.utils import parse_date


class ReleaseType(str, Enum):
    """Bump category of a release relative to its neighbour."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


class Addon(BaseModel):
    """An addon whose releases are published from a git repository."""

    key: str = Field(description="Unique addon key, used to scope its cache entry")
    name: str = Field(default="", description="Display name")
    repo_owner: str = Field(description="Owner of the source repository")
    repo_name: str = Field(description="Name of the source repository")

    @property
    def repository(self) -> str:
        return f"{self.repo_owner}/{self.repo_name}"


class GitRelease(BaseModel):
    """A raw release as returned by a release fetcher."""

    name: str
    published_at: datetime

    @field_validator("published_at")
    @classmethod
    def ensure_utc_timezone(cls, v: datetime) -> datetime:
        """Ensure published_at is timezone-aware."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v


class ReleaseRecord(BaseModel):
    """A release with its assigned bump category."""

    title: str = Field(description="Version tag, e.g. 'v1.2.3'")
    date: datetime = Field(description="When the release was published")
    type: ReleaseType = Field(default=ReleaseType.MINOR, description="Assigned by the classifier")

    @field_validator("date", mode="before")
    @classmethod
    def rehydrate_date(cls, v: Any) -> datetime:
        """Turn a cached date string back into a timezone-aware datetime."""
        return parse_date(v)  # type: ignore[return-value]

    @classmethod
    def from_git_release(cls, release: GitRelease) -> "ReleaseRecord":
        return cls(title=release.name, date=release.published_at)

    def to_cache_dict(self) -> dict[str, Any]:
        """Plain representation stored in the release cache."""
        return {"title": self.title, "date": self.date, "type": self.type.value}

    def __str__(self) -> str:
        return f"{self.title} ({self.type.value}, {self.date.date()})"
