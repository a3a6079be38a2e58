"""Tests for addon and release models."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from addon_releases.releases.models import Addon, GitRelease, ReleaseRecord, ReleaseType


def describe_ReleaseRecord():
    """Test the ReleaseRecord model."""

    def it_defaults_to_minor():
        record = ReleaseRecord(title="v1.0.0", date=datetime(2024, 1, 1, tzinfo=UTC))
        assert record.type == ReleaseType.MINOR

    def it_accepts_type_names():
        record = ReleaseRecord(title="v1.0.0", date=datetime(2024, 1, 1, tzinfo=UTC), type="patch")
        assert record.type is ReleaseType.PATCH

    @pytest.mark.parametrize(
        "raw",
        ["2024-03-15 10:30:00+00:00", "2024-03-15T10:30:00Z", "2024-03-15T10:30:00"],
    )
    def it_rehydrates_cached_date_strings(raw):
        record = ReleaseRecord.model_validate({"title": "v1.0.0", "date": raw, "type": "minor"})
        assert record.date == datetime(2024, 3, 15, 10, 30, tzinfo=UTC)

    def it_rejects_unparseable_dates():
        with pytest.raises(ValidationError):
            ReleaseRecord(title="v1.0.0", date="not a date")

    def it_builds_from_a_git_release():
        published = datetime(2024, 2, 1, tzinfo=UTC)
        record = ReleaseRecord.from_git_release(GitRelease(name="v0.9.1", published_at=published))

        assert record.title == "v0.9.1"
        assert record.date == published
        assert record.type == ReleaseType.MINOR

    def it_converts_to_a_cache_dict():
        published = datetime(2024, 2, 1, tzinfo=UTC)
        record = ReleaseRecord(title="v0.9.1", date=published, type=ReleaseType.MAJOR)

        assert record.to_cache_dict() == {"title": "v0.9.1", "date": published, "type": "major"}

    def it_allows_reassigning_the_type():
        record = ReleaseRecord(title="v1.0.0", date=datetime(2024, 1, 1, tzinfo=UTC))
        record.type = ReleaseType.PATCH
        assert record.type == ReleaseType.PATCH

    def it_has_a_readable_string_form():
        record = ReleaseRecord(title="v1.0.0", date=datetime(2024, 1, 5, tzinfo=UTC))
        assert str(record) == "v1.0.0 (minor, 2024-01-05)"


def describe_GitRelease():
    """Test the GitRelease model."""

    def it_assumes_utc_for_naive_timestamps():
        release = GitRelease(name="v1.0.0", published_at=datetime(2024, 1, 1, 8, 0))
        assert release.published_at.tzinfo is UTC

    def it_parses_api_timestamps():
        release = GitRelease.model_validate({"name": "v1.0.0", "published_at": "2024-01-01T08:00:00Z"})
        assert release.published_at == datetime(2024, 1, 1, 8, 0, tzinfo=UTC)


def describe_Addon():
    """Test the Addon model."""

    def it_exposes_the_repository_path():
        addon = Addon(key="a32nx", name="A32NX", repo_owner="flybywiresim", repo_name="a32nx")
        assert addon.repository == "flybywiresim/a32nx"
