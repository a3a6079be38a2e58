"""Release models, classification and the cached release service."""

from addon_releases.releases.classifier import ReleaseClassifier, classify_releases
from addon_releases.releases.models import Addon, GitRelease, ReleaseRecord, ReleaseType
from addon_releases.releases.policies import (
    ClassificationPolicy,
    LegacyOffsetPolicy,
    SemverPolicy,
    available_policies,
    get_policy,
    register_policy,
)
from addon_releases.releases.service import ReleaseFetcher, ReleaseService

__all__ = [
    "Addon",
    "ClassificationPolicy",
    "GitRelease",
    "LegacyOffsetPolicy",
    "ReleaseClassifier",
    "ReleaseFetcher",
    "ReleaseRecord",
    "ReleaseService",
    "ReleaseType",
    "SemverPolicy",
    "available_policies",
    "classify_releases",
    "get_policy",
    "register_policy",
]
