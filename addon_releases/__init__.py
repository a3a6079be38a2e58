"""Expiring release cache and version-bump classification for addons."""

from addon_releases.cache import ExpiringCache, FileSystemStorage, MemoryStorage
from addon_releases.releases import (
    Addon,
    GitRelease,
    ReleaseClassifier,
    ReleaseRecord,
    ReleaseService,
    ReleaseType,
    classify_releases,
)

__version__ = "0.1.0"

__all__ = [
    "Addon",
    "ExpiringCache",
    "FileSystemStorage",
    "GitRelease",
    "MemoryStorage",
    "ReleaseClassifier",
    "ReleaseRecord",
    "ReleaseService",
    "ReleaseType",
    "__version__",
    "classify_releases",
]
