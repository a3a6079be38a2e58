"""Errors and structured error logging."""

from addon_releases.errors.exceptions import (
    AddonReleasesError,
    IndexOutOfRangeError,
    MalformedTitleError,
    ReleaseClassificationError,
    UnknownPolicyError,
)
from addon_releases.errors.logger import (
    ErrorCategory,
    ErrorSeverity,
    StructuredError,
    StructuredLogger,
    get_logger,
)

__all__ = [
    "AddonReleasesError",
    "ErrorCategory",
    "ErrorSeverity",
    "IndexOutOfRangeError",
    "MalformedTitleError",
    "ReleaseClassificationError",
    "StructuredError",
    "StructuredLogger",
    "UnknownPolicyError",
    "get_logger",
]
