"""Named policies deciding the bump category between two release titles."""

import logging
import re
from abc import ABC, abstractmethod
from typing import ClassVar

from addon_releases.errors.exceptions import MalformedTitleError, UnknownPolicyError
from addon_releases.releases.models import ReleaseType

logger = logging.getLogger(__name__)


class ClassificationPolicy(ABC):
    """Decides the category of a release given the title of its partner."""

    name: ClassVar[str]

    @abstractmethod
    def categorize(self, title: str, partner_title: str, is_last: bool) -> ReleaseType | None:
        """Return the category for ``title``, or None to leave it unchanged.

        Args:
            title: Title of the release being classified
            partner_title: Title of its comparison partner
            is_last: Whether the release is the last one in the sequence

        Raises:
            MalformedTitleError: If either title cannot be compared
        """
        raise NotImplementedError


class LegacyOffsetPolicy(ClassificationPolicy):
    """Compares single characters at fixed offsets of ``vX.Y.Z`` titles.

    Offsets 1, 3 and 5 line up with the major, minor and patch digits only
    while every component is a single digit. A patch-only difference on the
    last release is reported as ``minor``.
    """

    name = "legacy-offset"

    MAJOR_OFFSET = 1
    MINOR_OFFSET = 3
    PATCH_OFFSET = 5

    def categorize(self, title: str, partner_title: str, is_last: bool) -> ReleaseType | None:
        for candidate in (title, partner_title):
            if len(candidate) <= self.PATCH_OFFSET:
                raise MalformedTitleError(
                    candidate, f"no character at offset {self.PATCH_OFFSET}"
                )

        if title[self.MAJOR_OFFSET] != partner_title[self.MAJOR_OFFSET]:
            return ReleaseType.MAJOR
        if title[self.MINOR_OFFSET] != partner_title[self.MINOR_OFFSET]:
            return ReleaseType.MINOR
        if title[self.PATCH_OFFSET] != partner_title[self.PATCH_OFFSET]:
            return ReleaseType.MINOR if is_last else ReleaseType.PATCH
        return None


class SemverPolicy(ClassificationPolicy):
    """Compares numeric ``MAJOR.MINOR.PATCH`` components of any width."""

    name = "semver"

    VERSION_PATTERN = re.compile(r"v?(\d+)\.(\d+)\.(\d+)")

    def parse(self, title: str) -> tuple[int, int, int]:
        match = self.VERSION_PATTERN.search(title)
        if not match:
            raise MalformedTitleError(title, "expected MAJOR.MINOR.PATCH")
        major, minor, patch = (int(part) for part in match.groups())
        return major, minor, patch

    def categorize(self, title: str, partner_title: str, is_last: bool) -> ReleaseType | None:
        major, minor, patch = self.parse(title)
        other_major, other_minor, other_patch = self.parse(partner_title)

        if major != other_major:
            return ReleaseType.MAJOR
        if minor != other_minor:
            return ReleaseType.MINOR
        if patch != other_patch:
            return ReleaseType.PATCH
        return None


DEFAULT_POLICY = LegacyOffsetPolicy.name

_POLICIES: dict[str, type[ClassificationPolicy]] = {}


def register_policy(policy_class: type[ClassificationPolicy]) -> type[ClassificationPolicy]:
    """Register a policy class under its ``name``."""
    if policy_class.name in _POLICIES:
        logger.warning(f"Overwriting existing classification policy: {policy_class.name}")
    _POLICIES[policy_class.name] = policy_class
    return policy_class


def available_policies() -> list[str]:
    return sorted(_POLICIES)


def get_policy(name: str | None = None) -> ClassificationPolicy:
    """Create a policy by name.

    Args:
        name: Registered policy name. Defaults to ``legacy-offset``.

    Raises:
        UnknownPolicyError: If no policy is registered under ``name``
    """
    policy_class = _POLICIES.get(name or DEFAULT_POLICY)
    if policy_class is None:
        raise UnknownPolicyError(name or DEFAULT_POLICY, available_policies())
    return policy_class()


register_policy(LegacyOffsetPolicy)
register_policy(SemverPolicy)
