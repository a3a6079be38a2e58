"""Neighbour-relative classification of release sequences."""

from collections.abc import Sequence

from addon_releases.errors.exceptions import IndexOutOfRangeError
from addon_releases.releases.models import ReleaseRecord, ReleaseType
from addon_releases.releases.policies import ClassificationPolicy, get_policy


class ReleaseClassifier:
    """Assigns a bump category to every release in an ordered sequence.

    Each release is compared with the next one, except the last release
    which is compared with the one before it. The comparison itself is
    delegated to a ``ClassificationPolicy``.
    """

    def __init__(self, policy: ClassificationPolicy | str | None = None) -> None:
        if policy is None or isinstance(policy, str):
            policy = get_policy(policy)
        self.policy = policy

    def categories(self, titles: Sequence[str]) -> list[ReleaseType | None]:
        """Compute the category for each title without mutating anything.

        Raises:
            IndexOutOfRangeError: If fewer than two titles are given
            MalformedTitleError: If the policy cannot compare a title
        """
        if len(titles) < 2:
            raise IndexOutOfRangeError(len(titles))

        last = len(titles) - 1
        result = []
        for index, title in enumerate(titles):
            partner = titles[index - 1] if index == last else titles[index + 1]
            result.append(self.policy.categorize(title, partner, index == last))
        return result

    def classify(self, releases: Sequence[ReleaseRecord]) -> Sequence[ReleaseRecord]:
        """Set ``type`` on each release and return the same sequence.

        Either every release is classified or none is modified.
        """
        categories = self.categories([release.title for release in releases])

        for release, category in zip(releases, categories, strict=True):
            if category is not None:
                release.type = category

        return releases


def classify_releases(
    releases: Sequence[ReleaseRecord], policy: ClassificationPolicy | str | None = None
) -> Sequence[ReleaseRecord]:
    """Classify ``releases`` in place with the given (or default) policy."""
    return ReleaseClassifier(policy).classify(releases)
