"""Exception hierarchy for release caching and classification."""


class AddonReleasesError(Exception):
    """Base class for all errors raised by this package."""


class ReleaseClassificationError(AddonReleasesError):
    """A release sequence could not be classified."""


class IndexOutOfRangeError(ReleaseClassificationError, IndexError):
    """Raised when a sequence is too short to have a comparison partner."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"Cannot classify {length} release(s): at least 2 are required"
        )


class MalformedTitleError(ReleaseClassificationError, ValueError):
    """Raised when a release title does not have the expected version shape."""

    def __init__(self, title: str, reason: str) -> None:
        self.title = title
        self.reason = reason
        super().__init__(f"Malformed release title {title!r}: {reason}")


class UnknownPolicyError(AddonReleasesError, KeyError):
    """Raised when a classification policy name is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(name)

    def __str__(self) -> str:
        available = ", ".join(self.available)
        return f"Unknown classification policy {self.name!r} (available: {available})"
