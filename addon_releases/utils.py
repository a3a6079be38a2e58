"""Shared parsing helpers."""

import re
from datetime import UTC, datetime

from dateutil import parser as date_parser

VERSION_TAG_PATTERN = re.compile(r"v\d")


def is_version_tag(name: str | None) -> bool:
    """Return True when a release name contains a ``v`` followed by a digit."""
    return bool(name) and VERSION_TAG_PATTERN.search(name) is not None  # type: ignore[arg-type]


def parse_date(
    value: str | datetime | None,
    raise_on_error: bool = True,
) -> datetime | None:
    """
    Parse a date string or datetime into a timezone-aware datetime.

    Handles the ISO format written by ``datetime.isoformat()`` as well as the
    space-separated form produced by ``str(datetime)``, which is what a cached
    datetime turns into after a round trip through storage.

    Args:
        value: String or datetime to normalize
        raise_on_error: Whether to raise exception on parse error

    Returns:
        Datetime with timezone info (naive values are assumed UTC), or None

    Raises:
        ValueError: If value cannot be parsed and raise_on_error is True
    """
    if isinstance(value, datetime):
        dt = value
    elif not value:
        if raise_on_error:
            raise ValueError("Could not parse date: empty value")
        return None
    else:
        try:
            dt = date_parser.parse(value)
        except (ValueError, TypeError, OverflowError) as e:
            if raise_on_error:
                raise ValueError(f"Could not parse date: {value}") from e
            return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)

    return dt
