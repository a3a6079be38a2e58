"""Command line interface for inspecting the release cache and classifier."""

import asyncio
import json
import sys
from datetime import UTC, datetime, timedelta
from typing import Any

from addon_releases.cache import ExpiringCache, FileSystemStorage, StorageBackend
from addon_releases.config import get_settings
from addon_releases.errors.exceptions import AddonReleasesError
from addon_releases.releases import ReleaseClassifier, ReleaseRecord

USAGE = "Usage: addon-releases [classify [--policy NAME] TITLE...|status|clear [--confirm]]"


def _default_storage() -> FileSystemStorage:
    return FileSystemStorage(get_settings().cache.cache_dir)


def classify_titles(titles: list[str], policy: str | None = None) -> list[ReleaseRecord]:
    """Classify bare version titles in the given order.

    Args:
        titles: Release titles, oldest-compatible neighbour order
        policy: Optional policy name, defaults to the configured one

    Returns:
        Classified release records
    """
    now = datetime.now(UTC)
    releases = [ReleaseRecord(title=title, date=now) for title in titles]
    ReleaseClassifier(policy or get_settings().classifier.policy).classify(releases)
    return releases


async def cache_status(storage: StorageBackend | None = None) -> dict[str, Any]:
    """Get current cache entries and their freshness.

    Returns:
        Dictionary with one item per stored key
    """
    storage = storage or _default_storage()
    ttl = timedelta(seconds=get_settings().cache.ttl_seconds)
    now = datetime.now(UTC)

    entries = {}
    for key in await storage.list_keys():
        entry = await ExpiringCache(key, storage, ttl=ttl).read_entry()
        if entry is None:
            entries[key] = {"status": "unreadable"}
            continue
        entries[key] = {
            "status": "fresh" if entry.is_fresh(ttl, now) else "expired",
            "written_at": entry.written_at.isoformat(),
            "age_seconds": int(entry.age(now).total_seconds()),
        }

    return {
        "ttl_seconds": int(ttl.total_seconds()),
        "entries": entries,
        "timestamp": now.isoformat(),
    }


async def clear_cache(confirm: bool = False, storage: StorageBackend | None = None) -> bool:
    """Clear all cached data.

    Args:
        confirm: Must be True to actually clear the cache

    Returns:
        True if cache was cleared
    """
    if not confirm:
        print("Cache clear cancelled. Pass --confirm to clear.")
        return False

    result = await (storage or _default_storage()).clear()
    print("Cache cleared successfully" if result else "Failed to clear cache")
    return result


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = sys.argv[1:] if argv is None else argv

    if not args:
        print(USAGE)
        return 1

    command, rest = args[0], args[1:]

    if command == "classify":
        policy = None
        if rest[:1] == ["--policy"]:
            if len(rest) < 2:
                print("--policy requires a name")
                return 1
            policy, rest = rest[1], rest[2:]
        try:
            releases = classify_titles(rest, policy)
        except AddonReleasesError as e:
            print(f"Error: {e}")
            return 1
        for release in releases:
            print(f"{release.title}\t{release.type.value}")
        return 0

    if command == "status":
        print(json.dumps(asyncio.run(cache_status()), indent=2))
        return 0

    if command == "clear":
        return 0 if asyncio.run(clear_cache("--confirm" in rest)) else 1

    print(f"Unknown command: {command}")
    print("Available commands: classify, status, clear")
    return 1


if __name__ == "__main__":
    sys.exit(main())
