"""Cached, classified release listings per addon."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping, Sequence
from datetime import timedelta
from typing import Any

from addon_releases.cache.expiring import Clock, ExpiringCache
from addon_releases.cache.storage.base import StorageBackend
from addon_releases.cache.storage.filesystem import FileSystemStorage
from addon_releases.config import Settings, get_settings
from addon_releases.errors.exceptions import ReleaseClassificationError
from addon_releases.errors.logger import ErrorCategory, StructuredLogger, get_logger
from addon_releases.releases.classifier import ReleaseClassifier
from addon_releases.releases.models import Addon, GitRelease, ReleaseRecord
from addon_releases.utils import is_version_tag

ReleaseFetcher = Callable[[Addon], Awaitable[Iterable[GitRelease | Mapping[str, Any]]]]

CACHE_PREFIX = "releases"

logger = logging.getLogger(__name__)


class ReleaseService:
    """Serves classified releases for addons through one cache per addon.

    The fetcher is only called on a cache miss or after expiry. Its releases
    are filtered to version tags and stored as plain dicts; dates read back
    from the cache are strings and are re-hydrated into datetimes here before
    classification.
    """

    def __init__(
        self,
        fetcher: ReleaseFetcher,
        storage: StorageBackend | None = None,
        classifier: ReleaseClassifier | None = None,
        ttl: timedelta | None = None,
        clock: Clock | None = None,
        single_flight: bool | None = None,
        settings: Settings | None = None,
        error_logger: StructuredLogger | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            fetcher: Async callable returning the raw releases of an addon
            storage: Storage shared by all addon caches. Defaults to the configured directory
            classifier: Release classifier. Defaults to the configured policy
            ttl: Cache time to live. Defaults to the configured ttl
            clock: Time source for freshness checks
            single_flight: Share in-flight fetches per addon. Defaults to configuration
            settings: Settings to read defaults from
            error_logger: Structured logger for failures
        """
        settings = settings or get_settings()

        self.fetcher = fetcher
        self.storage = storage or FileSystemStorage(settings.cache.cache_dir)
        self.classifier = classifier or ReleaseClassifier(settings.classifier.policy)
        self.ttl = ttl or timedelta(seconds=settings.cache.ttl_seconds)
        self.clock = clock
        self.single_flight = (
            settings.cache.single_flight if single_flight is None else single_flight
        )
        self.error_logger = error_logger or get_logger()
        self._caches: dict[str, ExpiringCache[list[dict[str, Any]]]] = {}

    def cache_for(self, addon: Addon) -> ExpiringCache[list[dict[str, Any]]]:
        """Return the cache owned by ``addon``, creating it on first use."""
        key = self.storage.generate_key(CACHE_PREFIX, addon.key)
        if key not in self._caches:
            self._caches[key] = ExpiringCache(
                key,
                self.storage,
                ttl=self.ttl,
                clock=self.clock,
                single_flight=self.single_flight,
                error_logger=self.error_logger,
            )
        return self._caches[key]

    async def _fetch_version_releases(self, addon: Addon) -> list[dict[str, Any]]:
        logger.info(f"Fetching releases for {addon.repository}")
        raw_releases = await self.fetcher(addon)

        releases = [GitRelease.model_validate(release) for release in raw_releases]
        return [
            ReleaseRecord.from_git_release(release).to_cache_dict()
            for release in releases
            if is_version_tag(release.name)
        ]

    async def get_addon_releases(self, addon: Addon) -> list[ReleaseRecord]:
        """Return the version releases of ``addon`` with their bump categories.

        Raises:
            ReleaseClassificationError: If the releases cannot be classified
            Exception: Anything the fetcher raises
        """
        cached = await self.cache_for(addon).fetch_or_compute(
            lambda: self._fetch_version_releases(addon)
        )

        releases = [ReleaseRecord.model_validate(item) for item in cached]

        try:
            self.classifier.classify(releases)
        except ReleaseClassificationError as e:
            self.error_logger.log_exception(
                e,
                ErrorCategory.CLASSIFICATION,
                addon=addon.key,
                metadata={"policy": self.classifier.policy.name, "count": len(releases)},
            )
            raise

        return releases

    async def get_all_addon_releases(
        self, addons: Sequence[Addon]
    ) -> dict[str, list[ReleaseRecord] | BaseException]:
        """Fetch releases for every addon concurrently, one task per addon.

        Failures are returned in place of the release list for that addon.
        """
        results = await asyncio.gather(
            *(self.get_addon_releases(addon) for addon in addons), return_exceptions=True
        )
        return {addon.key: result for addon, result in zip(addons, results, strict=True)}
