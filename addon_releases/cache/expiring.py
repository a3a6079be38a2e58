"""Expiring result cache with compute-on-miss semantics."""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime, timedelta
from typing import Generic, TypeVar

from pydantic import ValidationError

from addon_releases.cache.models import CacheEntry
from addon_releases.cache.storage.base import StorageBackend
from addon_releases.errors.logger import (
    ErrorCategory,
    ErrorSeverity,
    StructuredError,
    StructuredLogger,
    get_logger,
)

T = TypeVar("T")

Compute = Callable[[], Awaitable[T] | T]
Clock = Callable[[], datetime]

DEFAULT_TTL = timedelta(hours=24)

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


class ExpiringCache(Generic[T]):
    """A single cache key backed by durable storage.

    ``fetch_or_compute`` returns the stored value while it is fresh and
    otherwise calls ``compute``, stores its result with the current time and
    returns it.

    Values pass through JSON on their way to storage. Anything JSON cannot
    represent natively, datetimes in particular, is stored as a string, so a
    value read back from storage carries strings where the computed value had
    datetimes. Callers re-hydrate such fields themselves after every call.

    Concurrent misses on the same key each run ``compute`` and the last write
    wins. Pass ``single_flight=True`` to share one in-flight computation
    between concurrent callers instead.
    """

    def __init__(
        self,
        key: str,
        storage: StorageBackend,
        ttl: timedelta = DEFAULT_TTL,
        clock: Clock | None = None,
        single_flight: bool = False,
        error_logger: StructuredLogger | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            key: Storage key owned by this cache
            storage: Durable storage backend, may be shared with other caches
            ttl: Age at which an entry stops being fresh
            clock: Returns the current timezone-aware time. Defaults to UTC now
            single_flight: Share one in-flight compute between concurrent callers
            error_logger: Structured logger for failures. Defaults to get_logger()
        """
        if ttl <= timedelta(0):
            raise ValueError("ttl must be positive")

        self.key = key
        self.storage = storage
        self.ttl = ttl
        self.clock = clock or utc_now
        self.single_flight = single_flight
        self._error_logger = error_logger
        self._in_flight: asyncio.Future[T] | None = None

    @property
    def error_logger(self) -> StructuredLogger:
        if self._error_logger is None:
            self._error_logger = get_logger()
        return self._error_logger

    async def fetch_or_compute(self, compute: Compute[T]) -> T:
        """Return the fresh stored value, or compute, store and return a new one.

        Args:
            compute: No-argument callable producing the value. May be a
                coroutine function or a plain function.

        Returns:
            The stored value when fresh, otherwise the result of ``compute``

        Raises:
            Exception: Whatever ``compute`` raises, unchanged. Nothing is stored.
        """
        entry = await self.read_entry()
        if entry is not None and entry.is_fresh(self.ttl, self.clock()):
            logger.debug("Cache hit for %s", self.key)
            return entry.value  # type: ignore[no-any-return]

        logger.debug("Cache %s for %s", "miss" if entry is None else "expired", self.key)

        if not self.single_flight:
            return await self._compute_and_store(compute)

        if self._in_flight is None:
            self._in_flight = asyncio.ensure_future(self._compute_and_store(compute))
            self._in_flight.add_done_callback(self._release_in_flight)
        else:
            logger.debug("Joining in-flight compute for %s", self.key)

        return await asyncio.shield(self._in_flight)

    def _release_in_flight(self, future: "asyncio.Future[T]") -> None:
        if self._in_flight is future:
            self._in_flight = None
        # Mark the exception as retrieved when every waiter was cancelled.
        if not future.cancelled():
            future.exception()

    async def _compute_and_store(self, compute: Compute[T]) -> T:
        try:
            result = compute()
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            self.error_logger.log_exception(e, ErrorCategory.COMPUTE, cache_key=self.key)
            raise

        await self.write(result)  # type: ignore[arg-type]
        return result  # type: ignore[return-value]

    async def read_entry(self) -> CacheEntry | None:
        """Read the stored entry, treating unreadable payloads as absent."""
        raw = await self.storage.get(self.key)
        if raw is None:
            return None

        try:
            return CacheEntry.from_bytes(raw)
        except ValidationError as e:
            self.error_logger.log_exception(
                e,
                ErrorCategory.SERIALIZATION,
                ErrorSeverity.WARNING,
                cache_key=self.key,
            )
            return None

    async def write(self, value: T) -> bool:
        """Persist ``value`` with the current time, replacing any previous entry."""
        entry = CacheEntry(key=self.key, value=value, written_at=self.clock())

        try:
            payload = entry.to_bytes()
        except (TypeError, ValueError) as e:
            self.error_logger.log_exception(
                e, ErrorCategory.SERIALIZATION, ErrorSeverity.WARNING, cache_key=self.key
            )
            return False

        saved = await self.storage.set(self.key, payload)
        if not saved:
            self.error_logger.log_error(
                StructuredError(
                    message="Failed to persist cache entry",
                    category=ErrorCategory.STORAGE,
                    severity=ErrorSeverity.WARNING,
                    cache_key=self.key,
                    metadata={"storage": type(self.storage).__name__},
                )
            )
        return saved
