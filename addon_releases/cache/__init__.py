"""Expiring result cache with durable storage."""

from addon_releases.cache.expiring import DEFAULT_TTL, ExpiringCache
from addon_releases.cache.models import CacheEntry
from addon_releases.cache.storage.base import StorageBackend
from addon_releases.cache.storage.filesystem import FileSystemStorage
from addon_releases.cache.storage.memory import MemoryStorage

__all__ = [
    "DEFAULT_TTL",
    "CacheEntry",
    "ExpiringCache",
    "StorageBackend",
    "FileSystemStorage",
    "MemoryStorage",
]
