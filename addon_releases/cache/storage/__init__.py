"""Storage backends for cache persistence."""

from addon_releases.cache.storage.base import StorageBackend
from addon_releases.cache.storage.filesystem import FileSystemStorage
from addon_releases.cache.storage.memory import MemoryStorage

__all__ = ["StorageBackend", "FileSystemStorage", "MemoryStorage"]
