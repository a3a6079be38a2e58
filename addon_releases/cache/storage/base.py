"""Abstract base class for storage backends."""

from abc import ABC, abstractmethod
from typing import Any


class StorageBackend(ABC):
    """Abstract base class for durable cache storage.

    Backends are plain key-value stores of bytes. They know nothing about
    freshness; expiry is decided by the cache that owns a key.
    """

    @abstractmethod
    async def get(self, key: str) -> bytes | None:
        """Retrieve stored data by key.

        Args:
            key: The cache key to retrieve

        Returns:
            The stored data as bytes, or None if not found
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: bytes) -> bool:
        """Store data, replacing any previous value for the key.

        Args:
            key: The cache key
            value: The data to store as bytes

        Returns:
            True if successful, False otherwise
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete stored data by key.

        Returns:
            True if deleted, False if not found
        """
        pass

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Check if a key exists in storage."""
        pass

    @abstractmethod
    async def clear(self) -> bool:
        """Clear all stored data.

        Returns:
            True if successful, False otherwise
        """
        pass

    @abstractmethod
    async def get_metadata(self, key: str) -> dict[str, Any] | None:
        """Get metadata about a stored entry.

        Returns:
            Metadata dict with 'key', 'size' and 'modified_at', or None
        """
        pass

    @abstractmethod
    async def list_keys(self, prefix: str | None = None) -> list[str]:
        """List stored keys, optionally filtered by prefix."""
        pass

    def generate_key(self, prefix: str, identifier: str) -> str:
        """Generate a namespaced cache key.

        Args:
            prefix: Key prefix (e.g., 'releases')
            identifier: Unique identifier (e.g., addon key)

        Returns:
            Generated cache key
        """
        return f"{prefix}:{identifier}"
