"""In-memory storage backend."""

from datetime import UTC, datetime
from typing import Any

from addon_releases.cache.storage.base import StorageBackend


class MemoryStorage(StorageBackend):
    """Process-local storage; contents are lost when the process exits."""

    def __init__(self) -> None:
        self._data: dict[str, bytes] = {}
        self._modified: dict[str, datetime] = {}

    async def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    async def set(self, key: str, value: bytes) -> bool:
        self._data[key] = value
        self._modified[key] = datetime.now(UTC)
        return True

    async def delete(self, key: str) -> bool:
        self._modified.pop(key, None)
        return self._data.pop(key, None) is not None

    async def exists(self, key: str) -> bool:
        return key in self._data

    async def clear(self) -> bool:
        self._data.clear()
        self._modified.clear()
        return True

    async def get_metadata(self, key: str) -> dict[str, Any] | None:
        if key not in self._data:
            return None
        return {
            "key": key,
            "size": len(self._data[key]),
            "modified_at": self._modified[key].isoformat(),
        }

    async def list_keys(self, prefix: str | None = None) -> list[str]:
        return sorted(k for k in self._data if prefix is None or k.startswith(prefix))
