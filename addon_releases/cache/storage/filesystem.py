"""File system based storage backend."""

import asyncio
import os
import shutil
import tempfile
from datetime import UTC, datetime
from pathlib import Path
from typing import Any
from urllib.parse import quote, unquote

from addon_releases.cache.storage.base import StorageBackend

CACHE_SUFFIX = ".cache"


class FileSystemStorage(StorageBackend):
    """File system based cache storage, one file per key."""

    def __init__(self, cache_dir: Path | None = None):
        """Initialize filesystem storage.

        Args:
            cache_dir: Directory for cache storage. Defaults to .cache/addon-releases
        """
        self.cache_dir = cache_dir or Path.cwd() / ".cache" / "addon-releases"
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    def _get_file_path(self, key: str) -> Path:
        """Get the file path for a cache key."""
        return self.cache_dir / f"{quote(key, safe='')}{CACHE_SUFFIX}"

    def _write_atomic(self, file_path: Path, value: bytes) -> None:
        # Readers only ever see the old or the new file, never a partial one.
        fd, tmp_name = tempfile.mkstemp(dir=self.cache_dir, prefix=".tmp-")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(value)
            os.replace(tmp_name, file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    async def get(self, key: str) -> bytes | None:
        """Retrieve cached data by key."""
        file_path = self._get_file_path(key)

        if not file_path.exists():
            return None

        try:
            return await asyncio.to_thread(file_path.read_bytes)
        except FileNotFoundError:
            return None

    async def set(self, key: str, value: bytes) -> bool:
        """Store data in cache."""
        try:
            await asyncio.to_thread(self._write_atomic, self._get_file_path(key), value)
            return True
        except OSError:
            return False

    async def delete(self, key: str) -> bool:
        """Delete cached data by key."""
        file_path = self._get_file_path(key)

        if not file_path.exists():
            return False

        try:
            await asyncio.to_thread(file_path.unlink)
            return True
        except FileNotFoundError:
            return False

    async def exists(self, key: str) -> bool:
        """Check if a key exists in cache."""
        return self._get_file_path(key).exists()

    async def clear(self) -> bool:
        """Clear all cached data."""
        try:
            if self.cache_dir.exists():
                await asyncio.to_thread(shutil.rmtree, self.cache_dir)
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            return True
        except OSError:
            return False

    async def get_metadata(self, key: str) -> dict[str, Any] | None:
        """Get metadata about a cached entry."""
        file_path = self._get_file_path(key)

        try:
            stat = await asyncio.to_thread(file_path.stat)
        except FileNotFoundError:
            return None

        return {
            "key": key,
            "size": stat.st_size,
            "modified_at": datetime.fromtimestamp(stat.st_mtime, UTC).isoformat(),
            "path": str(file_path),
        }

    async def list_keys(self, prefix: str | None = None) -> list[str]:
        """List all cache keys, optionally filtered by prefix.

        Args:
            prefix: Optional prefix to filter keys

        Returns:
            Sorted list of cache keys
        """
        keys = []
        for file_path in self.cache_dir.glob(f"*{CACHE_SUFFIX}"):
            key = unquote(file_path.name[: -len(CACHE_SUFFIX)])
            if prefix is None or key.startswith(prefix):
                keys.append(key)
        return sorted(keys)
