"""Cache entry model and its JSON wire format."""

import json
from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import BaseModel, field_validator


class CacheEntry(BaseModel):
    """A computed value together with the time it was written."""

    key: str
    value: Any
    written_at: datetime

    @field_validator("written_at")
    @classmethod
    def validate_timezone_aware(cls, v: datetime) -> datetime:
        """Ensure timestamp is timezone-aware."""
        if v.tzinfo is None:
            raise ValueError("written_at must be timezone-aware")
        return v

    def age(self, now: datetime | None = None) -> timedelta:
        """Time elapsed since the entry was written."""
        return (now or datetime.now(UTC)) - self.written_at

    def is_fresh(self, ttl: timedelta, now: datetime | None = None) -> bool:
        """An entry is fresh while its age is strictly below the ttl."""
        return self.age(now) < ttl

    def to_bytes(self) -> bytes:
        """Serialize the entry for storage.

        Values are written with ``default=str``, so datetimes and other
        non-JSON types inside ``value`` come back as strings on read.
        """
        payload = {
            "key": self.key,
            "value": self.value,
            "written_at": self.written_at.isoformat(),
        }
        return json.dumps(payload, default=str).encode("utf-8")

    @classmethod
    def from_bytes(cls, raw: bytes) -> "CacheEntry":
        """Deserialize a stored entry.

        Raises:
            ValueError: If the payload is not a valid cache entry
        """
        return cls.model_validate_json(raw)
