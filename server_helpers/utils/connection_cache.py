"""In-process cache of live data source connections."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable

from loguru import logger

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

Timestamp = datetime | str | int | float | None


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_utc_datetime(value: Timestamp) -> datetime:
    """Normalise a loosely typed timestamp to an aware UTC ``datetime``.

    ``None`` maps to the epoch, numbers are epoch milliseconds, strings are
    ISO-8601 and naive datetimes are assumed to already be in UTC.
    """

    if value is None:
        return EPOCH
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    else:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass
class CacheEntry:
    handle: Any
    cached_at: datetime


class ConnectionCache:
    """Map of resource id to the most recently stored connection handle.

    Entries are never evicted. A lookup only refuses an entry when the
    resource changed after the entry was cached; the entry stays in place
    and is served again to callers holding an older modification time.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, CacheEntry] = {}
        self._clock = clock or _utcnow

    def store(self, resource_id: str, handle: Any) -> None:
        entry = CacheEntry(handle=handle, cached_at=to_utc_datetime(self._clock()))
        with self._lock:
            self._entries[resource_id] = entry
        logger.debug("Cached connection", resource_id=resource_id)

    def lookup(self, resource_id: str, last_modified_at: Timestamp = None) -> Any | None:
        """Return the cached handle unless the resource changed after caching."""

        with self._lock:
            entry = self._entries.get(resource_id)
        if entry is None:
            return None

        try:
            modified_at = to_utc_datetime(last_modified_at)
        except (AttributeError, OSError, OverflowError, TypeError, ValueError):
            # An unreadable modification time cannot prove the entry stale
            logger.warning("Unparseable modification time", resource_id=resource_id, value=repr(last_modified_at))
            return entry.handle

        diff = (entry.cached_at - modified_at).total_seconds()
        if diff < 0:
            logger.debug("Cached connection is stale", resource_id=resource_id, seconds=-diff)
            return None
        return entry.handle

    def clear(self) -> None:
        """Drop every entry; intended for tests and shutdown."""

        with self._lock:
            self._entries.clear()

    def __contains__(self, resource_id: object) -> bool:
        with self._lock:
            return resource_id in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


connection_cache = ConnectionCache()


def cache_connection(data_source_id: str, connection: Any) -> None:
    connection_cache.store(data_source_id, connection)


def get_cached_connection(data_source_id: str, data_source_updated_at: Timestamp = None) -> Any | None:
    return connection_cache.lookup(data_source_id, data_source_updated_at)


__all__ = [
    "CacheEntry",
    "ConnectionCache",
    "cache_connection",
    "connection_cache",
    "get_cached_connection",
    "to_utc_datetime",
]
