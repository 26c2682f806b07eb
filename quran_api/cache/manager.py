"""
Bounded, time-expiring cache used by the resource services.
"""
import logging
import threading
import time
from typing import Any, Callable, Dict, Optional

from .core import CacheEntry

logger = logging.getLogger("cache.manager")

DEFAULT_CAPACITY = 100
DEFAULT_TTL_SECONDS = 3600.0


class TTLCache:
    """
    Key/value store with a size bound and lazy expiry.

    - Entries older than ``ttl_seconds`` are never returned and are removed
      on the read that discovers them.
    - Inserting a new key at capacity evicts the entry with the oldest
      write time first.
    - ``size()`` counts physical entries, expired-but-unread ones included.

    The lock is only held for map operations, never across an upstream call.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        name: str = "cache",
    ):
        """
        Initialize the cache.

        Args:
            capacity: Maximum number of entries held at once
            ttl_seconds: Lifetime of an entry after it is written
            clock: Time source, injectable for tests
            name: Label used in log lines and stats
        """
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.ttl_seconds = ttl_seconds
        self.name = name
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.RLock()

        self._stats = {
            "hits": 0,
            "misses": 0,
            "evictions": 0,
            "expirations": 0,
        }

    def get(self, key: str) -> Optional[Any]:
        """
        Return the live value for ``key``, or None.

        An expired entry is deleted before returning None.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._stats["misses"] += 1
                return None

            now = self._clock()
            if entry.is_expired(now, self.ttl_seconds):
                del self._entries[key]
                self._stats["expirations"] += 1
                self._stats["misses"] += 1
                logger.debug(
                    f"CACHE EXPIRED [{self.name}]: {key} "
                    f"[age={entry.age_seconds(now):.1f}s]"
                )
                return None

            self._stats["hits"] += 1
            return entry.value

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key`` with the current clock time."""
        with self._lock:
            if key not in self._entries and len(self._entries) >= self.capacity:
                self._evict_oldest()
            self._entries[key] = CacheEntry(value=value, stored_at=self._clock())

    def _evict_oldest(self) -> None:
        """Drop the entry with the smallest write time. Caller holds the lock."""
        oldest_key = None
        oldest_time = None
        for key, entry in self._entries.items():
            if oldest_time is None or entry.stored_at < oldest_time:
                oldest_key = key
                oldest_time = entry.stored_at

        if oldest_key is not None:
            del self._entries[oldest_key]
            self._stats["evictions"] += 1
            logger.debug(f"CACHE EVICT [{self.name}]: {oldest_key}")

    def invalidate(self, key: str) -> bool:
        """
        Invalidate a specific cache entry.

        Returns:
            True if entry was found and removed
        """
        with self._lock:
            if key in self._entries:
                del self._entries[key]
                logger.info(f"Invalidated cache [{self.name}]: {key}")
                return True
            return False

    def clear(self) -> int:
        """
        Clear all cache entries.

        Returns:
            Number of entries cleared
        """
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            if count:
                logger.info(f"Cleared {count} entries from {self.name}")
            return count

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.size()

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self._lock:
            lookups = self._stats["hits"] + self._stats["misses"]
            hit_rate = (self._stats["hits"] / lookups * 100) if lookups > 0 else 0

            return {
                "name": self.name,
                "entries": len(self._entries),
                "capacity": self.capacity,
                "ttl_seconds": self.ttl_seconds,
                "hits": self._stats["hits"],
                "misses": self._stats["misses"],
                "evictions": self._stats["evictions"],
                "expirations": self._stats["expirations"],
                "hit_rate_percent": round(hit_rate, 1),
            }
