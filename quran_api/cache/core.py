"""
Core cache data structures.
"""
from dataclasses import dataclass
from typing import Any


@dataclass
class CacheEntry:
    """
    A cached payload and the clock time it was written.
    """
    value: Any
    stored_at: float

    def age_seconds(self, now: float) -> float:
        """Seconds since the entry was written."""
        return now - self.stored_at

    def is_expired(self, now: float, ttl_seconds: float) -> bool:
        """An entry exactly at its TTL is still live."""
        return self.age_seconds(now) > ttl_seconds
