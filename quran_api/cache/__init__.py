"""
Caching module: bounded TTL cache and cache key projections.
"""
from .core import CacheEntry
from .keys import DEFAULT_LANGUAGE, language_key, normalize_language, static_key
from .manager import TTLCache

__all__ = [
    # Core types
    "CacheEntry",
    # Store
    "TTLCache",
    # Key projections
    "DEFAULT_LANGUAGE",
    "language_key",
    "normalize_language",
    "static_key",
]
