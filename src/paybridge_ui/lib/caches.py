"""
Disk-based caching utilities with TTL support.

Provides a DiskCache class that stores small values (payment provider
public keys) on disk with automatic expiration. Uses the diskcache
library for thread-safe and process-safe storage, so every Reflex worker
shares the same cached configuration.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import diskcache


@dataclass
class CacheEntry:
    """
    Wrapper around a cached value.

    Attributes:
        value: The cached value.
    """

    value: Any


class DiskCache:
    """
    Disk-based cache with TTL support.

    Attributes:
        cache_dir: Path to the cache directory.
    """

    def __init__(self, cache_dir: str | Path) -> None:
        """
        Initialize the disk cache.

        Args:
            cache_dir: Directory path for storing cache files.
                       Created if it doesn't exist.
        """
        self.cache_dir = Path(cache_dir)
        self._cache = diskcache.Cache(str(self.cache_dir))

    def get(self, key: str) -> CacheEntry | None:
        """
        Get a value from cache.

        Args:
            key: Cache key string.

        Returns:
            CacheEntry if found and not expired, None otherwise.
        """
        cached = self._cache.get(key, default=None)
        if cached is not None:
            return CacheEntry(value=cached)
        return None

    def set(self, key: str, value: Any, expire: int | None = None) -> None:
        """
        Store a value in cache.

        Args:
            key: Cache key string.
            value: Value to store.
            expire: TTL in seconds. None means no expiration.
        """
        self._cache.set(key, value, expire=expire)

    def close(self) -> None:
        """Close the cache and release resources."""
        self._cache.close()
