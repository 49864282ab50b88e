"""In-memory LRU/TTL implementation of MetadataCache.

Backed by ``cachetools.TTLCache``, which evicts in least-recently-used order
once full and ages entries from their last insertion. TTLCache itself is not
thread-safe, so every access goes through one lock.
"""

import threading
import time
from collections.abc import Callable

from cachetools import TTLCache

from kubernetes_metadata.config import settings
from kubernetes_metadata.entities import ResolvedMetadata


class _CountingTTLCache(TTLCache):
    """TTLCache that counts capacity evictions."""

    def __init__(self, maxsize: int, ttl: float, timer: Callable[[], float]) -> None:
        super().__init__(maxsize=maxsize, ttl=ttl, timer=timer)
        self.evictions = 0

    def popitem(self):
        item = super().popitem()
        self.evictions += 1
        return item


class LRUMetadataCache:
    """Bounded, thread-safe LRU cache with per-entry time-to-live.

    This class satisfies the MetadataCache protocol through structural
    typing - no explicit inheritance needed.

    - Capacity: inserting past ``max_size`` evicts the least recently used entry
    - TTL: an entry older than ``ttl`` seconds (since its last ``put``) is
      treated as absent and dropped on the next access
    - Reads refresh recency but not age

    Example:
        ```python
        cache = LRUMetadataCache.create(max_size=2, ttl=60)
        cache.put("a.log", metadata)
        cache.get("a.log")  # metadata
        ```
    """

    def __init__(
        self,
        max_size: int | None = None,
        ttl: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            max_size: Maximum number of entries. Defaults to settings.
            ttl: Time-to-live in seconds. Defaults to settings.
            clock: Monotonic time source, replaceable in tests.

        Raises:
            ValueError: If max_size or ttl is not positive
        """
        self._max_size = settings.cache_max_size if max_size is None else max_size
        self._ttl = settings.cache_ttl if ttl is None else ttl
        if self._max_size <= 0:
            raise ValueError(f"max_size must be positive, got {self._max_size}")
        if self._ttl <= 0:
            raise ValueError(f"ttl must be positive, got {self._ttl}")

        self._lock = threading.RLock()
        self._cache = _CountingTTLCache(maxsize=self._max_size, ttl=self._ttl, timer=clock)
        self._expirations = 0

    @classmethod
    def create(
        cls,
        max_size: int | None = None,
        ttl: float | None = None,
    ) -> "LRUMetadataCache":
        """Factory method to create LRUMetadataCache with defaults.

        Args:
            max_size: Maximum number of entries. If None, uses settings.
            ttl: Entry TTL in seconds. If None, uses settings.

        Returns:
            Configured LRUMetadataCache
        """
        return cls(max_size=max_size, ttl=ttl)

    def _expire(self) -> None:
        # Must be called with the lock held
        expired = self._cache.expire()
        if expired:
            self._expirations += len(expired)

    def get(self, key: str) -> ResolvedMetadata | None:
        """Look up a cached record, refreshing its recency.

        Args:
            key: The source key

        Returns:
            The cached record, or None when missing or expired
        """
        with self._lock:
            self._expire()
            return self._cache.get(key)

    def put(self, key: str, value: ResolvedMetadata) -> None:
        """Store a record, replacing any previous one for the key.

        Args:
            key: The source key
            value: The record to cache

        Raises:
            TypeError: If value is not a ResolvedMetadata
        """
        if not isinstance(value, ResolvedMetadata):
            raise TypeError(f"Expected ResolvedMetadata, got {type(value).__name__}")

        with self._lock:
            self._expire()
            self._cache[key] = value

    def delete(self, key: str) -> bool:
        """Remove a record.

        Args:
            key: The source key

        Returns:
            True if an entry was removed, False otherwise
        """
        with self._lock:
            self._expire()
            return self._cache.pop(key, None) is not None

    def clear(self) -> int:
        """Remove all records.

        Returns:
            Number of entries removed
        """
        with self._lock:
            self._expire()
            keys = list(self._cache.keys())
            # TTLCache.clear pops items one by one, which would count as evictions
            for key in keys:
                del self._cache[key]
            return len(keys)

    def keys(self) -> list[str]:
        """Live keys, oldest insertion first."""
        with self._lock:
            self._expire()
            return list(self._cache.keys())

    def __len__(self) -> int:
        with self._lock:
            self._expire()
            return len(self._cache)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            self._expire()
            return key in self._cache

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with size, limits and eviction counters
        """
        with self._lock:
            self._expire()
            return {
                "total_entries": len(self._cache),
                "max_size": self._max_size,
                "ttl_seconds": self._ttl,
                "evictions": self._cache.evictions,
                "expirations": self._expirations,
            }

    @property
    def max_size(self) -> int:
        """Get the capacity."""
        return self._max_size

    @property
    def ttl(self) -> float:
        """Get the entry time-to-live in seconds."""
        return self._ttl
