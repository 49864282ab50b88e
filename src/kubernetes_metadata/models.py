import threading
from dataclasses import dataclass, field


@dataclass
class EnrichmentMetrics:
    """Track outcomes of enrichment requests.

    Counters are updated from many worker threads, so every mutation goes
    through the instance lock.
    """

    total_requests: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    skipped: int = 0
    lookup_failures: int = 0
    cache_write_failures: int = 0
    total_lookup_time_ms: float = 0.0
    lookups: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate over requests that reached the cache."""
        lookups = self.cache_hits + self.cache_misses
        if lookups == 0:
            return 0.0
        return self.cache_hits / lookups

    @property
    def avg_lookup_time_ms(self) -> float:
        """Calculate average control-plane lookup time."""
        if self.lookups == 0:
            return 0.0
        return self.total_lookup_time_ms / self.lookups

    def record_hit(self) -> None:
        """Record a cache hit."""
        with self._lock:
            self.total_requests += 1
            self.cache_hits += 1

    def record_miss(self) -> None:
        """Record a cache miss."""
        with self._lock:
            self.total_requests += 1
            self.cache_misses += 1

    def record_skip(self) -> None:
        """Record a request with no usable source."""
        with self._lock:
            self.total_requests += 1
            self.skipped += 1

    def record_lookup(self, duration_ms: float, succeeded: bool) -> None:
        """Record a control-plane lookup."""
        with self._lock:
            self.lookups += 1
            self.total_lookup_time_ms += duration_ms
            if not succeeded:
                self.lookup_failures += 1

    def record_cache_write_failure(self) -> None:
        with self._lock:
            self.cache_write_failures += 1

    def reset(self) -> None:
        """Zero all counters."""
        with self._lock:
            self.total_requests = 0
            self.cache_hits = 0
            self.cache_misses = 0
            self.skipped = 0
            self.lookup_failures = 0
            self.cache_write_failures = 0
            self.total_lookup_time_ms = 0.0
            self.lookups = 0

    def to_dict(self) -> dict[str, float | int]:
        """Convert metrics to dictionary."""
        with self._lock:
            return {
                "total_requests": self.total_requests,
                "cache_hits": self.cache_hits,
                "cache_misses": self.cache_misses,
                "skipped": self.skipped,
                "hit_rate": self.hit_rate,
                "lookups": self.lookups,
                "lookup_failures": self.lookup_failures,
                "cache_write_failures": self.cache_write_failures,
                "avg_lookup_time_ms": self.avg_lookup_time_ms,
            }
