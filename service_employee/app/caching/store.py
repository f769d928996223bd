"""
In-process key-value cache with explicit eviction.
"""

import threading
from typing import Any, Dict, Hashable, Optional, Tuple

from shared.logging import get_logger
from shared.metrics import MetricsCollector

# (cache epoch, per-key generation) captured before a populating read
GenerationToken = Tuple[int, int]


class InMemoryCache:
    """Named cache region with no TTL; entries live until evicted.

    A reader captures a token with ``generation`` before its upstream call,
    passes it to ``put``, and calls ``release`` once done. Evicting a key
    that has readers in flight bumps its generation, and ``evict_all`` bumps
    the region epoch; either makes the outstanding tokens stale, so an
    in-flight read cannot resurrect data a write just invalidated.
    Generations are kept only while a key has readers in flight.
    """

    def __init__(self, name: str, metrics: Optional[MetricsCollector] = None):
        self.name = name
        self.metrics = metrics
        self.logger = get_logger(f"employee.cache.{name}")

        self._entries: Dict[Hashable, Any] = {}
        self._readers: Dict[Hashable, int] = {}
        self._generations: Dict[Hashable, int] = {}
        self._epoch = 0
        self._lock = threading.Lock()

        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._stale_puts = 0

    def get(self, key: Hashable) -> Optional[Any]:
        """Return the cached value, or ``None`` on a miss."""
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self._misses += 1
            else:
                self._hits += 1

        if self.metrics:
            counter = "cache_misses_total" if value is None else "cache_hits_total"
            self.metrics.increment_counter(counter, cache_type=self.name)
        return value

    def generation(self, key: Hashable) -> GenerationToken:
        """Register a reader for ``key`` and capture its eviction state.

        Every call must be paired with ``release``.
        """
        with self._lock:
            self._readers[key] = self._readers.get(key, 0) + 1
            return self._epoch, self._generations.get(key, 0)

    def release(self, key: Hashable) -> None:
        """Drop a reader registered by ``generation``."""
        with self._lock:
            remaining = self._readers.get(key, 0) - 1
            if remaining > 0:
                self._readers[key] = remaining
            else:
                self._readers.pop(key, None)
                self._generations.pop(key, None)

    def put(self, key: Hashable, value: Any, *, generation: Optional[GenerationToken] = None) -> bool:
        """Store ``value`` under ``key``.

        Returns False without storing when ``generation`` no longer matches.
        """
        if value is None:
            raise ValueError("None cannot be cached")

        with self._lock:
            current = (self._epoch, self._generations.get(key, 0))
            if generation is not None and generation != current:
                self._stale_puts += 1
                stored = False
            else:
                self._entries[key] = value
                stored = True

        if not stored:
            self.logger.debug("Skipped stale cache store", key=str(key))
        return stored

    def evict(self, key: Hashable) -> None:
        """Remove one entry; other keys are untouched."""
        with self._lock:
            self._entries.pop(key, None)
            if key in self._readers:
                self._generations[key] = self._generations.get(key, 0) + 1
            self._evictions += 1

        if self.metrics:
            self.metrics.increment_counter("cache_evictions_total", cache_type=self.name)
        self.logger.debug("Evicted cache entry", key=str(key))

    def evict_all(self) -> None:
        """Remove every entry in this region."""
        with self._lock:
            self._entries.clear()
            # The epoch bump invalidates every outstanding token
            self._generations.clear()
            self._epoch += 1
            self._evictions += 1

        if self.metrics:
            self.metrics.increment_counter("cache_evictions_total", cache_type=self.name)
        self.logger.debug("Evicted all cache entries")

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def stats(self) -> Dict[str, Any]:
        """Hit/miss counters for this region."""
        with self._lock:
            total = self._hits + self._misses
            return {
                "name": self.name,
                "size": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
                "evictions": self._evictions,
                "stale_puts": self._stale_puts,
                "hit_rate": (self._hits / total) if total > 0 else 0.0,
            }
