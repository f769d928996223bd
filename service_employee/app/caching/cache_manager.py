"""
Cache manager owning the employee cache regions.
"""

from typing import Any, Dict, Optional

from shared.logging import get_logger
from shared.metrics import MetricsCollector
from .store import InMemoryCache

ALL_EMPLOYEES_CACHE = "all_employees"
EMPLOYEE_BY_ID_CACHE = "employee_by_id"

# The collection region holds a single entry under this key
ALL_EMPLOYEES_KEY = "all"


class CacheManager:
    """Owns one :class:`InMemoryCache` per region.

    Instances are injected rather than shared globally, so each service
    (and each test) gets an isolated set of caches.
    """

    CACHE_NAMES = (ALL_EMPLOYEES_CACHE, EMPLOYEE_BY_ID_CACHE)

    def __init__(self, metrics: Optional[MetricsCollector] = None):
        self.logger = get_logger("employee.cache_manager")
        self.metrics = metrics
        self._caches: Dict[str, InMemoryCache] = {
            name: InMemoryCache(name, metrics=metrics) for name in self.CACHE_NAMES
        }

    @property
    def all_employees(self) -> InMemoryCache:
        return self._caches[ALL_EMPLOYEES_CACHE]

    @property
    def employee_by_id(self) -> InMemoryCache:
        return self._caches[EMPLOYEE_BY_ID_CACHE]

    def clear_all(self) -> None:
        """Evict every entry in every region."""
        for cache in self._caches.values():
            cache.evict_all()
        self.logger.info("Cleared all caches")

    def stats(self) -> Dict[str, Dict[str, Any]]:
        """Per-region statistics."""
        return {name: cache.stats() for name, cache in self._caches.items()}
