"""
Employee caching package.

Provides in-process cache regions and the read-through client that
fronts the employee server. Invalidation is explicit and happens on
writes; there is no TTL.
"""

from .cache_manager import (
    ALL_EMPLOYEES_CACHE,
    ALL_EMPLOYEES_KEY,
    EMPLOYEE_BY_ID_CACHE,
    CacheManager,
)
from .cached_client import CachedEmployeeServerClient
from .store import InMemoryCache

__all__ = [
    "ALL_EMPLOYEES_CACHE",
    "ALL_EMPLOYEES_KEY",
    "EMPLOYEE_BY_ID_CACHE",
    "CacheManager",
    "CachedEmployeeServerClient",
    "InMemoryCache",
]
