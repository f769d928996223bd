"""
Caching layer in front of the employee server client.
"""

from typing import List
from uuid import UUID

from shared.logging import get_logger
from ..adapters.employee_server_client import EmployeeServerClient
from ..domain.models import Employee, EmployeeInput
from ..domain.results import Result
from .cache_manager import ALL_EMPLOYEES_KEY, CacheManager


class CachedEmployeeServerClient:
    """Read-through cache over :class:`EmployeeServerClient`.

    Reads are served from the cache when warm and stored only on success.
    Writes go straight to the server and evict what they made stale:

    - create evicts the "all employees" entry
    - delete evicts the "all employees" entry and that employee's own entry
    """

    def __init__(self, server_client: EmployeeServerClient, cache_manager: CacheManager):
        self.server_client = server_client
        self.cache_manager = cache_manager
        self.logger = get_logger("employee.cached_client")

    async def get_all(self) -> Result[List[Employee]]:
        cache = self.cache_manager.all_employees
        cached = cache.get(ALL_EMPLOYEES_KEY)
        if cached is not None:
            self.logger.debug("All employees served from cache", count=len(cached))
            return Result.ok(list(cached))

        token = cache.generation(ALL_EMPLOYEES_KEY)
        try:
            result = await self.server_client.fetch_all()
            if result.is_ok:
                cache.put(ALL_EMPLOYEES_KEY, tuple(result.value), generation=token)
        finally:
            cache.release(ALL_EMPLOYEES_KEY)
        return result

    async def get_by_id(self, employee_id: UUID) -> Result[Employee]:
        cache = self.cache_manager.employee_by_id
        cached = cache.get(employee_id)
        if cached is not None:
            self.logger.debug("Employee served from cache", employee_id=str(employee_id))
            return Result.ok(cached)

        token = cache.generation(employee_id)
        try:
            result = await self.server_client.fetch_by_id(employee_id)
            if result.is_ok:
                cache.put(employee_id, result.value, generation=token)
        finally:
            cache.release(employee_id)
        return result

    async def create_and_invalidate(self, employee_input: EmployeeInput) -> Result[Employee]:
        result = await self.server_client.create(employee_input)
        if result.is_ok:
            # A new id was never cached, so per-id entries stay warm
            self.cache_manager.all_employees.evict(ALL_EMPLOYEES_KEY)
        return result

    async def remove_and_invalidate(self, employee_id: UUID) -> Result[str]:
        # The existence check inside remove() goes to the server, not the cache
        result = await self.server_client.remove(employee_id)
        if result.is_ok:
            self.cache_manager.all_employees.evict(ALL_EMPLOYEES_KEY)
            self.cache_manager.employee_by_id.evict(employee_id)
        return result
