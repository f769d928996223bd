"""
Employee operations exposed to the routing layer.
"""

from typing import List, Optional, TYPE_CHECKING
from uuid import UUID

from shared.logging import get_logger
from .models import Employee, EmployeeInput
from .operations import filter_by_name_contains, max_salary, top_earner_names
from .results import Result

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from ..caching.cached_client import CachedEmployeeServerClient

TOP_EARNERS_LIMIT = 10


class EmployeesService:
    """Composes the cached employee client with the list operations.

    Every method returns its value or ``None`` when there is no result;
    not-found and upstream failure are logged separately before they are
    collapsed. Nothing here retries.
    """

    def __init__(self, employees: "CachedEmployeeServerClient"):
        self.employees = employees
        self.logger = get_logger("employee.service")

    async def get_all_employees(self) -> Optional[List[Employee]]:
        result = await self.employees.get_all()
        return self._unwrap("get_all_employees", result)

    async def get_employees_by_name_search(self, search_string: str) -> Optional[List[Employee]]:
        result = await self.employees.get_all()
        employees = self._unwrap("get_employees_by_name_search", result)
        if employees is None:
            return None
        return filter_by_name_contains(employees, search_string)

    async def get_employee_by_id(self, employee_id: UUID) -> Optional[Employee]:
        result = await self.employees.get_by_id(employee_id)
        return self._unwrap("get_employee_by_id", result, employee_id=employee_id)

    async def get_highest_salary(self) -> Optional[int]:
        result = await self.employees.get_all()
        employees = self._unwrap("get_highest_salary", result)
        if employees is None:
            return None
        return max_salary(employees)

    async def get_top_ten_earner_names(self) -> Optional[List[str]]:
        result = await self.employees.get_all()
        employees = self._unwrap("get_top_ten_earner_names", result)
        if employees is None:
            return None
        return top_earner_names(employees, TOP_EARNERS_LIMIT)

    async def create_employee(self, employee_input: EmployeeInput) -> Optional[Employee]:
        result = await self.employees.create_and_invalidate(employee_input)
        return self._unwrap("create_employee", result)

    async def delete_employee_by_id(self, employee_id: UUID) -> Optional[str]:
        result = await self.employees.remove_and_invalidate(employee_id)
        return self._unwrap("delete_employee_by_id", result, employee_id=employee_id)

    def _unwrap(self, operation: str, result: Result, employee_id: Optional[UUID] = None):
        if result.is_ok:
            return result.value

        context = {"operation": operation, "outcome": result.outcome.value, "reason": result.error}
        if employee_id is not None:
            context["employee_id"] = str(employee_id)

        if result.is_not_found:
            self.logger.info("No result", **context)
        else:
            self.logger.warning("No result", **context)
        return None
