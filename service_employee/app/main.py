"""
Employee API service.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

import httpx

from shared.base_service import BaseService
from shared.errors import ExternalServiceError, NotFoundError, ValidationError
from .adapters import EmployeeServerClient
from .caching import CacheManager, CachedEmployeeServerClient
from .domain import Employee, EmployeeInput, EmployeesService

API_PREFIX = "/api/v1/employee"


class EmployeeApiService(BaseService):
    """Employee API service implementation."""

    def __init__(
        self,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        cache_manager: Optional[CacheManager] = None,
    ):
        super().__init__("employee", 8111)
        self.server_client = EmployeeServerClient(
            self.config.employee_server_url,
            timeout=self.config.upstream_timeout_seconds,
            metrics=self.metrics,
            transport=transport,
        )
        self.cache_manager = cache_manager or CacheManager(metrics=self.metrics)
        self.cached_client = CachedEmployeeServerClient(self.server_client, self.cache_manager)
        self.employees_service = EmployeesService(self.cached_client)

        self._setup_employee_routes()

        # Expose service instance via app state for introspection/testing
        self.app.state.employee_service = self

    def _setup_employee_routes(self):
        """Set up employee routes."""

        @self.app.get("/")
        async def root():
            """Root endpoint."""
            return {
                "service": "employee",
                "message": "Employee API",
                "version": "1.0.0"
            }

        @self.app.get(API_PREFIX, response_model=List[Employee])
        async def get_all_employees():
            """List every employee."""
            self.logger.info("Request to get all employees")
            employees = await self.employees_service.get_all_employees()
            if employees is None:
                raise self._upstream_unavailable()
            return employees

        @self.app.get(f"{API_PREFIX}/search/{{search_string}}", response_model=List[Employee])
        async def get_employees_by_name_search(search_string: str):
            """List employees whose name contains the search string."""
            self.logger.info("Request to search employees by name", search_string=search_string)
            employees = await self.employees_service.get_employees_by_name_search(search_string)
            if employees is None:
                raise self._upstream_unavailable()
            return employees

        @self.app.get(f"{API_PREFIX}/highestSalary", response_model=Optional[int])
        async def get_highest_salary_of_employees():
            """Highest salary across all employees, or null when there are none."""
            self.logger.info("Request to get highest salary of employees")
            if await self.employees_service.get_all_employees() is None:
                raise self._upstream_unavailable()
            # The collection is warm now, so this reads from the cache
            return await self.employees_service.get_highest_salary()

        @self.app.get(f"{API_PREFIX}/topTenHighestEarningEmployeeNames", response_model=List[str])
        async def get_top_ten_highest_earning_employee_names():
            """Names of the ten best-paid employees."""
            self.logger.info("Request to get top ten employee names")
            names = await self.employees_service.get_top_ten_earner_names()
            if names is None:
                raise self._upstream_unavailable()
            return names

        @self.app.get(f"{API_PREFIX}/{{employee_id}}", response_model=Employee)
        async def get_employee_by_id(employee_id: str):
            """Fetch one employee."""
            self.logger.info("Request to get employee by id", employee_id=employee_id)
            uuid = self._validate_and_parse_uuid(employee_id)
            employee = await self.employees_service.get_employee_by_id(uuid)
            if employee is None:
                raise NotFoundError(f"Employee {uuid} not found", details={"employee_id": str(uuid)})
            return employee

        @self.app.post(API_PREFIX, response_model=Employee, status_code=201)
        async def create_employee(employee_input: EmployeeInput):
            """Create an employee."""
            self.logger.info("Request to create a new employee", name=employee_input.name)
            employee = await self.employees_service.create_employee(employee_input)
            if employee is None:
                raise self._upstream_unavailable()
            return employee

        @self.app.delete(f"{API_PREFIX}/{{employee_id}}", response_model=str)
        async def delete_employee_by_id(employee_id: str):
            """Delete an employee and return its name."""
            self.logger.info("Request to delete employee by id", employee_id=employee_id)
            uuid = self._validate_and_parse_uuid(employee_id)
            name = await self.employees_service.delete_employee_by_id(uuid)
            if name is None:
                raise NotFoundError(f"Employee {uuid} not found", details={"employee_id": str(uuid)})
            return name

    def _validate_and_parse_uuid(self, employee_id: str) -> UUID:
        """Reject blank or malformed identifiers before they reach the core."""
        if employee_id is None or not employee_id.strip():
            raise ValidationError("UUID cannot be null or empty")
        try:
            return UUID(employee_id)
        except ValueError:
            raise ValidationError(
                f"Invalid UUID format: {employee_id}",
                details={"employee_id": employee_id},
            ) from None

    def _upstream_unavailable(self) -> ExternalServiceError:
        return ExternalServiceError(
            service="employee_server",
            message="Employee data is currently unavailable",
        )

    async def on_shutdown(self) -> None:
        """Drop cached employee data."""
        self.cache_manager.clear_all()

    async def _check_dependencies(self) -> Dict[str, Any]:
        """Report cache state alongside the configured upstream."""
        return {
            "employee_server": self.config.employee_server_url,
            "cache": self.cache_manager.stats(),
        }


def create_app(**kwargs):
    """Create FastAPI application."""
    service = EmployeeApiService(**kwargs)
    return service.app


if __name__ == "__main__":
    service = EmployeeApiService()
    service.run()
