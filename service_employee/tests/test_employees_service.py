"""
Unit tests for EmployeesService.
"""

import uuid
import pytest
from unittest.mock import AsyncMock

from service_employee.app.caching.cached_client import CachedEmployeeServerClient
from service_employee.app.domain.employees import EmployeesService
from service_employee.app.domain.models import Employee, EmployeeInput
from service_employee.app.domain.results import Result


class TestEmployeesService:
    """Test cases for EmployeesService."""

    @pytest.fixture
    def staff(self):
        return [
            Employee(id=uuid.uuid4(), name="John Doe", salary=75000),
            Employee(id=uuid.uuid4(), name="Jane Smith", salary=85000),
            Employee(id=uuid.uuid4(), name="Bob Johnson", salary=65000),
        ]

    @pytest.fixture
    def employees(self, staff):
        """Cached client double returning the sample staff."""
        employees = AsyncMock(spec=CachedEmployeeServerClient)
        employees.get_all.return_value = Result.ok(staff)
        return employees

    @pytest.fixture
    def service(self, employees):
        """Create EmployeesService instance."""
        return EmployeesService(employees)

    @pytest.mark.asyncio
    async def test_get_all_employees(self, service, staff):
        assert await service.get_all_employees() == staff

    @pytest.mark.asyncio
    async def test_get_all_employees_failure(self, service, employees):
        employees.get_all.return_value = Result.failure("employee server unavailable")
        assert await service.get_all_employees() is None

    @pytest.mark.asyncio
    async def test_search(self, service):
        names = [e.name for e in await service.get_employees_by_name_search("jo")]
        assert names == ["John Doe", "Bob Johnson"]

    @pytest.mark.asyncio
    async def test_search_failure(self, service, employees):
        employees.get_all.return_value = Result.failure("employee server unavailable")
        assert await service.get_employees_by_name_search("jo") is None

    @pytest.mark.asyncio
    async def test_highest_salary(self, service):
        assert await service.get_highest_salary() == 85000

    @pytest.mark.asyncio
    async def test_highest_salary_empty(self, service, employees):
        employees.get_all.return_value = Result.ok([])
        assert await service.get_highest_salary() is None

    @pytest.mark.asyncio
    async def test_top_ten(self, service):
        assert await service.get_top_ten_earner_names() == ["Jane Smith", "John Doe", "Bob Johnson"]

    @pytest.mark.asyncio
    async def test_top_ten_capped(self, service, employees):
        employees.get_all.return_value = Result.ok([
            Employee(id=uuid.uuid4(), name=f"E{i}", salary=i) for i in range(20)
        ])
        assert len(await service.get_top_ten_earner_names()) == 10

    @pytest.mark.asyncio
    async def test_get_employee_by_id(self, service, employees, staff):
        employees.get_by_id.return_value = Result.ok(staff[0])

        assert await service.get_employee_by_id(staff[0].id) == staff[0]
        employees.get_by_id.assert_awaited_once_with(staff[0].id)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("outcome", [Result.not_found(), Result.failure("boom")])
    async def test_get_employee_by_id_no_result(self, service, employees, outcome):
        employees.get_by_id.return_value = outcome
        assert await service.get_employee_by_id(uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_create_employee(self, service, employees):
        created = Employee(id=uuid.uuid4(), name="Alice Johnson", salary=95000)
        employees.create_and_invalidate.return_value = Result.ok(created)
        employee_input = EmployeeInput(name="Alice Johnson", salary=95000)

        assert await service.create_employee(employee_input) == created
        employees.create_and_invalidate.assert_awaited_once_with(employee_input)

    @pytest.mark.asyncio
    async def test_create_employee_failure(self, service, employees):
        employees.create_and_invalidate.return_value = Result.failure("boom")
        assert await service.create_employee(EmployeeInput(name="Alice Johnson")) is None

    @pytest.mark.asyncio
    async def test_delete_employee(self, service, employees):
        employee_id = uuid.uuid4()
        employees.remove_and_invalidate.return_value = Result.ok("John Doe")

        assert await service.delete_employee_by_id(employee_id) == "John Doe"
        employees.remove_and_invalidate.assert_awaited_once_with(employee_id)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("outcome", [Result.not_found(), Result.failure("not deleted")])
    async def test_delete_employee_no_result(self, service, employees, outcome):
        employees.remove_and_invalidate.return_value = outcome
        assert await service.delete_employee_by_id(uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_derived_reads_share_one_fetch_each(self, service, employees):
        """Each derived read asks the cached client for the full list once."""
        await service.get_highest_salary()
        await service.get_top_ten_earner_names()
        await service.get_employees_by_name_search("a")

        assert employees.get_all.await_count == 3
