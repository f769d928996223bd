"""
Test helper functions and factory methods for the Employee API.
"""

import json
import uuid
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field

import httpx

EMPLOYEE_SERVER_URL = "http://localhost:8112/api/v1/employee"


@dataclass
class SampleEmployee:
    """Employee data in both upstream and API shapes."""
    id: str
    name: str
    salary: Optional[int]
    age: Optional[int]
    title: Optional[str]
    email: Optional[str]

    def to_entity(self) -> Dict[str, Any]:
        """Upstream (employee server) representation."""
        return {
            "id": self.id,
            "employee_name": self.name,
            "employee_salary": self.salary,
            "employee_age": self.age,
            "employee_title": self.title,
            "employee_email": self.email,
        }

    def to_api(self) -> Dict[str, Any]:
        """Representation returned by the Employee API."""
        return {
            "id": self.id,
            "name": self.name,
            "salary": self.salary,
            "age": self.age,
            "title": self.title,
            "email": self.email,
        }


class EmployeeDataFactory:
    """Factory for creating test data."""

    @staticmethod
    def create_employee(
        name: str = "John Doe",
        salary: Optional[int] = 75000,
        age: Optional[int] = 30,
        title: Optional[str] = "Software Engineer",
        email: Optional[str] = None,
        employee_id: Optional[str] = None,
    ) -> SampleEmployee:
        """Create one employee with sensible defaults."""
        if email is None:
            email = f"{name.lower().replace(' ', '.')}@example.com"
        return SampleEmployee(
            id=employee_id or str(uuid.uuid4()),
            name=name,
            salary=salary,
            age=age,
            title=title,
            email=email,
        )

    @staticmethod
    def create_test_employees() -> List[SampleEmployee]:
        """Three employees with distinct salaries."""
        return [
            EmployeeDataFactory.create_employee("John Doe", 75000, 30, "Software Engineer"),
            EmployeeDataFactory.create_employee("Jane Smith", 85000, 28, "Senior Software Engineer"),
            EmployeeDataFactory.create_employee("Bob Johnson", 65000, 35, "Junior Developer"),
        ]


def create_envelope(data: Any, status: str = "Successfully processed request.", error: Optional[str] = None) -> Dict[str, Any]:
    """Wrap a payload the way the employee server does."""
    return {"data": data, "status": status, "error": error}


def create_mock_response(
    status_code: int = 200,
    data: Any = None,
    *,
    method: str = "GET",
    url: str = EMPLOYEE_SERVER_URL,
    body: Optional[Any] = None,
) -> httpx.Response:
    """Build an ``httpx.Response`` carrying an employee server envelope.

    ``body`` overrides the envelope entirely (use it for malformed bodies).
    """
    content = body if body is not None else create_envelope(data)
    if not isinstance(content, (str, bytes)):
        content = json.dumps(content)
    return httpx.Response(
        status_code=status_code,
        content=content,
        request=httpx.Request(method, url),
    )


@dataclass
class FakeEmployeeServer:
    """Stateful stand-in for the upstream employee server.

    Use ``transport()`` to plug it into ``httpx.AsyncClient``. Every request
    is recorded in ``calls`` as ``(method, path)``.
    """
    base_path: str = "/api/v1/employee"
    employees: Dict[str, SampleEmployee] = field(default_factory=dict)
    calls: List[tuple] = field(default_factory=list)
    fail_with: Optional[int] = None
    delete_result: Optional[bool] = None

    def add(self, employee: SampleEmployee) -> SampleEmployee:
        self.employees[employee.id] = employee
        return employee

    def count(self, method: str, path: Optional[str] = None) -> int:
        """Number of recorded calls for a method (and optionally a path)."""
        return sum(
            1 for call_method, call_path in self.calls
            if call_method == method and (path is None or call_path == path)
        )

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls.append((request.method, path))

        if self.fail_with is not None:
            return httpx.Response(self.fail_with, json={"error": "upstream failure"})

        if path == self.base_path:
            if request.method == "GET":
                return httpx.Response(
                    200, json=create_envelope([e.to_entity() for e in self.employees.values()])
                )
            if request.method == "POST":
                payload = json.loads(request.content)
                employee = self.add(EmployeeDataFactory.create_employee(
                    name=payload["name"],
                    salary=payload.get("salary"),
                    age=payload.get("age"),
                    title=payload.get("title"),
                ))
                return httpx.Response(200, json=create_envelope(employee.to_entity()))
            if request.method == "DELETE":
                payload = json.loads(request.content)
                if self.delete_result is not None:
                    return httpx.Response(200, json=create_envelope(self.delete_result))
                for employee_id, employee in list(self.employees.items()):
                    if employee.name == payload.get("name"):
                        del self.employees[employee_id]
                        return httpx.Response(200, json=create_envelope(True))
                return httpx.Response(200, json=create_envelope(False))

        if path.startswith(self.base_path + "/") and request.method == "GET":
            employee = self.employees.get(path.rsplit("/", 1)[-1])
            if employee is None:
                return httpx.Response(404, json=create_envelope(None, status="Not Found"))
            return httpx.Response(200, json=create_envelope(employee.to_entity()))

        return httpx.Response(405, json={"error": "unsupported"})
