"""
Wire models for the upstream employee server and their mapping to domain records.
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from ..domain.models import Employee, EmployeeInput

T = TypeVar("T")


class EmployeeEntity(BaseModel):
    """Employee as serialized by the upstream server."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[UUID] = None
    employee_name: Optional[str] = None
    employee_salary: Optional[int] = None
    employee_age: Optional[int] = None
    employee_title: Optional[str] = None
    employee_email: Optional[str] = None


class EmployeeServerResponse(BaseModel, Generic[T]):
    """Envelope wrapping every upstream response body."""

    model_config = ConfigDict(extra="ignore")

    data: Optional[T] = None
    status: Optional[str] = None
    error: Optional[str] = None


EmployeeListResponse = EmployeeServerResponse[List[EmployeeEntity]]
EmployeeResponse = EmployeeServerResponse[EmployeeEntity]
DeleteResponse = EmployeeServerResponse[bool]


def to_employee(entity: Optional[EmployeeEntity]) -> Optional[Employee]:
    """Translate an upstream entity, passing missing fields through as ``None``."""
    if entity is None:
        return None

    return Employee(
        id=entity.id,
        name=entity.employee_name,
        salary=entity.employee_salary,
        age=entity.employee_age,
        title=entity.employee_title,
        email=entity.employee_email,
    )


def to_create_payload(employee_input: EmployeeInput) -> Dict[str, Any]:
    """Body for ``POST {base}``."""
    return {
        "name": employee_input.name,
        "salary": employee_input.salary,
        "age": employee_input.age,
        "title": employee_input.title,
    }


def to_delete_payload(name: str) -> Dict[str, Any]:
    """Body for ``DELETE {base}``; the upstream delete is keyed by name."""
    return {"name": name}
