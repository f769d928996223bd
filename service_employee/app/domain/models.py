"""
Employee domain models.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class Employee(BaseModel):
    """Employee record as exposed by the API.

    Only ``id`` and ``name`` are guaranteed; the remaining fields mirror
    whatever the upstream server returned and may be ``None``.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[UUID] = None
    name: Optional[str] = None
    salary: Optional[int] = None
    age: Optional[int] = None
    title: Optional[str] = None
    email: Optional[str] = None


class EmployeeInput(BaseModel):
    """Fields a caller supplies to create an employee."""

    model_config = ConfigDict(frozen=True)

    name: str
    salary: Optional[int] = None
    age: Optional[int] = None
    title: Optional[str] = None
