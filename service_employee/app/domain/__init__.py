"""
Domain package for the Employee Service.
"""

from .employees import EmployeesService
from .models import Employee, EmployeeInput
from .results import Outcome, Result

__all__ = [
    "Employee",
    "EmployeeInput",
    "EmployeesService",
    "Outcome",
    "Result",
]
