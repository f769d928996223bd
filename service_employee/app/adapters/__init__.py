"""
Adapters package for the Employee Service.

Contains the HTTP client for the upstream employee server and the
mapping between its wire format and domain records. Adapters never
touch the cache.
"""

from .employee_server_client import EmployeeServerClient
from .employee_mapper import EmployeeEntity, EmployeeServerResponse, to_employee

__all__ = [
    "EmployeeServerClient",
    "EmployeeEntity",
    "EmployeeServerResponse",
    "to_employee",
]
