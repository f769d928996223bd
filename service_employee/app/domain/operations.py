"""
Pure computations over an already-fetched employee list.
"""

from typing import List, Optional, Sequence

from .models import Employee


def filter_by_name_contains(employees: Sequence[Employee], needle: str) -> List[Employee]:
    """Return employees whose name contains ``needle``, ignoring case.

    An empty needle matches every employee.
    """
    if not needle:
        return list(employees)

    lowered = needle.lower()
    return [
        employee for employee in employees
        if employee.name is not None and lowered in employee.name.lower()
    ]


def max_salary(employees: Sequence[Employee]) -> Optional[int]:
    """Return the highest salary, or ``None`` when there is nothing to compare."""
    salaries = [employee.salary for employee in employees if employee.salary is not None]
    return max(salaries) if salaries else None


def top_earner_names(employees: Sequence[Employee], n: int = 10) -> List[str]:
    """Return up to ``n`` names ordered by salary, highest first."""
    if n <= 0:
        return []

    # Missing salaries sort after every real one
    ranked = sorted(
        employees,
        key=lambda employee: (employee.salary is None, -(employee.salary or 0)),
    )
    return [employee.name for employee in ranked[:n]]
