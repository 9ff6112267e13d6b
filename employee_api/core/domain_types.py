"""Domain Types — the employee record and its identity type.

Invariants:
    - EmployeeRecord is frozen: the core filters, sorts and selects, never mutates
    - Every field except id is optional; an absent salary means "unknown", not zero
    - EmployeeId is opaque — assigned upstream, compared by exact equality only

Design Decisions:
    - Frozen dataclass over Pydantic model: core stays free of wire concerns,
      schemas/employee.py owns the JSON aliases
"""

from dataclasses import dataclass
from typing import NewType


EmployeeId = NewType("EmployeeId", str)


@dataclass(frozen=True)
class EmployeeRecord:
    """One employee as returned by the upstream source."""
    id: EmployeeId
    name: str | None = None
    salary: int | None = None
    age: int | None = None
    title: str | None = None
    email: str | None = None
