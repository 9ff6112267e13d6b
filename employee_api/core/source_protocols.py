"""Boundary Protocols — contract between the service layer and the upstream source.

Invariants:
    - Services NEVER import the HTTP client — dependency arrows point inward only
    - fetch_all never returns None: an empty upstream answer is []
    - fetch_by_id returns None for "not found"; exceptions are for transport failures only
    - Implementations provided by infrastructure via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no base class
    - Async in Protocol: implementations do IO; core functions stay sync and pure
"""

from typing import Protocol

from employee_api.core.domain_types import EmployeeRecord


class EmployeeSource(Protocol):
    """Contract for the upstream employee provider — implemented by infrastructure."""
    async def fetch_all(self) -> list[EmployeeRecord]: ...
    async def fetch_by_id(self, employee_id: str) -> EmployeeRecord | None: ...
    async def create(self, employee_data: dict) -> EmployeeRecord: ...
    async def delete_by_name(self, name: str) -> None: ...
