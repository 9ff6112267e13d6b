"""Employee Service — fetches a snapshot from the source, applies the pure directory queries.

Invariants:
    - Every read re-fetches from the source (no caching between calls)
    - Only identity lookups escalate: absent record → EmployeeNotFoundError
    - create is a pass-through; delete resolves id → name, then deletes by name
    - A record with no name cannot be deleted (upstream deletes by name) → not found
"""

import logging

from employee_api.core import employee_directory
from employee_api.core.domain_types import EmployeeRecord
from employee_api.core.errors import EmployeeNotFoundError
from employee_api.core.source_protocols import EmployeeSource

logger = logging.getLogger(__name__)


class EmployeeService:
    """Coordinates the upstream source and the employee directory queries."""

    def __init__(self, source: EmployeeSource):
        self.source = source

    async def find_all(self) -> list[EmployeeRecord]:
        logger.info("Fetching all employees from upstream")
        employees = await self.source.fetch_all()
        logger.debug(
            f"Found {len(employees)} employees upstream",
            extra={"count": len(employees)},
        )
        return employees

    async def find_by_name(self, search_string: str) -> list[EmployeeRecord]:
        logger.info(f"Searching employees by name containing '{search_string}'")
        employees = await self.source.fetch_all()
        matches = employee_directory.filter_by_name_contains(employees, search_string)
        logger.debug(
            f"Filtered list size: {len(matches)}", extra={"count": len(matches)},
        )
        return matches

    async def find_by_id(self, employee_id: str) -> EmployeeRecord:
        logger.info(
            f"Looking up employee {employee_id}",
            extra={"employee_id": employee_id},
        )
        employee = await self.source.fetch_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    async def highest_salary(self) -> int:
        logger.info("Fetching all employees to determine highest salary")
        employees = await self.source.fetch_all()
        highest = employee_directory.max_salary(employees)
        logger.debug(f"Highest salary determined as: {highest}")
        return highest

    async def top_earning_names(self, count: int) -> list[str | None]:
        logger.info(f"Fetching all employees to determine top {count} earners")
        employees = await self.source.fetch_all()
        names = employee_directory.top_earning_names(employees, count)
        logger.debug(f"Top earners found: {names}")
        return names

    async def create(self, employee_data: dict) -> EmployeeRecord:
        logger.info(f"Creating employee upstream: {employee_data.get('name')}")
        created = await self.source.create(employee_data)
        logger.debug(
            f"Created employee {created.id}", extra={"employee_id": created.id},
        )
        return created

    async def delete_by_id(self, employee_id: str) -> str:
        """Delete by id. Returns the confirmation message shown to the caller."""
        employee = await self.source.fetch_by_id(employee_id)
        if employee is None or employee.name is None:
            logger.warning(
                f"Employee {employee_id} not found or has no name, cannot delete",
                extra={"employee_id": employee_id},
            )
            raise EmployeeNotFoundError(employee_id)

        await self.source.delete_by_name(employee.name)
        message = (
            f"Employee with ID {employee_id} and name {employee.name} "
            "deleted successfully."
        )
        logger.info(message, extra={"employee_id": employee_id})
        return message
