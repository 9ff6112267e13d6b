"""Fake Employee Source — in-memory EmployeeSource for service and route tests.

Invariants:
    - Satisfies core.source_protocols.EmployeeSource structurally (no base class)
    - Records every write in `created` / `deleted_names` for assertions
    - fetch_by_id returns None for unknown ids, like the upstream client on 404
"""

from employee_api.core.domain_types import EmployeeId, EmployeeRecord


def employee(name, salary=None, emp_id=None, **fields):
    """Builder for test records; id defaults to a name-derived value."""
    return EmployeeRecord(
        id=EmployeeId(emp_id or f"id-{name}"), name=name, salary=salary, **fields,
    )


class FakeEmployeeSource:
    """In-memory stand-in for the upstream employee API."""

    def __init__(self, records=None):
        self.records = list(records or [])
        self.created = []
        self.deleted_names = []
        self.fetch_all_calls = 0

    async def fetch_all(self):
        self.fetch_all_calls += 1
        return list(self.records)

    async def fetch_by_id(self, employee_id):
        return next((r for r in self.records if r.id == employee_id), None)

    async def create(self, employee_data):
        self.created.append(employee_data)
        record = EmployeeRecord(
            id=EmployeeId(f"new-{len(self.created)}"),
            name=employee_data["name"],
            salary=employee_data["salary"],
            age=employee_data["age"],
            title=employee_data["title"],
            email=f"{employee_data['name'].lower().replace(' ', '.')}@company.com",
        )
        self.records.append(record)
        return record

    async def delete_by_name(self, name):
        self.deleted_names.append(name)
        self.records = [r for r in self.records if r.name != name]

    async def health_check(self):
        return True
