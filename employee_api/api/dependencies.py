"""Request Dependencies — wires EmployeeService to the lifespan-owned upstream client.

Invariants:
    - The upstream client lives on app.state, created and closed by the lifespan
    - Tests override get_employee_source; nothing else needs patching
"""

from fastapi import Depends, Request

from employee_api.core.source_protocols import EmployeeSource
from employee_api.services.employee_service import EmployeeService


def get_employee_source(request: Request) -> EmployeeSource:
    return request.app.state.upstream_client


def get_employee_service(
    source: EmployeeSource = Depends(get_employee_source),
) -> EmployeeService:
    return EmployeeService(source)
