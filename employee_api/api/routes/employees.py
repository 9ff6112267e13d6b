"""Employee Routes — REST endpoints for employee queries, creation and deletion.

Invariants:
    - Fixed paths (/highestSalary, /topTenHighestEarningEmployeeNames) registered before /{employee_id}
    - Empty results are 200 with [] or 0, never 404
    - Not-found and upstream failures surface as EmployeeApiError → global handler
    - CreateEmployeeInput validated by Pydantic before the handler runs (400 on failure)
"""

import logging

from fastapi import APIRouter, Depends, status

from employee_api.api.dependencies import get_employee_service
from employee_api.config import Settings, get_settings
from employee_api.schemas.employee import CreateEmployeeInput, EmployeeResponse
from employee_api.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeResponse])
async def get_all_employees(
    service: EmployeeService = Depends(get_employee_service),
):
    """All employees currently known upstream."""
    logger.info("Received request to get all employees")
    employees = await service.find_all()
    return [EmployeeResponse.from_record(e) for e in employees]


@router.get("/search/{search_string}", response_model=list[EmployeeResponse])
async def search_employees_by_name(
    search_string: str,
    service: EmployeeService = Depends(get_employee_service),
):
    """Employees whose name contains search_string (case-sensitive)."""
    logger.info(f"Received request to search employees by name: {search_string}")
    matches = await service.find_by_name(search_string)
    return [EmployeeResponse.from_record(e) for e in matches]


@router.get("/highestSalary", response_model=int)
async def get_highest_salary(
    service: EmployeeService = Depends(get_employee_service),
):
    logger.info("Received request to get highest salary of employees")
    return await service.highest_salary()


@router.get(
    "/topTenHighestEarningEmployeeNames", response_model=list[str | None],
)
async def get_top_earning_employee_names(
    service: EmployeeService = Depends(get_employee_service),
    settings: Settings = Depends(get_settings),
):
    logger.info(
        f"Received request to get top {settings.top_earners_count} earning employee names",
    )
    return await service.top_earning_names(settings.top_earners_count)


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    logger.info(
        f"Received request to get employee by id: {employee_id}",
        extra={"employee_id": employee_id},
    )
    employee = await service.find_by_id(employee_id)
    return EmployeeResponse.from_record(employee)


@router.post(
    "", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    body: CreateEmployeeInput,
    service: EmployeeService = Depends(get_employee_service),
):
    logger.info(f"Received request to create employee: {body.name}")
    created = await service.create(body.model_dump())
    return EmployeeResponse.from_record(created)


@router.delete("/{employee_id}", response_model=str)
async def delete_employee_by_id(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
):
    """Delete by id. The upstream deletes by name, so the record is fetched first."""
    logger.info(
        f"Received request to delete employee: {employee_id}",
        extra={"employee_id": employee_id},
    )
    return await service.delete_by_id(employee_id)
