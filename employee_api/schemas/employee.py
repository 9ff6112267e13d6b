"""Employee Schemas — Pydantic models for the REST boundary and the upstream wire format.

Invariants:
    - CreateEmployeeInput: name/title non-blank, strict ints (no bools), salary > 0, 16 <= age <= 75
    - Valid input is forwarded upstream unchanged (no whitespace rewriting)
    - EmployeeResponse uses the upstream `employee_*` keys, so clients see one JSON shape
    - Upstream envelopes tolerate missing/null `data` — callers decide what absent means
    - Unknown upstream fields are ignored, never rejected

Design Decisions:
    - Wire models convert to core EmployeeRecord via to_record(): core stays Pydantic-free
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from employee_api.core.domain_types import EmployeeId, EmployeeRecord


# --- Upstream wire format -----------------------------------------------------

class UpstreamEmployee(BaseModel):
    """One employee as serialized by the upstream mock API."""
    model_config = ConfigDict(extra="ignore")

    id: str
    employee_name: str | None = None
    employee_salary: int | None = None
    employee_age: int | None = None
    employee_title: str | None = None
    employee_email: str | None = None

    def to_record(self) -> EmployeeRecord:
        return EmployeeRecord(
            id=EmployeeId(self.id),
            name=self.employee_name,
            salary=self.employee_salary,
            age=self.employee_age,
            title=self.employee_title,
            email=self.employee_email,
        )


class UpstreamListEnvelope(BaseModel):
    """`{"data": [...], "status": ...}` from GET /api/v1/employee."""
    model_config = ConfigDict(extra="ignore")

    data: list[UpstreamEmployee] | None = None
    status: str | None = None


class UpstreamSingleEnvelope(BaseModel):
    """`{"data": {...}, "status": ...}` from single-record endpoints."""
    model_config = ConfigDict(extra="ignore")

    data: UpstreamEmployee | None = None
    status: str | None = None


class DeleteEmployeeRequest(BaseModel):
    """Body of the upstream DELETE — the upstream deletes by name."""
    name: str = Field(min_length=1)


# --- Public API -----------------------------------------------------------------

class CreateEmployeeInput(BaseModel):
    """Employee creation — validated before anything reaches the upstream."""
    name: str
    salary: int = Field(gt=0, strict=True)
    age: int = Field(ge=16, le=75, strict=True)
    title: str

    @field_validator("name", "title")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class EmployeeResponse(BaseModel):
    """Employee as returned by this API."""
    id: str
    employee_name: str | None = None
    employee_salary: int | None = None
    employee_age: int | None = None
    employee_title: str | None = None
    employee_email: str | None = None

    @classmethod
    def from_record(cls, record: EmployeeRecord) -> "EmployeeResponse":
        return cls(
            id=record.id,
            employee_name=record.name,
            employee_salary=record.salary,
            employee_age=record.age,
            employee_title=record.title,
            employee_email=record.email,
        )
