"""Service test fixtures — fake upstream source + FastAPI test client.

Invariants:
    - Every test gets a fresh FakeEmployeeSource (no shared records)
    - get_employee_source dependency overridden; no network is touched
    - ASGITransport does not run the lifespan, so app.state.upstream_client stays unset
"""

import pytest
from httpx import ASGITransport, AsyncClient

from employee_api.api.dependencies import get_employee_source
from employee_api.main import app
from employee_api.services.employee_service import EmployeeService

from tests.services.fake_source import FakeEmployeeSource


@pytest.fixture
def fake_source():
    return FakeEmployeeSource()


@pytest.fixture
def service(fake_source):
    return EmployeeService(fake_source)


@pytest.fixture
async def client(fake_source):
    """FastAPI test client with the upstream source overridden."""
    app.dependency_overrides[get_employee_source] = lambda: fake_source

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
