"""Employee Service — source fetch + directory queries + not-found escalation.

Invariants:
    - Every read re-fetches from the source
    - find_by_id / delete_by_id raise EmployeeNotFoundError for absent ids
    - delete_by_id refuses nameless records (upstream deletes by name)
"""

import pytest

from employee_api.core.errors import EmployeeNotFoundError

from tests.services.fake_source import employee


async def test_find_all_returns_source_records(service, fake_source):
    fake_source.records = [employee("Alice", 100), employee("Bob", 200)]
    result = await service.find_all()
    assert [r.name for r in result] == ["Alice", "Bob"]


async def test_find_all_empty_source(service):
    assert await service.find_all() == []


async def test_find_by_name_filters(service, fake_source):
    fake_source.records = [employee("Alice"), employee("Bob"), employee("Malice")]
    result = await service.find_by_name("lice")
    assert [r.name for r in result] == ["Alice", "Malice"]


async def test_find_by_id_found(service, fake_source):
    fake_source.records = [employee("Jane Doe", 5000, "abc")]
    result = await service.find_by_id("abc")
    assert result.name == "Jane Doe"


async def test_find_by_id_missing_raises_not_found(service):
    with pytest.raises(EmployeeNotFoundError) as exc_info:
        await service.find_by_id("non-existent-id")
    assert str(exc_info.value) == "Employee not found for ID: non-existent-id"


async def test_highest_salary(service, fake_source):
    fake_source.records = [employee("A", 10), employee("B"), employee("C", 30)]
    assert await service.highest_salary() == 30


async def test_highest_salary_no_employees_is_zero(service):
    assert await service.highest_salary() == 0


async def test_top_earning_names_uses_count(service, fake_source):
    fake_source.records = [employee(f"E{i}", i) for i in range(1, 6)]
    assert await service.top_earning_names(2) == ["E5", "E4"]


async def test_reads_refetch_every_call(service, fake_source):
    await service.highest_salary()
    await service.top_earning_names(10)
    await service.find_by_name("x")
    assert fake_source.fetch_all_calls == 3


async def test_create_passes_through(service, fake_source):
    data = {"name": "New Hire", "salary": 1000, "age": 30, "title": "Engineer"}
    created = await service.create(data)
    assert fake_source.created == [data]
    assert created.name == "New Hire"
    assert created.id == "new-1"


async def test_delete_by_id_deletes_by_name(service, fake_source):
    fake_source.records = [employee("Jane Doe", 5000, "abc")]
    message = await service.delete_by_id("abc")
    assert fake_source.deleted_names == ["Jane Doe"]
    assert message == "Employee with ID abc and name Jane Doe deleted successfully."


async def test_delete_missing_raises_not_found(service, fake_source):
    with pytest.raises(EmployeeNotFoundError):
        await service.delete_by_id("nope")
    assert fake_source.deleted_names == []


async def test_delete_nameless_record_raises_not_found(service, fake_source):
    fake_source.records = [employee(None, 100, "nameless-1")]
    with pytest.raises(EmployeeNotFoundError):
        await service.delete_by_id("nameless-1")
    assert fake_source.deleted_names == []
