"""Employee Directory — pure query and aggregation over an employee snapshot.

Invariants:
    - Every function takes the full current collection and returns a derived value
    - Records are never mutated; absent fields are skipped, never coerced
    - No function raises for "no data": empty input degrades to [] or 0
    - top_earning_names ties keep input order (sorted() is stable)
"""

from collections.abc import Iterable, Sequence

from employee_api.core.domain_types import EmployeeId, EmployeeRecord


def filter_by_name_contains(
    records: Iterable[EmployeeRecord], substring: str,
) -> list[EmployeeRecord]:
    """Case-sensitive substring match on name. Nameless records never match."""
    return [
        r for r in records
        if r.name is not None and substring in r.name
    ]


def max_salary(records: Iterable[EmployeeRecord]) -> int:
    """Highest present salary, or 0 when there is none."""
    return max(
        (r.salary for r in records if r.salary is not None), default=0,
    )


def top_earning_names(
    records: Sequence[EmployeeRecord], n: int,
) -> list[str | None]:
    """Names of the n best-paid records, highest salary first.

    Records without a salary are excluded, not ranked as zero. Fewer than n
    qualifying records returns all of them; n <= 0 returns [].
    """
    if n <= 0:
        return []
    paid = [r for r in records if r.salary is not None]
    ranked = sorted(paid, key=lambda r: r.salary, reverse=True)
    return [r.name for r in ranked[:n]]


def find_by_id(
    records: Iterable[EmployeeRecord], employee_id: EmployeeId | str,
) -> EmployeeRecord | None:
    """Record with exactly this id, or None."""
    return next((r for r in records if r.id == employee_id), None)
