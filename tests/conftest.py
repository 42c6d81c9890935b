"""Shared test fixtures for OrgChart.

Provides the bundled reference chart, a three-person chart, and small
helpers for asserting on tree shape.
"""

import pytest

from orgchart import OrgChart
from orgchart.operations.locator import iter_employees


SMALL_SEED = {
    "id": 1,
    "name": "CEO",
    "children": [
        {"id": 2, "name": "A", "children": []},
        {"id": 3, "name": "B", "children": []},
    ],
}


@pytest.fixture
def chart() -> OrgChart:
    """The reference hierarchy (Mark Zuckerberg at the root)."""
    return OrgChart.default()


@pytest.fixture
def small_chart() -> OrgChart:
    """CEO(1) -> A(2), B(3)."""
    return OrgChart.from_seed(SMALL_SEED)


# ------------------------------------------------------------------
# Shared test helpers (used by test_reparent.py, test_undo_redo.py,
# test_properties.py)
# ------------------------------------------------------------------

def supervisor_id(chart: OrgChart, employee_id: int) -> int | None:
    """Id of the employee's direct supervisor, None for the root."""
    located = chart.find_employee(employee_id)
    assert located is not None, f"employee {employee_id} missing"
    return located.supervisor.id if located.supervisor is not None else None


def report_ids(chart: OrgChart, employee_id: int) -> list[int]:
    """Ids of the employee's direct reports, in order."""
    return chart.get(employee_id).report_ids()


def all_ids(chart: OrgChart) -> list[int]:
    """Every id in the tree, pre-order (duplicates preserved)."""
    return [employee.id for employee, _ in iter_employees(chart.root)]
