"""Tests for locator operations -- find_employee, traversal, chain of command."""

from __future__ import annotations

import pytest

from orgchart import (
    Employee,
    EmployeeNotFoundError,
    chain_of_command,
    find_employee,
    iter_employees,
)
from orgchart.operations.locator import is_in_subtree, require_employee, subtree_ids


class TestFindEmployee:
    def test_finds_root_without_supervisor(self, chart):
        located = find_employee(chart.root, 1)
        assert located is not None
        assert located.employee is chart.root
        assert located.supervisor is None

    def test_finds_nested_employee_with_direct_supervisor(self, chart):
        located = find_employee(chart.root, 14)
        assert located is not None
        assert located.employee.name == "Will Turner"
        assert located.supervisor.id == 13

    def test_unpacks_as_pair(self, chart):
        employee, supervisor = find_employee(chart.root, 10)
        assert employee.name == "Sophie Turner"
        assert supervisor.name == "Georgina Flangy"

    def test_missing_id_returns_none(self, chart):
        assert find_employee(chart.root, 999999) is None

    def test_search_is_limited_to_given_subtree(self, chart):
        sarah = chart.get(2)
        assert find_employee(sarah, 12) is not None
        assert find_employee(sarah, 7) is None

    def test_returns_same_object_as_tree(self, chart):
        located = find_employee(chart.root, 6)
        assert located.employee is chart.root.children[0].children[0]

    def test_require_employee_raises_for_missing_id(self, chart):
        with pytest.raises(EmployeeNotFoundError) as exc_info:
            require_employee(chart.root, 42)
        assert exc_info.value.employee_id == 42


class TestTraversal:
    def test_pre_order(self, chart):
        ids = [employee.id for employee, _ in iter_employees(chart.root)]
        assert ids == [1, 2, 6, 11, 12, 13, 14, 3, 7, 8, 9, 4, 5, 10]

    def test_every_supervisor_is_the_parent(self, chart):
        for employee, supervisor in iter_employees(chart.root):
            if supervisor is None:
                assert employee is chart.root
            else:
                assert any(child is employee for child in supervisor.children)

    def test_subtree_ids(self, chart):
        assert subtree_ids(chart.get(6)) == {6, 11, 12, 13, 14}
        assert subtree_ids(chart.get(4)) == {4}

    def test_is_in_subtree_includes_self(self, chart):
        cassandra = chart.get(6)
        assert is_in_subtree(cassandra, 6)
        assert is_in_subtree(cassandra, 14)
        assert not is_in_subtree(cassandra, 2)

    def test_deep_chain_does_not_recurse(self):
        root = Employee(id=0, name="E0")
        node = root
        for i in range(1, 5000):
            child = Employee(id=i, name=f"E{i}")
            node.children.append(child)
            node = child
        located = find_employee(root, 4999)
        assert located is not None
        assert located.supervisor.id == 4998


class TestChainOfCommand:
    def test_path_from_root(self, chart):
        path = chain_of_command(chart.root, 14)
        assert [employee.id for employee in path] == [1, 2, 6, 12, 13, 14]

    def test_root_only(self, chart):
        assert chain_of_command(chart.root, 1) == [chart.root]

    def test_missing_id_raises(self, chart):
        with pytest.raises(EmployeeNotFoundError):
            chain_of_command(chart.root, 77)

    def test_facade_delegates(self, chart):
        names = [employee.name for employee in chart.chain_of_command(10)]
        assert names == ["Mark Zuckerberg", "Georgina Flangy", "Sophie Turner"]
