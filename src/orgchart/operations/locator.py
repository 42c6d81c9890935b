"""Locator operations for OrgChart -- lookups and traversal.

All traversal is depth-first pre-order and iterative, so very deep
hierarchies do not hit the recursion limit.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, NamedTuple, Optional

from orgchart.exceptions import EmployeeNotFoundError

if TYPE_CHECKING:
    from orgchart.models.employee import Employee


class Located(NamedTuple):
    """An employee together with its direct supervisor.

    ``supervisor`` is None only when ``employee`` is the root.
    """

    employee: Employee
    supervisor: Optional[Employee]


def iter_employees(root: Employee) -> Iterator[Located]:
    """Walk the tree from root, yielding each node with its parent.

    Children are visited in list order (pre-order DFS).
    """
    stack: list[Located] = [Located(root, None)]
    while stack:
        current = stack.pop()
        yield current
        node = current.employee
        for child in reversed(node.children):
            stack.append(Located(child, node))


def find_employee(root: Employee, employee_id: int) -> Located | None:
    """Find an employee and its supervisor by id.

    Args:
        root: Node to start the search from.
        employee_id: Id to look for.

    Returns:
        The first match in pre-order, or None if no node has the id.
    """
    for located in iter_employees(root):
        if located.employee.id == employee_id:
            return located
    return None


def require_employee(root: Employee, employee_id: int) -> Located:
    """Like :func:`find_employee` but raise when the id is absent.

    Raises:
        EmployeeNotFoundError: If no node has the id.
    """
    located = find_employee(root, employee_id)
    if located is None:
        raise EmployeeNotFoundError(employee_id)
    return located


def subtree_ids(node: Employee) -> set[int]:
    """Ids of ``node`` and all of its subordinates."""
    return {located.employee.id for located in iter_employees(node)}


def is_in_subtree(node: Employee, employee_id: int) -> bool:
    """Whether ``employee_id`` is ``node`` itself or one of its subordinates."""
    return find_employee(node, employee_id) is not None


def chain_of_command(root: Employee, employee_id: int) -> list[Employee]:
    """Return the path from root down to the employee, both inclusive.

    Raises:
        EmployeeNotFoundError: If no node has the id.
    """
    parents: dict[int, Employee | None] = {}
    target: Employee | None = None
    for employee, supervisor in iter_employees(root):
        parents[id(employee)] = supervisor
        if employee.id == employee_id:
            target = employee
            break
    if target is None:
        raise EmployeeNotFoundError(employee_id)

    path: list[Employee] = []
    current: Employee | None = target
    while current is not None:
        path.append(current)
        current = parents[id(current)]
    path.reverse()
    return path
