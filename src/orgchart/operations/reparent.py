"""Reparent engine for OrgChart.

Moves an employee under a new supervisor in two steps:

- detach: unlink the employee from its supervisor and promote its direct
  reports to that supervisor (appended after the remaining reports)
- attach: append the same employee object to the new supervisor and give
  it either an explicit list of reports or none

Every check runs before the first mutation, so a rejected move leaves the
tree exactly as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from orgchart.exceptions import InvalidOperationError
from orgchart.operations.locator import Located, is_in_subtree, require_employee

if TYPE_CHECKING:
    from orgchart.models.employee import Employee

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a successful move, used to build the history entry.

    Attributes:
        employee: The moved node (same object as before the move).
        old_supervisor: Supervisor before the move.
        new_supervisor: Supervisor after the move.
        previous_reports: Ids of the employee's direct reports before the
            detach step, in order.  They now report to old_supervisor.
        adopted_reports: Ids of the reports the employee received in the
            attach step (empty for a plain move).
    """

    employee: Employee
    old_supervisor: Employee
    new_supervisor: Employee
    previous_reports: tuple[int, ...]
    adopted_reports: tuple[int, ...]


def _resolve_explicit_children(
    root: Employee,
    employee: Employee,
    supervisor: Employee,
    explicit_children: Sequence[int],
) -> list[Located]:
    """Resolve and validate the ids an employee should adopt on attach."""
    seen: set[int] = set()
    adopted: list[Located] = []
    for child_id in explicit_children:
        if child_id in seen:
            raise InvalidOperationError(f"Report {child_id} listed more than once")
        seen.add(child_id)
        if child_id == employee.id:
            raise InvalidOperationError(
                f"Employee {employee.id} cannot report to itself"
            )
        located = require_employee(root, child_id)
        if located.supervisor is None:
            raise InvalidOperationError(
                f"Root employee {child_id} cannot become a report"
            )
        if is_in_subtree(located.employee, supervisor.id):
            raise InvalidOperationError(
                f"Employee {child_id} cannot report to {employee.id}: "
                f"supervisor {supervisor.id} is among its subordinates"
            )
        adopted.append(located)
    return adopted


def _detach(employee: Employee, supervisor: Employee) -> None:
    """Unlink employee from supervisor and promote its reports."""
    remaining = [child for child in supervisor.children if child is not employee]
    supervisor.children = remaining + list(employee.children)
    employee.children = []


def _unlink(node: Employee, parent: Employee) -> None:
    parent.children = [child for child in parent.children if child is not node]


def move(
    root: Employee,
    employee_id: int,
    supervisor_id: int,
    explicit_children: Sequence[int] | None = None,
) -> MoveResult:
    """Move an employee under a new supervisor.

    Args:
        root: Root of the tree to mutate.
        employee_id: Id of the employee to move.
        supervisor_id: Id of the new supervisor.
        explicit_children: Ids the employee should take as direct reports
            after the move.  Each keeps its own subtree and is unlinked from
            wherever it currently sits.  None (default) means no reports.

    Returns:
        A :class:`MoveResult` describing the relink.

    Raises:
        EmployeeNotFoundError: If any id is absent from the tree.
        InvalidOperationError: If the move is a self-move, moves the root,
            would create a cycle, or names invalid explicit reports.
    """
    employee, old_supervisor = require_employee(root, employee_id)
    supervisor, _ = require_employee(root, supervisor_id)

    if employee_id == supervisor_id:
        raise InvalidOperationError(f"Employee {employee_id} cannot supervise itself")
    if old_supervisor is None:
        raise InvalidOperationError(f"Root employee {employee_id} cannot be moved")
    if is_in_subtree(employee, supervisor_id):
        raise InvalidOperationError(
            f"Cannot move employee {employee_id} under {supervisor_id}: "
            f"{supervisor_id} is one of its subordinates"
        )

    adopted = _resolve_explicit_children(
        root, employee, supervisor, explicit_children or (),
    )
    previous_reports = tuple(employee.report_ids())

    logger.debug(
        "Detaching %s from %s, promoting reports %s",
        employee, old_supervisor, list(previous_reports),
    )
    _detach(employee, old_supervisor)

    for child, parent in adopted:
        # Reports of the moved employee were just promoted to old_supervisor.
        current_parent = old_supervisor if parent is employee else parent
        _unlink(child, current_parent)

    employee.children = [child for child, _ in adopted]
    supervisor.children = [*supervisor.children, employee]
    logger.debug(
        "Attached %s under %s with reports %s",
        employee, supervisor, employee.report_ids(),
    )

    return MoveResult(
        employee=employee,
        old_supervisor=old_supervisor,
        new_supervisor=supervisor,
        previous_reports=previous_reports,
        adopted_reports=tuple(child.id for child, _ in adopted),
    )
