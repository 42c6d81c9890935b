"""History domain model for OrgChart.

HistoryKind is the enum for recorded operations (MOVE, UNDO, REDO).
HistoryEntry is the immutable record of one completed operation.
"""

from __future__ import annotations

import enum
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from orgchart.models.employee import EmployeeRef


class HistoryKind(str, enum.Enum):
    """Kinds of operations recorded in the history log."""

    MOVE = "move"
    UNDO = "undo"
    REDO = "redo"

    def __repr__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class HistoryEntry(BaseModel):
    """Immutable record of one move, undo or redo.

    ``previous_reports`` holds the ids of the employee's direct reports
    right before the operation detached it, in order.  Those reports were
    promoted to ``old_supervisor``; undo hands exactly this list back.

    ``old_supervisor`` is None only if the employee was the root, which
    the reparent engine never allows, so undo rejects such entries.
    """

    model_config = {"frozen": True}

    sequence: int
    employee: EmployeeRef
    old_supervisor: Optional[EmployeeRef] = None
    new_supervisor: Optional[EmployeeRef] = None
    kind: HistoryKind = HistoryKind.MOVE
    previous_reports: tuple[int, ...] = ()
    created_at: datetime

    def __str__(self) -> str:
        old = self.old_supervisor.name if self.old_supervisor else "-"
        new = self.new_supervisor.name if self.new_supervisor else "-"
        return f"#{self.sequence} {self.kind.value} {self.employee.name}: {old} -> {new}"

    def __repr__(self) -> str:
        old = self.old_supervisor.id if self.old_supervisor else None
        new = self.new_supervisor.id if self.new_supervisor else None
        return (
            f"HistoryEntry(#{self.sequence} {self.kind.value} "
            f"employee={self.employee.id} {old}->{new})"
        )
