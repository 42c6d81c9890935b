"""History operations: the append-only log, undo/redo, and status.

Undo and redo never pop or reorder the log.  Each one computes a
compensating move, runs it through the reparent engine, and appends a new
entry tagged UNDO or REDO:

- undo reverses the last entry of any kind, handing the employee back the
  exact reports snapshotted in that entry
- redo re-applies the most recent plain MOVE, found by scanning indices
  from the end
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from orgchart.exceptions import (
    EmptyHistoryError,
    InvalidOperationError,
    NothingToRedoError,
)
from orgchart.models.history import HistoryEntry, HistoryKind
from orgchart.operations.locator import require_employee
from orgchart.operations.reparent import move

if TYPE_CHECKING:
    from orgchart.models.employee import Employee, EmployeeRef
    from orgchart.operations.reparent import MoveResult

logger = logging.getLogger(__name__)


class HistoryLog:
    """Append-only sequence of :class:`HistoryEntry` records.

    Entries are numbered from 1 in the order they were recorded.  There is
    no way to remove or reorder them.
    """

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []

    def record(self, result: MoveResult, kind: HistoryKind = HistoryKind.MOVE) -> HistoryEntry:
        """Build an entry from a completed move and append it."""
        entry = HistoryEntry(
            sequence=len(self._entries) + 1,
            employee=result.employee.ref(),
            old_supervisor=result.old_supervisor.ref(),
            new_supervisor=result.new_supervisor.ref(),
            kind=kind,
            previous_reports=result.previous_reports,
            created_at=datetime.now(timezone.utc),
        )
        self._entries.append(entry)
        return entry

    def last(self) -> HistoryEntry | None:
        """The most recent entry, or None if the log is empty."""
        return self._entries[-1] if self._entries else None

    def last_of_kind(self, kind: HistoryKind) -> HistoryEntry | None:
        """The most recent entry of the given kind, or None."""
        for index in range(len(self._entries) - 1, -1, -1):
            if self._entries[index].kind is kind:
                return self._entries[index]
        return None

    def entries(self) -> tuple[HistoryEntry, ...]:
        """All entries, oldest first."""
        return tuple(self._entries)

    def tail(
        self,
        limit: int,
        *,
        kind_filter: HistoryKind | None = None,
    ) -> list[HistoryEntry]:
        """Up to ``limit`` entries, newest first, optionally of one kind."""
        result: list[HistoryEntry] = []
        for index in range(len(self._entries) - 1, -1, -1):
            if len(result) >= limit:
                break
            entry = self._entries[index]
            if kind_filter is None or entry.kind is kind_filter:
                result.append(entry)
        return result

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(tuple(self._entries))

    def __getitem__(self, index: int) -> HistoryEntry:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"HistoryLog(entries={len(self._entries)})"


def undo(root: Employee, log: HistoryLog, *, strict: bool = True) -> HistoryEntry:
    """Reverse the last recorded operation.

    The employee goes back under the entry's old supervisor and takes back
    the reports listed in ``previous_reports``, which were promoted to that
    supervisor by the operation being reversed.

    Args:
        root: Root of the tree to mutate.
        log: History to read from and append to.
        strict: If True, a snapshotted report that no longer reports to the
            old supervisor makes the undo fail.  If False, it is skipped.

    Returns:
        The new UNDO entry.

    Raises:
        EmptyHistoryError: If the log has no entries.
        InvalidOperationError: If the last entry cannot be reversed.
    """
    entry = log.last()
    if entry is None:
        raise EmptyHistoryError()
    if entry.old_supervisor is None:
        raise InvalidOperationError(
            f"Cannot undo entry #{entry.sequence}: {entry.employee} had no supervisor"
        )

    old_supervisor = require_employee(root, entry.old_supervisor.id).employee
    current_reports = set(old_supervisor.report_ids())
    reports: list[int] = []
    for report_id in entry.previous_reports:
        if report_id in current_reports:
            reports.append(report_id)
        elif strict:
            raise InvalidOperationError(
                f"Cannot undo entry #{entry.sequence}: employee {report_id} "
                f"no longer reports to {old_supervisor}"
            )
        else:
            logger.warning(
                "Undo of entry #%d skips employee %d: no longer reports to %s",
                entry.sequence, report_id, old_supervisor,
            )

    logger.debug("Undoing %r", entry)
    result = move(root, entry.employee.id, old_supervisor.id, explicit_children=reports)
    return log.record(result, HistoryKind.UNDO)


def redo(root: Employee, log: HistoryLog) -> HistoryEntry:
    """Re-apply the most recent plain move.

    UNDO and REDO entries are skipped during the backward scan.  The
    employee arrives under the new supervisor without reports, exactly as
    after the original move.

    Returns:
        The new REDO entry.

    Raises:
        NothingToRedoError: If no MOVE entry exists.
        InvalidOperationError: If the move is no longer valid.
    """
    entry = log.last_of_kind(HistoryKind.MOVE)
    if entry is None:
        raise NothingToRedoError()
    if entry.new_supervisor is None:
        raise InvalidOperationError(
            f"Cannot redo entry #{entry.sequence}: it has no new supervisor"
        )

    logger.debug("Redoing %r", entry)
    result = move(root, entry.employee.id, entry.new_supervisor.id, explicit_children=())
    return log.record(result, HistoryKind.REDO)


@dataclass(frozen=True)
class StatusInfo:
    """Current chart status returned by OrgChart.status().

    Attributes:
        root: The root employee's snapshot.
        headcount: Number of employees in the tree.
        depth: Number of levels (1 for a lone root).
        history_length: Number of recorded entries.
        last_entry: Most recent entry, or None.
        can_undo: Whether undo would find an entry.
        can_redo: Whether redo would find a MOVE entry.
    """

    root: EmployeeRef
    headcount: int
    depth: int
    history_length: int
    last_entry: HistoryEntry | None
    can_undo: bool
    can_redo: bool

    def __str__(self) -> str:
        last = str(self.last_entry) if self.last_entry else "no history"
        return (
            f"{self.root} | {self.headcount} employees | {self.depth} levels | "
            f"{self.history_length} entries | {last}"
        )

    def pprint(self, *, file: object = None) -> None:
        """Pretty-print this status using rich formatting."""
        from orgchart.formatting import pprint_status_info

        pprint_status_info(self, file=file)
