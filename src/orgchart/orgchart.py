"""OrgChart -- the public entry point.

Owns the employee tree and the history log, and routes every move, undo
and redo through the reparent engine.  Users interact with
``OrgChart.from_seed()``, ``chart.move()``, ``chart.undo()`` and
``chart.redo()``.

Not thread-safe.  Each caller should own its ``OrgChart``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from orgchart.exceptions import (
    EmployeeNotFoundError,
    OrgChartError,
    SeedValidationError,
    TreeIntegrityError,
)
from orgchart.models.config import OrgChartConfig
from orgchart.models.history import HistoryEntry, HistoryKind
from orgchart.operations.history import HistoryLog
from orgchart.operations.locator import Located, find_employee, iter_employees
from orgchart.seed import (
    DEFAULT_SEED,
    dump_tree,
    load_seed,
    load_seed_file,
    validate_tree,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from orgchart.models.employee import Employee
    from orgchart.operations.history import StatusInfo

logger = logging.getLogger(__name__)


class OrgChart:
    """An organizational hierarchy with single-step undo/redo.

    Create a chart via :meth:`OrgChart.from_seed`, :meth:`OrgChart.from_file`
    or :meth:`OrgChart.default`.

    Example::

        chart = OrgChart.default()
        chart.move(6, 3)      # Cassandra now reports to Tyler
        chart.undo()          # back under Sarah, with her team
        chart.redo()          # and under Tyler again
    """

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def __init__(self, ceo: Employee, *, config: OrgChartConfig | None = None) -> None:
        try:
            validate_tree(ceo)
        except TreeIntegrityError as exc:
            raise SeedValidationError(exc.reason) from exc
        self._root = ceo
        self._config = config or OrgChartConfig()
        self._log = HistoryLog()

    @classmethod
    def from_seed(
        cls,
        data: dict[str, Any] | str,
        *,
        config: OrgChartConfig | None = None,
    ) -> OrgChart:
        """Build a chart from a seed mapping or JSON string."""
        return cls(load_seed(data), config=config)

    @classmethod
    def from_file(cls, path: str | Path, *, config: OrgChartConfig | None = None) -> OrgChart:
        """Build a chart from a JSON seed file."""
        return cls(load_seed_file(path), config=config)

    @classmethod
    def default(cls, *, config: OrgChartConfig | None = None) -> OrgChart:
        """Build a chart from the bundled reference hierarchy."""
        return cls.from_seed(DEFAULT_SEED, config=config)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def root(self) -> Employee:
        """The root (CEO) node."""
        return self._root

    @property
    def config(self) -> OrgChartConfig:
        return self._config

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        """All history entries, oldest first."""
        return self._log.entries()

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def find_employee(self, employee_id: int, root: Employee | None = None) -> Located | None:
        """Find an employee and its supervisor.

        Args:
            employee_id: Id to look for.
            root: Subtree to search.  Defaults to the whole chart.

        Returns:
            A :class:`Located` pair, or None if absent.
        """
        return find_employee(root if root is not None else self._root, employee_id)

    def get(self, employee_id: int) -> Employee:
        """Return the employee with the given id.

        Raises:
            EmployeeNotFoundError: If absent.
        """
        located = self.find_employee(employee_id)
        if located is None:
            raise EmployeeNotFoundError(employee_id)
        return located.employee

    def chain_of_command(self, employee_id: int) -> list[Employee]:
        """Path from the root down to the employee, both inclusive."""
        from orgchart.operations.locator import chain_of_command as _chain

        return _chain(self._root, employee_id)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def move(
        self,
        employee_id: int,
        supervisor_id: int,
        explicit_children: Sequence[int] | None = None,
        *,
        kind: HistoryKind = HistoryKind.MOVE,
    ) -> Employee:
        """Move an employee under a new supervisor.

        The employee's current reports are promoted to its old supervisor;
        it arrives under the new one with ``explicit_children`` as reports
        (none by default).

        Args:
            employee_id: Id of the employee to move.
            supervisor_id: Id of the new supervisor.
            explicit_children: Ids to adopt as reports after the move.
            kind: Kind recorded in the history entry.

        Returns:
            The root of the mutated tree.

        Raises:
            EmployeeNotFoundError: If an id is absent.
            InvalidOperationError: On self-moves, root moves, or cycles.
        """
        from orgchart.operations.reparent import move as _move

        result = _move(self._root, employee_id, supervisor_id, explicit_children)
        entry = self._log.record(result, kind)
        self._after_operation(entry)
        return self._root

    def undo(self) -> Employee:
        """Reverse the last recorded operation.

        Returns:
            The root of the mutated tree.

        Raises:
            EmptyHistoryError: If nothing has been recorded.
            InvalidOperationError: If the last entry cannot be reversed.
        """
        from orgchart.operations.history import undo as _undo

        entry = _undo(self._root, self._log, strict=self._config.strict_undo)
        self._after_operation(entry)
        return self._root

    def redo(self) -> Employee:
        """Re-apply the most recent plain move.

        Returns:
            The root of the mutated tree.

        Raises:
            NothingToRedoError: If no move has been recorded.
        """
        from orgchart.operations.history import redo as _redo

        entry = _redo(self._root, self._log)
        self._after_operation(entry)
        return self._root

    def can_undo(self) -> bool:
        return len(self._log) > 0

    def can_redo(self) -> bool:
        return self._log.last_of_kind(HistoryKind.MOVE) is not None

    def _after_operation(self, entry: HistoryEntry) -> None:
        logger.info("Recorded %s", entry)
        if self._config.validate_after_each_operation:
            try:
                validate_tree(self._root)
            except TreeIntegrityError as exc:
                raise OrgChartError(
                    f"Hierarchy corrupted by entry #{entry.sequence}: {exc.reason}"
                ) from exc

    # ------------------------------------------------------------------
    # History and status
    # ------------------------------------------------------------------

    def log(
        self,
        limit: int | None = None,
        *,
        kind_filter: HistoryKind | None = None,
    ) -> list[HistoryEntry]:
        """Walk history from the newest entry backward.

        Args:
            limit: Maximum number of entries.  Defaults to
                ``config.default_log_limit``.
            kind_filter: If set, only include entries of this kind.

        Returns:
            Entries newest first.  Empty list if nothing was recorded.
        """
        if limit is None:
            limit = self._config.default_log_limit
        return self._log.tail(limit, kind_filter=kind_filter)

    def status(self) -> StatusInfo:
        """Headcount, depth and history summary of the chart."""
        from orgchart.operations.history import StatusInfo

        depths: dict[int, int] = {}
        for employee, supervisor in iter_employees(self._root):
            depths[id(employee)] = 1 if supervisor is None else depths[id(supervisor)] + 1

        return StatusInfo(
            root=self._root.ref(),
            headcount=len(depths),
            depth=max(depths.values()),
            history_length=len(self._log),
            last_entry=self._log.last(),
            can_undo=self.can_undo(),
            can_redo=self.can_redo(),
        )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Serialize the current tree (``id``/``name``/``children`` keys)."""
        return dump_tree(self._root)

    def to_json(self, *, indent: int | None = 2) -> str:
        return json.dumps(dump_tree(self._root), indent=indent, ensure_ascii=False)

    def pprint(self, *, file: object = None) -> None:
        """Pretty-print the hierarchy using rich."""
        self._root.pprint(file=file)

    def __repr__(self) -> str:
        return f"OrgChart(root={self._root.id}, history={len(self._log)})"
