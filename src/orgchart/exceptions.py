"""OrgChart exception hierarchy.

All OrgChart-specific exceptions inherit from OrgChartError.
"""


class OrgChartError(Exception):
    """Base exception for all OrgChart errors."""


class EmployeeNotFoundError(OrgChartError):
    """Raised when an employee id lookup fails."""

    def __init__(self, employee_id: int) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee not found: {employee_id}")


class InvalidOperationError(OrgChartError):
    """Raised when a move would break the hierarchy.

    Covers self-moves, moves under one's own subordinate (cycles),
    moving the root, malformed explicit report lists, and undoing an
    entry that has no previous supervisor.
    """


class EmptyHistoryError(OrgChartError):
    """Raised when undo is requested with no history entries."""

    def __init__(self) -> None:
        super().__init__("Nothing to undo: history is empty")


class NothingToRedoError(OrgChartError):
    """Raised when redo finds no plain move entry in the history."""

    def __init__(self) -> None:
        super().__init__("Nothing to redo: no move has been performed yet")


class TreeIntegrityError(OrgChartError):
    """Raised when a tree breaks the uniqueness or acyclicity invariant.

    Every id must appear exactly once and no node may be reachable twice.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Broken hierarchy: {reason}")


class SeedValidationError(TreeIntegrityError):
    """Raised when seed data does not describe a valid hierarchy.

    Named SeedValidationError (not ValidationError) to avoid
    collision with pydantic.ValidationError.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        OrgChartError.__init__(self, f"Invalid seed data: {reason}")
