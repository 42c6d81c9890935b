"""OrgChart: an employee hierarchy with reparenting and undo/redo.

Moving an employee promotes its team to its old supervisor; undo hands
the team back, redo replays the last plain move.
"""

from orgchart._version import __version__

# Core entry point
from orgchart.orgchart import OrgChart

# Tree and history models
from orgchart.models.employee import Employee, EmployeeRef
from orgchart.models.history import HistoryEntry, HistoryKind

# Configuration
from orgchart.models.config import OrgChartConfig

# Operations
from orgchart.operations.locator import Located, chain_of_command, find_employee, iter_employees
from orgchart.operations.reparent import MoveResult, move
from orgchart.operations.history import HistoryLog, StatusInfo, redo, undo

# Seed data
from orgchart.seed import (
    DEFAULT_SEED,
    default_seed,
    dump_tree,
    load_seed,
    load_seed_file,
    validate_tree,
)

# Exceptions
from orgchart.exceptions import (
    EmployeeNotFoundError,
    EmptyHistoryError,
    InvalidOperationError,
    NothingToRedoError,
    OrgChartError,
    SeedValidationError,
    TreeIntegrityError,
)

__all__ = [
    "__version__",
    "OrgChart",
    "Employee",
    "EmployeeRef",
    "HistoryEntry",
    "HistoryKind",
    "OrgChartConfig",
    "Located",
    "chain_of_command",
    "find_employee",
    "iter_employees",
    "MoveResult",
    "move",
    "HistoryLog",
    "StatusInfo",
    "redo",
    "undo",
    "DEFAULT_SEED",
    "default_seed",
    "dump_tree",
    "load_seed",
    "load_seed_file",
    "validate_tree",
    "EmployeeNotFoundError",
    "EmptyHistoryError",
    "InvalidOperationError",
    "NothingToRedoError",
    "OrgChartError",
    "SeedValidationError",
    "TreeIntegrityError",
]
