"""Rich formatting helpers for the OrgChart CLI.

Provides functions that format SDK data structures for terminal display.
Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from orgchart.formatting import build_history_table, build_tree

if TYPE_CHECKING:
    from orgchart.models.employee import Employee
    from orgchart.models.history import HistoryEntry
    from orgchart.operations.locator import Located


def get_console(*, stderr: bool = False) -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    return Console(stderr=stderr)


def format_tree(root: Employee, console: Console) -> None:
    """Display the hierarchy under root."""
    console.print(build_tree(root))


def format_history(entries: list[HistoryEntry], console: Console) -> None:
    """Display history entries in compact table format."""
    if not entries:
        console.print("[dim]No history.[/dim]")
        return
    console.print(build_history_table(entries))


def format_located(located: Located, chain: list[Employee], console: Console) -> None:
    """Display an employee, its supervisor, reports and chain of command."""
    employee, supervisor = located
    console.print(f"[bold]{escape(employee.name)}[/bold] [yellow]#{employee.id}[/yellow]")
    if supervisor is None:
        console.print("  Supervisor: [dim]none (root)[/dim]")
    else:
        console.print(f"  Supervisor: {escape(str(supervisor))}")
    if employee.children:
        reports = ", ".join(escape(str(child)) for child in employee.children)
        console.print(f"  Reports:    {reports}")
    else:
        console.print("  Reports:    [dim]none[/dim]")
    path = " > ".join(escape(person.name) for person in chain)
    console.print(f"  Chain:      {path}")


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
