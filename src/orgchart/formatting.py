"""Pretty-print support for orgchart output objects.

Uses rich library for formatted terminal output.
All functions accept their target object and print to a rich Console.

To avoid circular imports, this module does NOT import domain models
at module level. Functions access object attributes dynamically.
"""
from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

_KIND_STYLES = {
    "move": "cyan",
    "undo": "magenta",
    "redo": "green",
}


def _ensure_utf8_stdout() -> None:
    """Reconfigure stdout to UTF-8 on Windows so tree guides render."""
    import sys
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        try:
            sys.stdout.reconfigure(encoding="utf-8")
        except (OSError, ValueError):
            pass


def _make_console(file: Any = None) -> Console:
    """Create a Console, optionally writing to a file-like object."""
    if file is not None:
        return Console(file=file, force_terminal=False, width=100)
    _ensure_utf8_stdout()
    return Console()


def _label(employee: Any) -> str:
    return f"[bold]{escape(employee.name)}[/bold] [dim]#{employee.id}[/dim]"


def build_tree(root: Any) -> Tree:
    """Build a rich Tree mirroring the hierarchy under ``root``."""
    tree = Tree(_label(root), guide_style="dim")
    stack: list[tuple[Any, Tree]] = [(root, tree)]
    while stack:
        node, branch = stack.pop()
        for child in node.children:
            stack.append((child, branch.add(_label(child))))
    return tree


def build_history_table(entries: list[Any]) -> Table:
    """Build a table of history entries in the given order."""
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("#", justify="right", style="yellow")
    table.add_column("Time", style="dim")
    table.add_column("Kind", width=5)
    table.add_column("Employee")
    table.add_column("From")
    table.add_column("To")

    for entry in entries:
        kind = entry.kind.value
        style = _KIND_STYLES.get(kind, "white")
        old = entry.old_supervisor
        new = entry.new_supervisor
        table.add_row(
            str(entry.sequence),
            entry.created_at.strftime("%H:%M:%S"),
            f"[{style}]{kind}[/{style}]",
            escape(str(entry.employee)),
            escape(str(old)) if old else "-",
            escape(str(new)) if new else "-",
        )
    return table


def pprint_tree(root: Any, *, file: Any = None) -> None:
    """Pretty-print the hierarchy under ``root``.

    Args:
        root: An Employee node.
        file: Optional file-like object for output (used in tests).
    """
    console = _make_console(file)
    console.print(build_tree(root))


def pprint_history(entries: list[Any], *, file: Any = None) -> None:
    """Pretty-print history entries as a table."""
    console = _make_console(file)
    if not entries:
        console.print("[dim]No history.[/dim]")
        return
    console.print(build_history_table(entries))


def pprint_status_info(info: Any, *, file: Any = None) -> None:
    """Pretty-print a StatusInfo."""
    console = _make_console(file)
    console.print(f"Root:      {_label(info.root)}")
    console.print(f"Employees: {info.headcount}")
    console.print(f"Levels:    {info.depth}")
    console.print(f"History:   {info.history_length} entries")
    if info.last_entry is not None:
        console.print(f"Last:      {escape(str(info.last_entry))}")
    undo = "[green]yes[/green]" if info.can_undo else "[dim]no[/dim]"
    redo = "[green]yes[/green]" if info.can_redo else "[dim]no[/dim]"
    console.print(f"Undo: {undo}  Redo: {redo}")
