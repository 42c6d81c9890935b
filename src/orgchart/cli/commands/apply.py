"""orgchart apply -- replay moves, undos and redos on a fresh hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from orgchart.cli.formatting import format_error, format_history, format_tree, get_console
from orgchart.exceptions import OrgChartError

if TYPE_CHECKING:
    from orgchart.orgchart import OrgChart


def _parse_operation(raw: str) -> tuple[str, int | None, int | None]:
    """Parse ``move:EMPLOYEE:SUPERVISOR``, ``undo`` or ``redo``."""
    parts = raw.strip().lower().split(":")
    if parts == ["undo"] or parts == ["redo"]:
        return parts[0], None, None
    if len(parts) == 3 and parts[0] == "move":
        try:
            return "move", int(parts[1]), int(parts[2])
        except ValueError:
            pass
    raise click.BadParameter(
        f"'{raw}' is not one of move:EMPLOYEE:SUPERVISOR, undo, redo",
        param_hint="OPERATIONS",
    )


def _run(chart: OrgChart, operation: tuple[str, int | None, int | None]) -> None:
    name, employee_id, supervisor_id = operation
    if name == "move":
        chart.move(employee_id, supervisor_id)  # type: ignore[arg-type]
    elif name == "undo":
        chart.undo()
    else:
        chart.redo()


@click.command()
@click.argument("operations", nargs=-1, required=True)
@click.option("--log", "show_log", is_flag=True, help="Also show the history table.")
@click.option("--json", "as_json", is_flag=True, help="Print the final tree as JSON.")
@click.pass_context
def apply(ctx: click.Context, operations: tuple[str, ...], show_log: bool, as_json: bool) -> None:
    """Apply OPERATIONS in order and show the resulting hierarchy.

    Each operation is move:EMPLOYEE:SUPERVISOR, undo or redo, for example:

        orgchart apply move:6:3 undo redo

    Stops at the first failing operation.
    """
    from orgchart.cli import _get_chart

    parsed = [_parse_operation(raw) for raw in operations]
    console = get_console()
    try:
        chart = _get_chart(ctx)
        for raw, operation in zip(operations, parsed):
            try:
                _run(chart, operation)
            except OrgChartError as e:
                format_error(f"{raw}: {e}", console)
                raise SystemExit(1) from None
    except (OrgChartError, OSError) as e:
        format_error(str(e), console)
        raise SystemExit(1) from None

    if as_json:
        click.echo(chart.to_json())
    else:
        format_tree(chart.root, console)
    if show_log:
        console.print()
        format_history(chart.log(limit=len(chart.history) or 1), console)
