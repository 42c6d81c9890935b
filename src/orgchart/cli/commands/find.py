"""orgchart find -- look up an employee by id."""

from __future__ import annotations

import click

from orgchart.cli.formatting import format_error, format_located, get_console
from orgchart.exceptions import EmployeeNotFoundError, OrgChartError


@click.command()
@click.argument("employee_id", type=int)
@click.pass_context
def find(ctx: click.Context, employee_id: int) -> None:
    """Show EMPLOYEE_ID with its supervisor, reports and chain of command."""
    from orgchart.cli import _get_chart

    console = get_console()
    try:
        chart = _get_chart(ctx)
        located = chart.find_employee(employee_id)
        if located is None:
            raise EmployeeNotFoundError(employee_id)
        format_located(located, chart.chain_of_command(employee_id), console)
    except (OrgChartError, OSError) as e:
        format_error(str(e), console)
        raise SystemExit(1) from None
