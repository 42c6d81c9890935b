"""orgchart show -- display the hierarchy."""

from __future__ import annotations

import click

from orgchart.cli.formatting import format_error, format_tree, get_console
from orgchart.exceptions import OrgChartError


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Print the tree as JSON instead.")
@click.pass_context
def show(ctx: click.Context, as_json: bool) -> None:
    """Show the hierarchy loaded from the seed."""
    from orgchart.cli import _get_chart

    console = get_console()
    try:
        chart = _get_chart(ctx)
    except (OrgChartError, OSError) as e:
        format_error(str(e), console)
        raise SystemExit(1) from None

    if as_json:
        click.echo(chart.to_json())
    else:
        format_tree(chart.root, console)
