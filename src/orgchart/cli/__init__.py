"""OrgChart CLI -- terminal interface for the employee hierarchy.

This module is NEVER imported from orgchart/__init__.py.
It is only loaded via the ``orgchart`` entry point defined in pyproject.toml.

Nothing is persisted: every invocation loads the seed afresh.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from orgchart.cli.formatting import get_console

if TYPE_CHECKING:
    from orgchart.orgchart import OrgChart


@click.group()
@click.option(
    "--seed",
    "seed_path",
    default=None,
    envvar="ORGCHART_SEED",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a JSON seed file (bundled hierarchy if omitted).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log each operation.")
@click.pass_context
def cli(ctx: click.Context, seed_path: str | None, verbose: bool) -> None:
    """OrgChart: reparent employees with undo/redo."""
    ctx.ensure_object(dict)
    ctx.obj["seed_path"] = seed_path
    if verbose:
        _enable_logging()


def _enable_logging() -> None:
    """Route orgchart loggers through rich at DEBUG level."""
    from rich.logging import RichHandler

    package_logger = logging.getLogger("orgchart")
    package_logger.setLevel(logging.DEBUG)
    if any(isinstance(h, RichHandler) for h in package_logger.handlers):
        return
    package_logger.addHandler(RichHandler(console=get_console(stderr=True), show_path=False))


def _get_chart(ctx: click.Context) -> OrgChart:
    """Load an OrgChart from the seed selected on the command line."""
    from orgchart.orgchart import OrgChart

    seed_path = ctx.obj["seed_path"]
    if seed_path is None:
        return OrgChart.default()
    return OrgChart.from_file(seed_path)


# Register subcommands after cli group is defined
from orgchart.cli.commands.show import show  # noqa: E402
from orgchart.cli.commands.find import find  # noqa: E402
from orgchart.cli.commands.apply import apply  # noqa: E402

cli.add_command(show)
cli.add_command(find)
cli.add_command(apply)
