"""CLI commands for solving menu files."""

from __future__ import annotations

from pathlib import Path

import click

from menusum.application.dto import SolveOptions
from menusum.domain.exceptions import DomainException
from menusum.domain.repository.menu_source import ParseIssue
from menusum.infrastructure.bootstrap import configure_logging, solve_menu_handler

EXAMPLE_DATA = """\
$15.05
mixed fruit,$2.15
unmixed fruit,$2.15
french fries,$2.75
side salad,$3.35
hot wings,$3.55
mozzarella sticks,$4.20
sampler plate,$5.80
"""


def _single_character(ctx: click.Context, param: click.Parameter, value: str) -> str:
    if len(value) != 1:
        raise click.BadParameter(f"Expected a single character, got '{value}'.")
    return value


def _echo_issue(issue: ParseIssue) -> None:
    click.echo(str(issue), err=True)


def _ignore_issue(issue: ParseIssue) -> None:
    pass


@click.command("solve")
@click.argument(
    "data_file",
    type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path),
)
@click.option(
    "--verbose",
    is_flag=True,
    envvar="MENUSUM_VERBOSE",
    help="Log progress notices to stderr.",
)
@click.option(
    "--silent-errors",
    is_flag=True,
    envvar="MENUSUM_SILENT_ERRORS",
    help="Do not report skipped lines in the data file.",
)
@click.option(
    "--item-separator",
    default=",",
    show_default=True,
    callback=_single_character,
    help="Separator between dishes in a solution line.",
)
@click.option(
    "--choice-separator",
    default="|",
    show_default=True,
    callback=_single_character,
    help="Separator between interchangeable dishes at the same price.",
)
def menu_solve(
    data_file: Path,
    verbose: bool,
    silent_errors: bool,
    item_separator: str,
    choice_separator: str,
) -> None:
    """List every combination of dishes costing exactly each target price."""
    options = SolveOptions(
        verbose=verbose,
        silent_errors=silent_errors,
        item_separator=item_separator,
        choice_separator=choice_separator,
    )
    configure_logging(options)
    reporter = _ignore_issue if options.silent_errors else _echo_issue

    try:
        handler = solve_menu_handler(data_file, options, reporter)
        for report in handler.iter_reports():
            for line in report.output:
                click.echo(line)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("example")
def menu_example() -> None:
    """Print an example data file."""
    click.echo(EXAMPLE_DATA, nl=False)
