import click

from menusum.infrastructure.cli.solve_commands import menu_example, menu_solve


@click.group()
def cli() -> None:
    """menusum: find dish combinations that cost exactly a target price."""


# Register subcommands
cli.add_command(menu_solve)
cli.add_command(menu_example)
