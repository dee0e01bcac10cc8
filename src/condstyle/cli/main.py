"""condstyle CLI entry point: Click group with subcommands."""

import logging

import click

from condstyle import __version__


@click.group()
@click.version_option(version=__version__, prog_name="condstyle")
@click.option("-v", "--verbose", is_flag=True, help="Log parser decisions to stderr.")
def cli(verbose: bool) -> None:
    """condstyle - parse and resolve conditional style strings."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from condstyle.cli.parse import parse  # noqa: E402
from condstyle.cli.resolve import resolve  # noqa: E402
from condstyle.cli.validate import validate  # noqa: E402
from condstyle.cli.merge import merge  # noqa: E402
from condstyle.cli.aliases import aliases  # noqa: E402

cli.add_command(parse)
cli.add_command(resolve)
cli.add_command(validate)
cli.add_command(merge)
cli.add_command(aliases)
