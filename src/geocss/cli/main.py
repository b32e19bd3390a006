"""geocss CLI entry point: Click group with subcommands."""

import logging

import click

from geocss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="geocss")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """geocss - reduce CSS-style map rules to feature filters."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from geocss.cli.describe import describe  # noqa: E402
from geocss.cli.filter import filter_command  # noqa: E402
from geocss.cli.select import select  # noqa: E402

cli.add_command(filter_command)
cli.add_command(select)
cli.add_command(describe)
