"""textstyles CLI entry point: Click group with subcommands."""

import logging

import click

from textstyles import __version__


@click.group()
@click.version_option(version=__version__, prog_name="textstyles")
@click.option("-v", "--verbose", is_flag=True, help="Log parser and converter details")
def cli(verbose: bool) -> None:
    """textstyles - resolve CSS stylesheets and style marked-up text."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from textstyles.cli.check import check  # noqa: E402
from textstyles.cli.inspect import format_stylesheet, inspect  # noqa: E402
from textstyles.cli.render import render  # noqa: E402

cli.add_command(check)
cli.add_command(inspect)
cli.add_command(format_stylesheet)
cli.add_command(render)
