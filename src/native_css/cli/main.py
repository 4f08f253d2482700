"""native-css CLI entry point: Click group with subcommands."""

import logging

import click

from native_css import __version__


@click.group()
@click.version_option(version=__version__, prog_name="native-css")
@click.option("-v", "--verbose", is_flag=True, help="Log compiler debug output to stderr.")
def cli(verbose: bool) -> None:
    """native-css - compile stylesheets into pre-resolved native style rules."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from native_css.cli.compile import compile  # noqa: E402
from native_css.cli.inspect import inspect  # noqa: E402

cli.add_command(compile)
cli.add_command(inspect)
