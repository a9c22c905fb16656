"""simplecsv CLI main entry point with global options."""

import click

from .helpers import configure_logging


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Log to stderr (-v info, -vv debug)",
)
@click.version_option(package_name="simplecsv")
def cli(verbose):
    """simplecsv - convert between CSV text and JSON arrays of objects."""
    configure_logging(verbose)


# Register commands at module level so tests can import cli with commands attached
from .commands.check import check
from .commands.to_csv import to_csv
from .commands.to_json import to_json

cli.add_command(to_json)
cli.add_command(to_csv)
cli.add_command(check)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
