"""Options shared by the CSV-reading commands."""

import click

from ..helpers import STDIO


def _unescape_delimiter(ctx, param, value):
    if value in ("\\t", "tab"):
        return "\t"
    return value


def input_argument(f):
    return click.argument("input_file", default=STDIO, metavar="[INPUT]")(f)


def output_option(f):
    return click.option(
        "-o",
        "--output",
        "output_file",
        default=STDIO,
        show_default=True,
        help="Output file ('-' for stdout)",
    )(f)


def delimiter_option(f):
    return click.option(
        "-d",
        "--delimiter",
        default=",",
        show_default=True,
        callback=_unescape_delimiter,
        help="Field delimiter (single character, or \\t for tab)",
    )(f)


def csv_read_options(f):
    """Delimiter, header and comment options for reading CSV."""
    f = click.option(
        "--comments/--no-comments",
        "has_comments",
        default=False,
        help="Skip lines starting with '#'",
    )(f)
    f = click.option(
        "--headers/--no-headers",
        "has_headers",
        default=True,
        show_default=True,
        help="Treat the first row as column names",
    )(f)
    return delimiter_option(f)
