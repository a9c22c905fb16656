"""check command - report structural problems in a table."""

import json
import sys

import click

from ...models import EmptyTableError, JsonTableError
from ...parser import parse_string
from ...projection import json_to_table
from ...validation import find_errors
from ..helpers import build_config, read_text
from .options import csv_read_options, input_argument


@click.command()
@input_argument
@csv_read_options
@click.option(
    "--format",
    "input_format",
    type=click.Choice(["csv", "json"]),
    default="csv",
    show_default=True,
    help="Input format",
)
def check(input_file, delimiter, has_headers, has_comments, input_format):
    """Check that every row matches the shape and cell types of row 0.

    Prints one message per problem and exits 1 when there are any.

    Examples:
        simplecsv check people.csv
        simplecsv check --format json people.json
    """
    text = read_text(input_file)
    try:
        if input_format == "json":
            table = json_to_table(text)
        else:
            config = build_config(
                delimiter=delimiter,
                has_headers=has_headers,
                has_comments=has_comments,
            )
            table = parse_string(text, config)
        errors = find_errors(table)
    except json.JSONDecodeError as e:
        click.echo(f"Error: invalid JSON: {e}", err=True)
        sys.exit(1)
    except (EmptyTableError, JsonTableError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if errors:
        for message in errors:
            click.echo(message)
        sys.exit(1)

    click.echo(f"OK: {table.row_count} rows, {table.column_count} columns")
