"""to-csv command - convert a JSON array of objects to CSV text."""

import json
import logging
import sys

import click

from ...models import JsonTableError
from ...projection import json_to_table, table_to_csv
from ..helpers import build_config, read_text, write_text
from .options import delimiter_option, input_argument, output_option

logger = logging.getLogger(__name__)


@click.command("to-csv")
@input_argument
@delimiter_option
@output_option
def to_csv(input_file, delimiter, output_file):
    """Convert a JSON array of objects to CSV.

    The keys of the first object become the header line. Every object must
    have the same keys. Lines end in CRLF.

    Examples:
        simplecsv to-csv people.json
        simplecsv to-csv -d '|' people.json -o people.psv
    """
    config = build_config(delimiter=delimiter)
    try:
        table = json_to_table(read_text(input_file))
    except json.JSONDecodeError as e:
        click.echo(f"Error: invalid JSON: {e}", err=True)
        sys.exit(1)
    except JsonTableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    write_text(table_to_csv(table, config), output_file)
    logger.info("Wrote %d rows to %s", table.row_count, output_file)
