"""to-json command - convert CSV text to a JSON array of objects."""

import json
import logging

import click

from ...parser import parse_string
from ...projection import table_to_json, table_to_records
from ..helpers import build_config, read_text, write_text
from .options import csv_read_options, input_argument, output_option

logger = logging.getLogger(__name__)


@click.command("to-json")
@input_argument
@csv_read_options
@output_option
@click.option("--pretty", is_flag=True, help="Indent the JSON output")
def to_json(input_file, delimiter, has_headers, has_comments, output_file, pretty):
    """Convert CSV to a JSON array of objects.

    Without a header row, keys are generated as "Col 0", "Col 1", ...

    Examples:
        simplecsv to-json people.csv
        simplecsv to-json -d ';' --no-headers data.csv -o data.json
        cat data.csv | simplecsv to-json --comments
    """
    config = build_config(
        delimiter=delimiter, has_headers=has_headers, has_comments=has_comments
    )
    table = parse_string(read_text(input_file), config)

    if pretty:
        text = json.dumps(table_to_records(table), ensure_ascii=False, indent=2)
    else:
        text = table_to_json(table)
    write_text(text + "\n", output_file)
    logger.info("Wrote %d records to %s", table.row_count, output_file)
