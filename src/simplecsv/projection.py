"""Conversions between Tables, JSON records and CSV text."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from .models import CsvConfig, JsonTableError, Table
from .parser import parse_string
from .quoting import quote_if_needed

logger = logging.getLogger(__name__)

CRLF = "\r\n"
PLACEHOLDER_PREFIX = "Col "


def placeholder_column_names(count: int) -> List[str]:
    """Generate ``Col <n>`` names, zero padded to the widest index.

    Example:
        >>> placeholder_column_names(11)[:2], placeholder_column_names(11)[-1]
        (['Col 00', 'Col 01'], 'Col 10')
    """
    if count <= 0:
        return []
    width = len(str(count - 1))
    return [f"{PLACEHOLDER_PREFIX}{i:0{width}d}" for i in range(count)]


def table_to_records(table: Table) -> List[Dict[str, Any]]:
    """Build one ``{column: value}`` record per row.

    Tables without column names get placeholder names. A cell past the last
    known name is keyed by the placeholder for its index.
    """
    names = list(table.column_names or [])
    if not names and table.column_count > 0:
        names = placeholder_column_names(table.column_count)

    widest = max((len(row) for row in table.rows), default=0)
    if widest > len(names):
        logger.debug(
            "Rows have up to %d cells but only %d column names", widest, len(names)
        )
        fallback = placeholder_column_names(max(widest, table.column_count))
        names.extend(fallback[len(names):])

    return [
        {names[index]: value for index, value in enumerate(row)}
        for row in table.rows
    ]


def table_to_json(table: Table) -> str:
    """Serialize a Table as a compact JSON array of objects.

    Example:
        >>> table_to_json(Table(column_names=["11", "12"], rows=[["4", 0]]))
        '[{"11":"4","12":0}]'
    """
    return json.dumps(
        table_to_records(table), ensure_ascii=False, separators=(",", ":")
    )


def records_to_table(records: Any) -> Table:
    """Build a Table from decoded JSON (a list of objects).

    Column names come from the first record's key order and every record
    must carry exactly those keys; values are read in that order.

    Raises:
        JsonTableError: Not a list, a record is not an object, or a record's
            keys differ from the first record's.
    """
    if not isinstance(records, list):
        raise JsonTableError(
            f"Expected a JSON array of objects, got {type(records).__name__}"
        )

    column_names: List[str] = []
    rows: List[List[Any]] = []
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise JsonTableError(
                f"Record {index} is {type(record).__name__}, expected an object"
            )
        if index == 0:
            column_names = list(record.keys())
        elif record.keys() != set(column_names):
            missing = [k for k in column_names if k not in record]
            extra = [k for k in record if k not in column_names]
            raise JsonTableError(
                f"Record {index} keys differ from record 0 "
                f"(missing: {missing}, extra: {extra})"
            )
        rows.append([record[name] for name in column_names])

    return Table(
        column_names=column_names, rows=rows, column_count=len(column_names)
    )


def json_to_table(text: str) -> Table:
    """Parse a JSON array of objects into a Table.

    Raises:
        json.JSONDecodeError: ``text`` is not valid JSON.
        JsonTableError: The JSON is not a homogeneous array of objects.
    """
    table = records_to_table(json.loads(text))
    logger.debug(
        "Decoded %d records with %d columns", table.row_count, table.column_count
    )
    return table


def _format_line(cells: List[Any], delimiter: str) -> str:
    return delimiter.join(quote_if_needed(cell) for cell in cells) + CRLF


def table_to_csv(table: Table, config: Optional[CsvConfig] = None) -> str:
    """Serialize a Table as CSV text.

    The header line is written only when ``column_names`` is set. Every line
    ends in CRLF and every field goes through ``quote_if_needed``.

    Example:
        >>> table_to_csv(Table(column_names=["a", "b"], rows=[["1", 2]]))
        'a,b\\r\\n1,2\\r\\n'
    """
    config = config or CsvConfig()
    lines: List[str] = []
    if table.column_names:
        lines.append(_format_line(table.column_names, config.delimiter))
    for row in table.rows:
        lines.append(_format_line(row, config.delimiter))
    return "".join(lines)


def csv_to_json(text: str, config: Optional[CsvConfig] = None) -> str:
    """Parse CSV text and return it as a JSON array of objects."""
    return table_to_json(parse_string(text, config))


def json_to_csv(text: str, config: Optional[CsvConfig] = None) -> str:
    """Convert a JSON array of objects to CSV text with a header line."""
    return table_to_csv(json_to_table(text), config)


__all__ = [
    "csv_to_json",
    "json_to_csv",
    "json_to_table",
    "placeholder_column_names",
    "records_to_table",
    "table_to_csv",
    "table_to_json",
    "table_to_records",
]
