"""simplecsv: CSV text <-> table <-> JSON array of objects."""

from .models import CsvConfig, EmptyTableError, JsonTableError, SimpleCsvError, Table
from .parser import parse_rows, parse_string
from .projection import (
    csv_to_json,
    json_to_csv,
    json_to_table,
    placeholder_column_names,
    table_to_csv,
    table_to_json,
)
from .quoting import quote_if_needed
from .validation import find_errors

__all__ = [
    "__version__",
    "CsvConfig",
    "EmptyTableError",
    "JsonTableError",
    "SimpleCsvError",
    "Table",
    "csv_to_json",
    "find_errors",
    "json_to_csv",
    "json_to_table",
    "parse_rows",
    "parse_string",
    "placeholder_column_names",
    "quote_if_needed",
    "table_to_csv",
    "table_to_json",
]

__version__ = "0.1.0"
