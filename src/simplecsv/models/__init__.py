"""Pydantic models for tables and parse configuration."""

from .config import CsvConfig
from .errors import EmptyTableError, JsonTableError, SimpleCsvError
from .table import Cell, Row, Table

__all__ = [
    "Cell",
    "CsvConfig",
    "EmptyTableError",
    "JsonTableError",
    "Row",
    "SimpleCsvError",
    "Table",
]
