"""Exceptions raised by the table layer."""

from __future__ import annotations


class SimpleCsvError(Exception):
    """Base class for simplecsv errors."""


class EmptyTableError(SimpleCsvError, ValueError):
    """Raised when an operation needs at least one row and the table has none."""

    def __init__(self, message: str = "Table has no rows") -> None:
        super().__init__(message)


class JsonTableError(SimpleCsvError, ValueError):
    """JSON decoded fine but is not a homogeneous array of objects."""


__all__ = ["EmptyTableError", "JsonTableError", "SimpleCsvError"]
