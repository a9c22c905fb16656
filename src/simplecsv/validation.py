"""Structural checks for tables."""

from __future__ import annotations

import logging
from typing import Any, List

from .models import EmptyTableError, Table

logger = logging.getLogger(__name__)


def json_type_name(value: Any) -> str:
    """Name of the JSON type a cell value would serialize as."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def find_errors(table: Table) -> List[str]:
    """Report rows and cells that do not match row 0.

    Row 0 sets the expected cell count and the expected type of every
    column. Messages come in this order: type mismatches (row by row,
    column by column), the column count check, then one message per row of
    the wrong length. Problems are returned, never raised.

    Args:
        table: Table to check

    Returns:
        Error messages; empty when the table is regular.

    Raises:
        EmptyTableError: The table has no rows, so there is no reference row.
    """
    rows = table.rows
    if not rows:
        raise EmptyTableError("Cannot validate a table with no rows")

    reference = rows[0]
    expected_count = len(reference)
    expected_types = [json_type_name(cell) for cell in reference]
    errors: List[str] = []

    for r_index in range(1, len(rows)):
        row = rows[r_index]
        for c_index in range(min(len(row), expected_count)):
            actual = json_type_name(row[c_index])
            expected = expected_types[c_index]
            if actual != expected:
                errors.append(
                    f"Type mismatch at row:{r_index} col:{c_index} "
                    f"expected:{expected} actual:{actual}"
                )

    if table.column_count != expected_count:
        errors.append(
            f"Column count is {table.column_count} "
            f"but Row 0 has {expected_count} cols"
        )

    for r_index, row in enumerate(rows):
        if len(row) != expected_count:
            errors.append(
                f"Row {r_index} has {len(row)} cols, Row 0 has {expected_count}"
            )

    logger.debug("Validated %d rows: %d errors", len(rows), len(errors))
    return errors


__all__ = ["find_errors", "json_type_name"]
