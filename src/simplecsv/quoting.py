"""Output quoting for individual CSV fields."""

from __future__ import annotations

import json
import math
from typing import Any

from .models.config import CR, LF, QUOTE


def format_cell(value: Any) -> str:
    """Render a cell value as CSV text.

    Strings pass through. Other JSON values are written the way they read
    in JSON, except ``None`` which becomes an empty field.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            # NaN, Infinity, -Infinity as json.loads accepts them
            return json.dumps(value)
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


def quote_if_needed(value: Any) -> str:
    """Escape quotes in a field and wrap it in quotes when required.

    Only CR, LF and ``"`` trigger wrapping. A value containing the
    delimiter is left bare, as is whitespace-only text.

    Examples:
        >>> quote_if_needed("Asd feg")
        'Asd feg'
        >>> quote_if_needed(' " ')
        '" "" "'
    """
    text = format_cell(value)
    needs_quotes = CR in text or LF in text or QUOTE in text
    text = text.replace(QUOTE, QUOTE + QUOTE)
    if needs_quotes:
        return QUOTE + text + QUOTE
    return text


__all__ = ["format_cell", "quote_if_needed"]
