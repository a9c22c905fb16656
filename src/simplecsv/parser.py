"""CSV tokenizer: text in, rows of string fields out.

The tokenizer is a single left-to-right pass over the input with one
character of lookahead (CR followed by LF). It never raises on malformed
quoting; stray quotes and unterminated quoted fields are resolved by the
transitions below and the result is returned as-is.

States:
    FIELD_START            - before the first character of a field
    IN_UNQUOTED_FIELD      - inside a field that did not open with a quote
    IN_QUOTED_FIELD        - inside a quoted field; everything is data
    QUOTE_IN_QUOTED_FIELD  - saw ``"`` inside a quoted field (escape or close)
    LINE_END               - just closed a row on CR; an LF here is swallowed
    IN_COMMENT             - skipping a ``#`` line (``has_comments`` only)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from .models import CsvConfig, Table
from .models.config import CR, LF, QUOTE

logger = logging.getLogger(__name__)

COMMENT = "#"


class State(Enum):
    """Tokenizer states."""

    FIELD_START = "field_start"
    IN_UNQUOTED_FIELD = "in_unquoted_field"
    IN_QUOTED_FIELD = "in_quoted_field"
    QUOTE_IN_QUOTED_FIELD = "quote_in_quoted_field"
    LINE_END = "line_end"
    IN_COMMENT = "in_comment"


def parse_rows(text: str, config: Optional[CsvConfig] = None) -> List[List[str]]:
    """Split CSV text into rows of string fields.

    Args:
        text: CSV document
        config: Parse options (defaults if None). Only ``delimiter`` and
            ``has_comments`` matter here.

    Returns:
        List of rows, each a list of field strings.

    Example:
        >>> parse_rows('"a,b","c\\nd"\\n')
        [['a,b', 'c\\nd']]
    """
    config = config or CsvConfig()
    delimiter = config.delimiter
    skip_comments = config.has_comments

    rows: List[List[str]] = []
    row: List[str] = []
    field: List[str] = []
    state = State.FIELD_START
    # True until the current line has produced any field content
    line_start = True

    def end_field() -> None:
        row.append("".join(field))
        field.clear()

    def end_row() -> None:
        nonlocal row
        end_field()
        rows.append(row)
        row = []

    i = 0
    n = len(text)
    while i < n:
        c = text[i]

        if state is State.LINE_END:
            state = State.FIELD_START
            line_start = True
            if c == LF:
                i += 1
                continue
            # Not part of a CRLF pair: reprocess at the start of a line

        if state is State.FIELD_START:
            if line_start and skip_comments and c == COMMENT:
                state = State.IN_COMMENT
            elif c == QUOTE:
                state = State.IN_QUOTED_FIELD
                line_start = False
            elif c == delimiter:
                end_field()
                line_start = False
            elif c == CR or c == LF:
                end_row()
                state = State.LINE_END if c == CR else State.FIELD_START
                line_start = True
            else:
                field.append(c)
                state = State.IN_UNQUOTED_FIELD
                line_start = False

        elif state is State.IN_UNQUOTED_FIELD:
            if c == delimiter:
                end_field()
                state = State.FIELD_START
            elif c == CR or c == LF:
                end_row()
                state = State.LINE_END if c == CR else State.FIELD_START
                line_start = True
            else:
                field.append(c)

        elif state is State.IN_QUOTED_FIELD:
            if c == QUOTE:
                state = State.QUOTE_IN_QUOTED_FIELD
            else:
                field.append(c)

        elif state is State.QUOTE_IN_QUOTED_FIELD:
            if c == QUOTE:
                field.append(QUOTE)
                state = State.IN_QUOTED_FIELD
            elif c == delimiter:
                end_field()
                state = State.FIELD_START
            elif c == CR or c == LF:
                end_row()
                state = State.LINE_END if c == CR else State.FIELD_START
                line_start = True
            else:
                # Text after a closing quote: keep it, continue unquoted
                field.append(c)
                state = State.IN_UNQUOTED_FIELD

        elif state is State.IN_COMMENT:
            if c == CR:
                state = State.LINE_END
            elif c == LF:
                state = State.FIELD_START
                line_start = True

        i += 1

    if state is State.IN_QUOTED_FIELD:
        logger.debug("Input ended inside a quoted field; keeping partial text")
    if not line_start and state is not State.IN_COMMENT:
        end_row()

    logger.debug("Parsed %d rows", len(rows))
    return rows


def parse_string(text: str, config: Optional[CsvConfig] = None) -> Table:
    """Parse CSV text into a Table.

    With ``has_headers`` the first row is removed from the data and used as
    ``column_names``. ``column_count`` is taken from the header when there is
    one, otherwise from the first row.

    Example:
        >>> t = parse_string("1,2\\n3,4\\n", CsvConfig(has_headers=True))
        >>> t.column_names, t.rows, t.row_count
        (['1', '2'], [['3', '4']], 1)
    """
    config = config or CsvConfig()
    rows = parse_rows(text, config)

    column_names: Optional[List[str]] = None
    if config.has_headers and rows:
        column_names = rows.pop(0)

    if column_names is not None:
        column_count = len(column_names)
    elif rows:
        column_count = len(rows[0])
    else:
        column_count = 0

    return Table(column_names=column_names, rows=rows, column_count=column_count)


__all__ = ["State", "parse_rows", "parse_string"]
