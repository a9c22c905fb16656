"""Unit tests for find_errors."""

import pytest

from simplecsv.models import EmptyTableError, Table
from simplecsv.validation import find_errors, json_type_name


def test_reports_type_column_and_row_problems_in_order():
    table = Table(
        column_names=["1", "2"],
        rows=[[3, "4"], ["5"]],
        column_count=22,
    )
    assert find_errors(table) == [
        "Type mismatch at row:1 col:0 expected:number actual:string",
        "Column count is 22 but Row 0 has 2 cols",
        "Row 1 has 1 cols, Row 0 has 2",
    ]


def test_regular_table_has_no_errors():
    table = Table(column_names=["a", "b"], rows=[["1", 2], ["3", 4], ["5", 6]])
    assert find_errors(table) == []


def test_single_row_table():
    assert find_errors(Table(rows=[["a", "b"]])) == []


def test_empty_table_raises():
    with pytest.raises(EmptyTableError):
        find_errors(Table(column_names=["a"]))


def test_longer_rows_only_compare_shared_columns():
    table = Table(rows=[["a"], ["b", 1, None]])
    assert find_errors(table) == ["Row 1 has 3 cols, Row 0 has 1"]


def test_type_mismatches_scan_row_then_column():
    table = Table(rows=[["a", 1, True], [2, "b", True], [None, 1, "c"]])
    assert find_errors(table) == [
        "Type mismatch at row:1 col:0 expected:string actual:number",
        "Type mismatch at row:1 col:1 expected:number actual:string",
        "Type mismatch at row:2 col:0 expected:string actual:null",
        "Type mismatch at row:2 col:2 expected:boolean actual:string",
    ]


def test_one_message_per_short_row():
    table = Table(rows=[["a", "b"], ["c"], ["d", "e"], []], column_count=2)
    assert find_errors(table) == [
        "Row 1 has 1 cols, Row 0 has 2",
        "Row 3 has 0 cols, Row 0 has 2",
    ]


def test_int_and_float_are_both_numbers():
    assert find_errors(Table(rows=[[1], [2.5]])) == []


@pytest.mark.parametrize(
    "value,expected",
    [
        ("x", "string"),
        (1, "number"),
        (1.5, "number"),
        (True, "boolean"),
        (None, "null"),
        ([1], "array"),
        ({"a": 1}, "object"),
    ],
)
def test_json_type_name(value, expected):
    assert json_type_name(value) == expected
