"""CLI tests for to-json."""

import json

import pytest


def test_to_json_file(invoke, magicians_csv):
    result = invoke(["to-json", str(magicians_csv)])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        {"name": "houdini", "born": "1874", "city": "Budapest, Hungary"},
        {"name": "copperfield", "born": "1956", "city": "Metuchen"},
    ]


def test_to_json_stdin(invoke):
    result = invoke(["to-json"], input_data="a,b\n1,2\n")
    assert result.exit_code == 0
    assert result.stdout == '[{"a":"1","b":"2"}]\n'


def test_to_json_no_headers_uses_placeholders(invoke):
    result = invoke(["to-json", "--no-headers"], input_data="x,y\n")
    assert result.exit_code == 0
    assert json.loads(result.stdout) == [{"Col 0": "x", "Col 1": "y"}]


def test_to_json_comments_and_delimiter(invoke, roster_csv):
    result = invoke(["to-json", "--comments", "-d", ";", str(roster_csv)])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        {"name": "Alice", "age": "30"},
        {"name": "Bob", "age": "25"},
    ]


def test_to_json_tab_delimiter_escape(invoke):
    result = invoke(["to-json", "-d", "\\t"], input_data="a\tb\n1\t2\n")
    assert result.exit_code == 0
    assert json.loads(result.stdout) == [{"a": "1", "b": "2"}]


def test_to_json_preserves_crlf_inside_quotes(invoke):
    result = invoke(["to-json"], input_data=b'a\r\n"x\r\ny"\r\n')
    assert result.exit_code == 0
    assert json.loads(result.stdout) == [{"a": "x\r\ny"}]


def test_to_json_pretty(invoke):
    result = invoke(["to-json", "--pretty"], input_data="a\n1\n")
    assert result.exit_code == 0
    assert result.stdout == '[\n  {\n    "a": "1"\n  }\n]\n'


def test_to_json_output_file(invoke, tmp_path):
    out = tmp_path / "out.json"
    result = invoke(["to-json", "-o", str(out)], input_data="a\n1\n")
    assert result.exit_code == 0
    assert out.read_text(encoding="utf-8") == '[{"a":"1"}]\n'


def test_to_json_bad_delimiter(invoke):
    result = invoke(["to-json", "-d", ";;"], input_data="a\n")
    assert result.exit_code == 2
    assert "single character" in result.output


def test_to_json_missing_file(invoke, tmp_path):
    result = invoke(["to-json", str(tmp_path / "nope.csv")])
    assert result.exit_code == 1
    assert "cannot read" in result.output


@pytest.mark.filterwarnings("error::DeprecationWarning")
def test_to_json_stdin_to_stdout_without_deprecations(invoke):
    result = invoke(["to-json"], input_data=b"a\r\n1\r\n")
    assert result.exception is None
    assert result.stdout_bytes == b'[{"a":"1"}]\n'
