"""Pytest configuration and shared fixtures."""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from simplecsv.cli import cli


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["to-json", "file.csv"])
        result = invoke(["to-csv"], input_data='[{"a": 1}]')
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def test_data():
    """Provide path to test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture
def magicians_csv(test_data):
    """CSV with a header, CRLF endings and a quoted delimiter."""
    return test_data / "magicians.csv"


@pytest.fixture
def roster_csv(test_data):
    """Semicolon-delimited CSV with a leading comment line."""
    return test_data / "roster.csv"


@pytest.fixture
def people_json(test_data):
    """JSON array of two homogeneous records."""
    return test_data / "people.json"


@pytest.fixture(autouse=True)
def reset_simplecsv_logging():
    """Drop handlers the CLI attached so later tests don't log to a closed stream."""
    yield
    logger = logging.getLogger("simplecsv")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
