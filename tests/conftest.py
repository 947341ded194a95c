"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from tidycsv.cli import cli
from tidycsv.context import LINE_TERMINATOR_ENV, SEPARATOR_ENV


@pytest.fixture(autouse=True)
def clear_tidycsv_env(monkeypatch):
    """Unset tidycsv environment variables before each test.

    Settings are resolved from the environment on every invocation, so a
    value exported in the developer's shell would otherwise leak into tests.
    """
    monkeypatch.delenv(SEPARATOR_ENV, raising=False)
    monkeypatch.delenv(LINE_TERMINATOR_ENV, raising=False)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["cat", "file.csv"])  # returns click.Result
        result = invoke(["put", "--tidy"], input_data='["a","b"]\\n')
    """

    def _invoke(args, input_data=None, env=None):
        return cli_runner.invoke(cli, args, input=input_data, env=env)

    return _invoke


@pytest.fixture
def test_data():
    """Provide path to test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture
def people_csv(test_data):
    """Provide path to people.csv test file."""
    return test_data / "people.csv"


@pytest.fixture
def people_semicolon_csv(test_data):
    """Provide path to the semicolon-separated people file."""
    return test_data / "people_semicolon.csv"


@pytest.fixture
def commented_csv(test_data):
    """Provide path to a CSV file with comment and blank lines."""
    return test_data / "commented.csv"
