"""Fixtures for CLI tests."""

import pytest

from complexsql.cli import main


@pytest.fixture(autouse=True)
def _plain_cli_errors(monkeypatch):
    for name in ("COMPLEXSQL_DEBUG", "COMPLEXSQL_RERAISE", "COMPLEXSQL_VERBOSE", "COMPLEXSQL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def run_cli(sql_workspace):
    """Run the CLI inside the sample workspace and return the exit code."""

    def _run(*argv):
        try:
            main(["--workspace", str(sql_workspace), *argv])
        except SystemExit as exc:
            return exc.code
        return 0

    return _run
