"""Shared pytest fixtures and configuration for all tests."""

from pathlib import Path

import pytest


def pytest_configure(config):
    """Register markers for pytest."""
    config.addinivalue_line("markers", "lsp: tests that need the optional language server dependencies")


@pytest.fixture
def sample_query():
    """The join example used throughout the teaching pages."""
    return (
        "-- customers with their order totals\n"
        "SELECT c.name, COUNT(o.id) AS orders\n"
        "FROM customers c LEFT JOIN orders o ON o.customer_id = c.id\n"
        "WHERE c.city = 'O''Brien Town'\n"
        "GROUP BY c.name;"
    )


@pytest.fixture
def sql_workspace(tmp_path: Path) -> Path:
    """A workspace directory holding two SQL files."""
    queries = tmp_path / "queries"
    queries.mkdir()
    (queries / "a.sql").write_text("SELECT a, b FROM t WHERE a=1\n", encoding="utf-8")
    (queries / "b.sql").write_text("SELECT x\nFROM u\n", encoding="utf-8")
    return tmp_path
