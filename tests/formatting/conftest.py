"""Test configuration and fixtures for formatting tests."""

import pytest

from complexsql.formatting import DefaultFormattingRules, SQLFormatter


SIMPLE_QUERY = "SELECT a, b FROM t WHERE a=1"

MESSY_QUERY = """select   id,
      name ,email
  from users u
     left join orders o on o.user_id = u.id
  where u.active = 1 and o.total > 10
  order by name"""

SCRIPT = "SELECT a FROM t; SELECT b FROM u WHERE b = ';';"


@pytest.fixture
def formatter():
    return SQLFormatter(DefaultFormattingRules.standard())


@pytest.fixture
def simple_query():
    return SIMPLE_QUERY


@pytest.fixture
def messy_query():
    return MESSY_QUERY


@pytest.fixture
def script():
    return SCRIPT
