"""Tests for the SQL formatter."""

import pytest

from complexsql.formatting import (
    DefaultFormattingRules,
    FormattingOptions,
    IndentStyle,
    SQLFormatter,
    format_sql,
)


class TestSQLFormatter:
    """Line breaking and whitespace rules."""

    def test_basic_formatting(self, formatter, simple_query):
        result = formatter.format_document(simple_query)

        assert result.is_changed
        assert result.warnings == []
        assert result.formatted_text == "SELECT a,\n    b\nFROM t\nWHERE a=1"

    def test_messy_query(self, formatter, messy_query):
        result = formatter.format_document(messy_query)

        assert result.formatted_text == (
            "select id,\n"
            "    name,\n"
            "    email\n"
            "from users u\n"
            "left\n"
            "join orders o\n"
            "on o.user_id = u.id\n"
            "where u.active = 1\n"
            "and o.total > 10\n"
            "order by name"
        )

    def test_idempotent(self, formatter, simple_query, messy_query):
        for source in (simple_query, messy_query, "SELECT 'a,  b' -- c, d\nFROM t"):
            once = formatter.format_document(source).formatted_text
            twice = formatter.format_document(once)
            assert twice.formatted_text == once
            assert not twice.is_changed

    def test_empty_input(self, formatter):
        result = formatter.format_document("")
        assert result.formatted_text == ""
        assert not result.is_changed

    def test_whitespace_only_input(self, formatter):
        assert formatter.format_document(" \n\t ").formatted_text == ""

    def test_trims_outer_whitespace(self):
        assert format_sql("  \n SELECT 1  \n") == "SELECT 1"

    def test_commas_inside_parentheses_stay(self):
        assert format_sql("SELECT COUNT(a, b), c FROM t") == "SELECT COUNT(a, b),\n    c\nFROM t"

    def test_clause_word_called_as_function_is_not_broken(self):
        assert format_sql("SELECT LEFT(name, 3) FROM t") == "SELECT LEFT(name, 3)\nFROM t"

    def test_clause_keyword_before_parenthesis_is_broken(self):
        assert format_sql("SELECT a FROM t WHERE(a=1) AND(b=2) OR(c=3)") == (
            "SELECT a\nFROM t\nWHERE(a=1)\nAND(b=2)\nOR(c=3)"
        )

    def test_join_condition_in_parentheses_is_broken(self):
        assert format_sql("SELECT a FROM t JOIN u ON(t.id = u.id)") == (
            "SELECT a\nFROM t\nJOIN u\nON(t.id = u.id)"
        )

    def test_clause_word_prefix_is_not_broken(self):
        assert format_sql("SELECT a FROM orders ORDER BY a") == "SELECT a\nFROM orders\nORDER BY a"


class TestLiteralProtection:
    """Strings and comments pass through untouched."""

    def test_string_whitespace_and_commas_kept(self):
        assert format_sql("SELECT 'a,   b  FROM' FROM t") == "SELECT 'a,   b  FROM'\nFROM t"

    def test_multiline_block_comment_kept(self):
        source = "SELECT 1 /* keep\n   this   layout */ FROM t"
        assert format_sql(source) == "SELECT 1 /* keep\n   this   layout */\nFROM t"

    def test_line_comment_keeps_its_newline(self):
        assert format_sql("SELECT a -- pick a\n  FROM t") == "SELECT a -- pick a\nFROM t"

    def test_trailing_line_comment(self):
        assert format_sql("SELECT a   -- done") == "SELECT a -- done"

    def test_leading_comment_is_not_trimmed_into(self):
        assert format_sql("   -- header\nSELECT 1") == "-- header\nSELECT 1"


class TestFormattingOptions:
    """Option handling."""

    def test_compact_indent(self):
        formatter = SQLFormatter(DefaultFormattingRules.compact())
        assert formatter.format_text("SELECT a, b") == "SELECT a,\n  b"

    def test_tabs(self):
        options = FormattingOptions(indent_style=IndentStyle.TABS)
        assert format_sql("SELECT a, b", options) == "SELECT a,\n\tb"

    def test_custom_clause_keywords(self):
        options = FormattingOptions(clause_keywords=["union"])
        assert format_sql("SELECT a FROM t UNION SELECT b FROM u", options) == (
            "SELECT a FROM t\nUNION SELECT b FROM u"
        )

    def test_no_clause_keywords(self):
        options = FormattingOptions(clause_keywords=[])
        assert format_sql("SELECT a FROM t", options) == "SELECT a FROM t"

    def test_split_statements(self, script):
        formatter = SQLFormatter(DefaultFormattingRules.script())
        result = formatter.format_document(script)
        assert result.formatted_text == "SELECT a\nFROM t;\n\nSELECT b\nFROM u\nWHERE b = ';';"


class TestWarnings:
    @pytest.mark.parametrize(
        ("source", "warning"),
        [
            ("SELECT 'abc", "Unterminated string literal at line 1, column 8"),
            ("SELECT 1\n/* open", "Unterminated block comment at line 2, column 1"),
        ],
    )
    def test_unterminated_regions_are_reported(self, formatter, source, warning):
        result = formatter.format_document(source)
        assert result.warnings == [warning]
        assert result.formatted_text.endswith(source.splitlines()[-1])
