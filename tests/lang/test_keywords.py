"""Tests for the keyword and function registries."""

from complexsql.lang import CLAUSE_KEYWORDS, FUNCTIONS, KEYWORDS, normalize_words


class TestRegistries:
    def test_sets_are_upper_case(self):
        assert all(word == word.upper() for word in KEYWORDS)
        assert all(word == word.upper() for word in FUNCTIONS)

    def test_aggregates_are_functions(self):
        for name in ("COUNT", "SUM", "AVG", "MIN", "MAX", "ROW_NUMBER", "COALESCE"):
            assert name in FUNCTIONS
            assert name not in KEYWORDS

    def test_clause_words_are_keywords(self):
        assert set(CLAUSE_KEYWORDS) <= KEYWORDS

    def test_normalize_words(self):
        assert normalize_words(["  select ", "", "From", "   "]) == frozenset({"SELECT", "FROM"})
