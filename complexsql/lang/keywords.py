"""
SQL keyword and builtin function registries.

This module is the single source of truth for the words the highlighter
and formatter recognise. All sets are immutable and upper-case; lookups are
case-insensitive through :func:`normalize_words`.

**Usage:**
    from complexsql.lang import KEYWORDS, FUNCTIONS, normalize_words

    keywords = normalize_words(KEYWORDS | {"qualify"})
"""

from __future__ import annotations

from typing import FrozenSet, Iterable


# ============================================================================
# Reserved words
# ============================================================================

KEYWORDS: FrozenSet[str] = frozenset({
    # Query structure
    'SELECT', 'FROM', 'WHERE', 'AS', 'DISTINCT', 'ALL',
    'ORDER', 'BY', 'ASC', 'DESC', 'GROUP', 'HAVING',
    'LIMIT', 'OFFSET', 'TOP', 'FETCH', 'NEXT', 'ROWS', 'ONLY',

    # Joins
    'JOIN', 'INNER', 'LEFT', 'RIGHT', 'FULL', 'OUTER', 'CROSS',
    'NATURAL', 'ON', 'USING',

    # Predicates
    'AND', 'OR', 'NOT', 'IN', 'BETWEEN', 'LIKE', 'IS', 'NULL', 'EXISTS',

    # Conditionals
    'CASE', 'WHEN', 'THEN', 'ELSE', 'END', 'IF',

    # Set operations
    'UNION', 'INTERSECT', 'EXCEPT', 'MINUS',

    # Windows and CTEs
    'OVER', 'PARTITION', 'WITH', 'RECURSIVE', 'CTE',

    # DML
    'INSERT', 'INTO', 'VALUES', 'UPDATE', 'SET', 'DELETE',

    # DDL
    'CREATE', 'ALTER', 'DROP', 'TABLE', 'INDEX', 'VIEW',
    'PROCEDURE', 'FUNCTION', 'TRIGGER', 'BEGIN',

    # Constraints
    'PRIMARY', 'KEY', 'FOREIGN', 'REFERENCES', 'UNIQUE', 'CHECK',
    'DEFAULT', 'CONSTRAINT', 'CASCADE', 'RESTRICT',

    # Transactions and access control
    'COMMIT', 'ROLLBACK', 'SAVEPOINT', 'GRANT', 'REVOKE',
})


# ============================================================================
# Builtin functions (highlighted only when called)
# ============================================================================

FUNCTIONS: FrozenSet[str] = frozenset({
    # Aggregates
    'COUNT', 'SUM', 'AVG', 'MIN', 'MAX',

    # Window functions
    'ROW_NUMBER', 'RANK', 'DENSE_RANK', 'NTILE', 'LAG', 'LEAD',
    'FIRST_VALUE', 'LAST_VALUE',

    # Strings
    'CONCAT', 'SUBSTRING', 'LENGTH', 'UPPER', 'LOWER', 'TRIM', 'LTRIM',
    'RTRIM', 'REPLACE', 'CHARINDEX', 'PATINDEX', 'STUFF', 'REVERSE',
    'LEFT', 'RIGHT',

    # Dates
    'GETDATE', 'CURRENT_DATE', 'CURRENT_TIMESTAMP', 'DATEADD', 'DATEDIFF',
    'YEAR', 'MONTH', 'DAY', 'HOUR', 'MINUTE', 'SECOND', 'DATEPART',
    'DATENAME',

    # Math
    'ABS', 'CEILING', 'FLOOR', 'ROUND', 'POWER', 'SQRT', 'MOD', 'RAND',

    # Null handling and conversion
    'COALESCE', 'NULLIF', 'CAST', 'CONVERT', 'ISNULL', 'NVL', 'IFNULL',
    'IIF', 'CHOOSE', 'GREATEST', 'LEAST',
})


# ============================================================================
# Formatter line breaks
# ============================================================================

CLAUSE_KEYWORDS: tuple = (
    'FROM', 'WHERE', 'JOIN', 'INNER', 'LEFT', 'RIGHT', 'FULL',
    'ON', 'AND', 'OR', 'ORDER', 'GROUP', 'HAVING', 'LIMIT',
)


def normalize_words(words: Iterable[str]) -> FrozenSet[str]:
    """Return an immutable upper-case copy of ``words`` for lookups."""
    return frozenset(word.strip().upper() for word in words if word and word.strip())


__all__ = [
    "KEYWORDS",
    "FUNCTIONS",
    "CLAUSE_KEYWORDS",
    "normalize_words",
]
