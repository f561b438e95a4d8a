"""
complexsql: syntax highlighting and formatting for SQL teaching snippets.

The package turns raw SQL text into display output.  It does not parse or
execute SQL; it only classifies text lexically and re-flows whitespace.

The code is organised into several modules:

* ``lang`` – keyword registries and the single-pass tokenizer that splits
  SQL into keyword, function, string, number, comment and plain tokens.
* ``highlight`` – renders token streams as HTML fragments using
  ``<span class="...">`` wrappers.
* ``formatting`` – collapses whitespace and breaks lines at list commas
  and clause keywords, never touching strings or comments.
* ``config`` – optional ``complexsql.toml`` workspace settings.
* ``cli`` and ``lsp`` – command line and editor front ends.
"""

__version__ = "0.3.0"

from .formatting import FormattingOptions, SQLFormatter, format_sql
from .highlight import HTMLRenderer, highlight_sql, render
from .lang import (
    CLAUSE_KEYWORDS,
    FUNCTIONS,
    KEYWORDS,
    Category,
    Token,
    classify,
    split_statements,
)

__all__ = [
    "__version__",
    "Category",
    "Token",
    "KEYWORDS",
    "FUNCTIONS",
    "CLAUSE_KEYWORDS",
    "classify",
    "split_statements",
    "HTMLRenderer",
    "render",
    "highlight_sql",
    "FormattingOptions",
    "SQLFormatter",
    "format_sql",
]
