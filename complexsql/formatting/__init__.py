"""
Whitespace and line-break formatter for SQL snippets.

This module provides a formatter that:
1. Collapses whitespace outside strings and comments
2. Puts every top-level list item on its own indented line
3. Starts each major clause on a new line
4. Leaves token text and order untouched
"""

from __future__ import annotations

__all__ = [
    "SQLFormatter",
    "FormattingOptions",
    "FormattedResult",
    "IndentStyle",
    "DefaultFormattingRules",
    "format_sql",
]

from .core import FormattedResult, FormattingOptions, IndentStyle, SQLFormatter, format_sql
from .rules import DefaultFormattingRules
