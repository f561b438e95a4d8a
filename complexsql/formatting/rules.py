"""Default formatting rules."""

from __future__ import annotations

from complexsql.lang import CLAUSE_KEYWORDS

from .core import FormattingOptions, IndentStyle


class DefaultFormattingRules:
    """Preset formatting options."""

    @classmethod
    def standard(cls) -> FormattingOptions:
        """Four-space list indent, one clause per line."""
        return FormattingOptions(
            indent_style=IndentStyle.SPACES,
            indent_size=4,
            clause_keywords=list(CLAUSE_KEYWORDS),
            split_statements=False,
        )

    @classmethod
    def compact(cls) -> FormattingOptions:
        """Two-space list indent."""
        return FormattingOptions(
            indent_style=IndentStyle.SPACES,
            indent_size=2,
            clause_keywords=list(CLAUSE_KEYWORDS),
            split_statements=False,
        )

    @classmethod
    def script(cls) -> FormattingOptions:
        """Standard layout applied statement by statement."""
        options = cls.standard()
        options.split_statements = True
        return options
