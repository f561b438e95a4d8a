"""Core formatting infrastructure for SQL snippets."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import List, Optional, Sequence

from complexsql.lang import (
    CLAUSE_KEYWORDS,
    FUNCTIONS,
    RegionKind,
    find_unterminated,
    normalize_words,
    offset_to_position,
    scan_regions,
    split_statements,
)
from complexsql.observability.logging import get_logger

logger = get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")

_UNTERMINATED_LABELS = {
    RegionKind.STRING: "string literal",
    RegionKind.BLOCK_COMMENT: "block comment",
}


class IndentStyle(Enum):
    """Supported indentation styles."""
    SPACES = "spaces"
    TABS = "tabs"


@dataclass
class FormattingOptions:
    """Configuration options for SQL formatting."""

    # Indentation applied after a top-level comma
    indent_style: IndentStyle = IndentStyle.SPACES
    indent_size: int = 4

    # Words that start a new line
    clause_keywords: Sequence[str] = field(default_factory=lambda: list(CLAUSE_KEYWORDS))

    # Format each statement of a multi-statement script on its own
    split_statements: bool = False


@dataclass
class FormattedResult:
    """Result of a formatting operation."""

    formatted_text: str
    is_changed: bool
    warnings: List[str] = field(default_factory=list)


class _PieceKind(Enum):
    CODE = auto()
    LITERAL = auto()
    LINE_BREAK = auto()


@dataclass(frozen=True)
class _Piece:
    kind: _PieceKind
    text: str


class SQLFormatter:
    """
    Whitespace normalising formatter for SQL snippets.

    The formatter:
    1. Collapses whitespace runs outside strings and comments
    2. Breaks the line after every top-level comma
    3. Starts every clause keyword on its own line
    4. Trims the result

    Strings and comments are copied verbatim and the newline that ends a
    line comment is kept.
    """

    def __init__(self, options: Optional[FormattingOptions] = None):
        self.options = options or FormattingOptions()
        self._indent_str = self._make_indent_string()
        self._clause_pattern = self._make_clause_pattern()
        self._call_words = normalize_words(self.options.clause_keywords) & FUNCTIONS

    def _make_indent_string(self) -> str:
        """Create the indentation string based on options."""
        if self.options.indent_style == IndentStyle.TABS:
            return "\t"
        return " " * self.options.indent_size

    def _make_clause_pattern(self) -> Optional[re.Pattern]:
        words = sorted(normalize_words(self.options.clause_keywords), key=len, reverse=True)
        if not words:
            return None
        alternatives = "|".join(re.escape(word) for word in words)
        return re.compile(rf"\s+({alternatives})\b(\()?", re.IGNORECASE)

    def format_document(self, source_text: str) -> FormattedResult:
        """
        Format a SQL snippet or script.

        Args:
            source_text: The SQL to format

        Returns:
            FormattedResult with formatted text, change flag and warnings
        """
        if self.options.split_statements:
            statements = [self.format_text(statement) for statement in split_statements(source_text)]
            formatted_text = "\n\n".join(statement for statement in statements if statement)
        else:
            formatted_text = self.format_text(source_text)

        return FormattedResult(
            formatted_text=formatted_text,
            is_changed=formatted_text != source_text,
            warnings=self._collect_warnings(source_text),
        )

    def format_text(self, source_text: str) -> str:
        """Format a single snippet and return the re-flowed text."""
        pieces = self._collapse_whitespace(source_text)
        pieces = self._break_commas(pieces)
        pieces = [self._break_clauses(piece) for piece in pieces]
        return self._trim(pieces)

    def _collapse_whitespace(self, source_text: str) -> List[_Piece]:
        pieces: List[_Piece] = []
        after_line_comment = False

        for region in scan_regions(source_text):
            text = source_text[region.start:region.end]
            if region.protected:
                pieces.append(_Piece(_PieceKind.LITERAL, text))
            else:
                if after_line_comment:
                    pieces.append(_Piece(_PieceKind.LINE_BREAK, "\n"))
                    text = text.lstrip()
                collapsed = _WHITESPACE.sub(" ", text)
                if collapsed:
                    pieces.append(_Piece(_PieceKind.CODE, collapsed))
            after_line_comment = region.kind is RegionKind.LINE_COMMENT

        return pieces

    def _break_commas(self, pieces: List[_Piece]) -> List[_Piece]:
        result: List[_Piece] = []
        depth = 0

        for piece in pieces:
            if piece.kind is not _PieceKind.CODE:
                result.append(piece)
                continue

            chunks: List[str] = []
            skip_space = False
            for char in piece.text:
                if skip_space and char.isspace():
                    continue
                skip_space = False
                if char == '(':
                    depth += 1
                elif char == ')':
                    depth = max(0, depth - 1)
                elif char == ',' and depth == 0:
                    while chunks and chunks[-1].isspace():
                        chunks.pop()
                    chunks.append(",\n" + self._indent_str)
                    skip_space = True
                    continue
                chunks.append(char)

            result.append(replace(piece, text="".join(chunks)))

        return result

    def _break_clauses(self, piece: _Piece) -> _Piece:
        if piece.kind is not _PieceKind.CODE or self._clause_pattern is None:
            return piece
        return replace(piece, text=self._clause_pattern.sub(self._clause_break, piece.text))

    def _clause_break(self, match: re.Match) -> str:
        word, paren = match.group(1), match.group(2) or ""
        # LEFT(name, 3) is a function call, not a join
        if paren and word.upper() in self._call_words:
            return match.group(0)
        return "\n" + word + paren

    def _trim(self, pieces: List[_Piece]) -> str:
        """Strip outer whitespace without touching strings or comments."""
        pieces = list(pieces)

        while pieces and pieces[0].kind is not _PieceKind.LITERAL:
            head = pieces[0].text.lstrip()
            if head:
                pieces[0] = replace(pieces[0], text=head)
                break
            pieces.pop(0)

        while pieces and pieces[-1].kind is not _PieceKind.LITERAL:
            tail = pieces[-1].text.rstrip()
            if tail:
                pieces[-1] = replace(pieces[-1], text=tail)
                break
            pieces.pop()

        return "".join(piece.text for piece in pieces)

    def _collect_warnings(self, source_text: str) -> List[str]:
        warnings = []
        for region in find_unterminated(source_text):
            line, column = offset_to_position(source_text, region.start)
            label = _UNTERMINATED_LABELS.get(region.kind, "region")
            warnings.append(f"Unterminated {label} at line {line + 1}, column {column + 1}")
        if warnings:
            logger.debug("Formatting input has %d unterminated region(s)", len(warnings))
        return warnings


def format_sql(source_text: str, options: Optional[FormattingOptions] = None) -> str:
    """
    Re-flow SQL text into a readable multi-line layout.

    Examples:
        >>> format_sql("SELECT a, b FROM t WHERE a=1")
        'SELECT a,\\n    b\\nFROM t\\nWHERE a=1'
    """
    return SQLFormatter(options).format_document(source_text).formatted_text
