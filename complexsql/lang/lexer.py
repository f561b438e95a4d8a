"""Lexical classifier for SQL snippets.

Splits SQL text into display tokens (keywords, function calls, string and
numeric literals, comments and plain text) in a single left-to-right scan.
Strings and comments are located first in reading order and nothing inside
them is classified again.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Iterable, List, Optional, Tuple

from complexsql.observability.logging import get_logger

from .keywords import FUNCTIONS, KEYWORDS, normalize_words

logger = get_logger(__name__)

_WORD = re.compile(r"[A-Za-z0-9_]+")
_CALL_OPENER = re.compile(r"\s*\(")


class Category(str, Enum):
    """Display categories; values double as CSS class names."""

    KEYWORD = "keyword"
    FUNCTION = "function"
    STRING = "string"
    NUMBER = "number"
    COMMENT = "comment"

    def __str__(self) -> str:
        return self.value


class RegionKind(Enum):
    """Scanner states."""

    CODE = auto()
    STRING = auto()
    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()


_REGION_CATEGORY: Dict[RegionKind, Category] = {
    RegionKind.STRING: Category.STRING,
    RegionKind.LINE_COMMENT: Category.COMMENT,
    RegionKind.BLOCK_COMMENT: Category.COMMENT,
}


@dataclass(frozen=True)
class Region:
    """A ``[start, end)`` slice of the source in a single scanner state."""

    kind: RegionKind
    start: int
    end: int
    terminated: bool = True

    @property
    def protected(self) -> bool:
        return self.kind is not RegionKind.CODE


@dataclass(frozen=True)
class Token:
    """A display token. ``category`` is ``None`` for plain text."""

    text: str
    category: Optional[Category] = None

    @property
    def is_plain(self) -> bool:
        return self.category is None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "text": self.text,
            "category": self.category.value if self.category is not None else None,
        }

    def __repr__(self) -> str:
        label = self.category.name if self.category is not None else "PLAIN"
        return f"Token({label}, {self.text!r})"


class Lexer:
    """Tokenizer for SQL display text."""

    def __init__(
        self,
        source: str,
        keywords: Iterable[str] = KEYWORDS,
        functions: Iterable[str] = FUNCTIONS,
    ):
        self.source = source
        self.keywords = normalize_words(keywords)
        self.functions = normalize_words(functions)
        self.pos = 0
        self.tokens: List[Token] = []
        self._plain: List[str] = []

    def peek(self, offset: int = 0) -> Optional[str]:
        """Peek at character without consuming."""
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return None

    # ------------------------------------------------------------------
    # Region scanning
    # ------------------------------------------------------------------
    def scan_regions(self) -> List[Region]:
        """Partition the source into code, string and comment regions."""
        regions: List[Region] = []
        self.pos = 0
        code_start = 0

        while self.pos < len(self.source):
            char = self.peek()
            if char == '/' and self.peek(1) == '*':
                kind, reader = RegionKind.BLOCK_COMMENT, self._read_block_comment
            elif char == '-' and self.peek(1) == '-':
                kind, reader = RegionKind.LINE_COMMENT, self._read_line_comment
            elif char == "'":
                kind, reader = RegionKind.STRING, self._read_string
            else:
                self.pos += 1
                continue

            if code_start < self.pos:
                regions.append(Region(RegionKind.CODE, code_start, self.pos))
            start = self.pos
            terminated = reader()
            if not terminated:
                logger.debug("Unterminated %s at offset %d", kind.name.lower(), start)
            regions.append(Region(kind, start, self.pos, terminated))
            code_start = self.pos

        if code_start < len(self.source):
            regions.append(Region(RegionKind.CODE, code_start, len(self.source)))
        return regions

    def _read_block_comment(self) -> bool:
        end = self.source.find('*/', self.pos + 2)
        if end == -1:
            self.pos = len(self.source)
            return False
        self.pos = end + 2
        return True

    def _read_line_comment(self) -> bool:
        self.pos += 2
        while self.peek() is not None and self.peek() not in ('\n', '\r'):
            self.pos += 1
        return True

    def _read_string(self) -> bool:
        self.pos += 1
        while True:
            quote = self.source.find("'", self.pos)
            if quote == -1:
                self.pos = len(self.source)
                return False
            # '' is an escaped quote inside the literal
            if self.source.startswith("''", quote):
                self.pos = quote + 2
                continue
            self.pos = quote + 1
            return True

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------
    def tokenize(self) -> List[Token]:
        """Tokenize the entire source."""
        self.tokens = []
        self._plain = []

        for region in self.scan_regions():
            text = self.source[region.start:region.end]
            if region.protected:
                self._emit(text, _REGION_CATEGORY[region.kind])
            else:
                self._classify_code(text)

        self._flush_plain()
        return self.tokens

    def _classify_code(self, text: str) -> None:
        cursor = 0
        for match in _WORD.finditer(text):
            category = self._word_category(match.group(), text, match.end())
            if category is None:
                continue
            self._emit(text[cursor:match.start()], None)
            self._emit(match.group(), category)
            cursor = match.end()
        self._emit(text[cursor:], None)

    def _word_category(self, word: str, text: str, end: int) -> Optional[Category]:
        if word.isdigit():
            return Category.NUMBER
        upper = word.upper()
        if upper in self.keywords:
            return Category.KEYWORD
        if upper in self.functions and _CALL_OPENER.match(text, end):
            return Category.FUNCTION
        return None

    def _emit(self, text: str, category: Optional[Category]) -> None:
        if not text:
            return
        if category is None:
            self._plain.append(text)
            return
        self._flush_plain()
        self.tokens.append(Token(text=text, category=category))

    def _flush_plain(self) -> None:
        if self._plain:
            self.tokens.append(Token(text="".join(self._plain)))
            self._plain = []


def scan_regions(source: str) -> List[Region]:
    """Return the code/string/comment partition of ``source``."""
    return Lexer(source).scan_regions()


def classify(
    source: str,
    keywords: Iterable[str] = KEYWORDS,
    functions: Iterable[str] = FUNCTIONS,
) -> List[Token]:
    """
    Classify SQL text into display tokens.

    Concatenating the returned token texts reproduces ``source`` exactly.
    Unterminated strings and comments run to the end of the input; no input
    raises.

    Args:
        source: Raw SQL text
        keywords: Reserved words to highlight (case-insensitive)
        functions: Builtin function names, highlighted when followed by ``(``

    Returns:
        Ordered list of tokens

    Examples:
        >>> [t.text for t in classify("SELECT 1")]
        ['SELECT', ' ', '1']
    """
    return Lexer(source, keywords, functions).tokenize()


def find_unterminated(source: str) -> List[Region]:
    """Return the strings and block comments that run to end of input."""
    return [region for region in scan_regions(source) if not region.terminated]


def offset_to_position(source: str, offset: int) -> Tuple[int, int]:
    """Convert a character offset into a zero-based ``(line, column)`` pair."""
    line = source.count('\n', 0, offset)
    line_start = source.rfind('\n', 0, offset) + 1
    return line, offset - line_start


def split_statements(source: str) -> List[str]:
    """
    Split ``source`` at top-level semicolons.

    Semicolons inside strings and comments are ignored. Each statement keeps
    its terminating ``;`` and the whitespace around it; whitespace-only
    pieces are dropped.
    """
    statements: List[str] = []
    start = 0
    for region in scan_regions(source):
        if region.protected:
            continue
        offset = source.find(';', region.start, region.end)
        while offset != -1:
            piece = source[start:offset + 1]
            if piece.strip():
                statements.append(piece)
            start = offset + 1
            offset = source.find(';', start, region.end)
    tail = source[start:]
    if tail.strip():
        statements.append(tail)
    return statements


__all__ = [
    "Category",
    "Token",
    "Region",
    "RegionKind",
    "Lexer",
    "classify",
    "scan_regions",
    "find_unterminated",
    "offset_to_position",
    "split_statements",
]
