"""SQL lexical layer: keyword registries and the display tokenizer."""

from .keywords import CLAUSE_KEYWORDS, FUNCTIONS, KEYWORDS, normalize_words
from .lexer import (
    Category,
    Lexer,
    Region,
    RegionKind,
    Token,
    classify,
    find_unterminated,
    offset_to_position,
    scan_regions,
    split_statements,
)

__all__ = [
    "KEYWORDS",
    "FUNCTIONS",
    "CLAUSE_KEYWORDS",
    "normalize_words",
    "Category",
    "Lexer",
    "Region",
    "RegionKind",
    "Token",
    "classify",
    "scan_regions",
    "find_unterminated",
    "offset_to_position",
    "split_statements",
]
