"""Protocol constants and position helpers for the SQL language server."""

from __future__ import annotations

import re
from typing import List

from lsprotocol.types import Position, SemanticTokensLegend

from complexsql.lang import Category

# Legend order defines the token type indices sent to the client
TOKEN_TYPES: List[str] = [category.value for category in Category]

SEMANTIC_LEGEND = SemanticTokensLegend(token_types=TOKEN_TYPES, token_modifiers=[])

DIAGNOSTIC_SOURCE = "complexsql"

# Line terminators recognised by LSP clients
LINE_BREAK = re.compile(r"\r\n|\r|\n")


def utf16_length(text: str) -> int:
    """Length of ``text`` in UTF-16 code units, the LSP column unit."""
    return len(text.encode("utf-16-le")) // 2


def split_lines(text: str) -> List[str]:
    return LINE_BREAK.split(text)


def offset_to_lsp_position(text: str, offset: int) -> Position:
    lines = split_lines(text[:offset])
    return Position(line=len(lines) - 1, character=utf16_length(lines[-1]))


def end_position(text: str) -> Position:
    return offset_to_lsp_position(text, len(text))
