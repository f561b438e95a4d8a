"""Document tracking and feature providers for the SQL language server."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from lsprotocol.types import (
    Diagnostic,
    DiagnosticSeverity,
    DocumentFormattingParams,
    Position,
    Range,
    SemanticTokens,
    SemanticTokensParams,
    TextDocumentContentChangeEvent,
    TextDocumentItem,
    TextEdit,
)

from complexsql.config import WorkspaceConfig, load_workspace_config
from complexsql.formatting import SQLFormatter
from complexsql.lang import RegionKind, Token, classify, find_unterminated
from complexsql.observability.logging import get_logger

from .protocol import (
    DIAGNOSTIC_SOURCE,
    TOKEN_TYPES,
    end_position,
    offset_to_lsp_position,
    split_lines,
    utf16_length,
)

_UNTERMINATED_MESSAGES = {
    RegionKind.STRING: "Unterminated string literal",
    RegionKind.BLOCK_COMMENT: "Unterminated block comment",
}


@dataclass
class DocumentState:
    """Text and version of an open document."""

    uri: str
    text: str
    version: int


def encode_semantic_tokens(tokens: Sequence[Token]) -> List[int]:
    """
    Encode classified tokens in the LSP relative format.

    Each classified token contributes ``[deltaLine, deltaStart, length,
    tokenType, 0]`` per line it covers; plain tokens only advance the
    cursor.
    """
    data: List[int] = []
    line = column = 0
    prev_line = prev_column = 0

    for token in tokens:
        parts = split_lines(token.text)
        if token.category is not None:
            type_index = TOKEN_TYPES.index(token.category.value)
            for index, part in enumerate(parts):
                length = utf16_length(part)
                if not length:
                    continue
                part_line = line + index
                part_column = column if index == 0 else 0
                delta_line = part_line - prev_line
                delta_start = part_column - prev_column if delta_line == 0 else part_column
                data.extend([delta_line, delta_start, length, type_index, 0])
                prev_line, prev_column = part_line, part_column

        if len(parts) > 1:
            line += len(parts) - 1
            column = utf16_length(parts[-1])
        else:
            column += utf16_length(parts[0])

    return data


class WorkspaceIndex:
    """Tracks open SQL documents and answers feature requests for them."""

    def __init__(self, config: Optional[WorkspaceConfig] = None) -> None:
        self.logger = get_logger(__name__)
        self.config = config or WorkspaceConfig(root=Path.cwd())
        self._open_documents: Dict[str, DocumentState] = {}

    def load_config(self, root: Path) -> None:
        self.config = load_workspace_config(root)

    # ------------------------------------------------------------------
    # Document lifecycle
    # ------------------------------------------------------------------
    def did_open(self, item: TextDocumentItem) -> List[Diagnostic]:
        document = DocumentState(uri=item.uri, text=item.text, version=item.version)
        self._open_documents[item.uri] = document
        return self.diagnostics(document)

    def did_change(
        self,
        uri: str,
        version: int,
        changes: Sequence[TextDocumentContentChangeEvent],
    ) -> List[Diagnostic]:
        # Full sync: the last change carries the whole document
        document = DocumentState(uri=uri, text=changes[-1].text, version=version)
        self._open_documents[uri] = document
        return self.diagnostics(document)

    def did_close(self, uri: str) -> None:
        self._open_documents.pop(uri, None)

    def document(self, uri: str) -> Optional[DocumentState]:
        return self._open_documents.get(uri)

    # ------------------------------------------------------------------
    # Features
    # ------------------------------------------------------------------
    def diagnostics(self, document: DocumentState) -> List[Diagnostic]:
        diagnostics = []
        for region in find_unterminated(document.text):
            diagnostics.append(
                Diagnostic(
                    range=Range(
                        start=offset_to_lsp_position(document.text, region.start),
                        end=end_position(document.text),
                    ),
                    message=_UNTERMINATED_MESSAGES.get(region.kind, "Unterminated region"),
                    severity=DiagnosticSeverity.Warning,
                    source=DIAGNOSTIC_SOURCE,
                )
            )
        return diagnostics

    def semantic_tokens(self, params: SemanticTokensParams) -> SemanticTokens:
        document = self.document(params.text_document.uri)
        if document is None:
            return SemanticTokens(data=[])
        tokens = classify(document.text, self.config.keywords(), self.config.functions())
        return SemanticTokens(data=encode_semantic_tokens(tokens))

    def format_document(self, params: DocumentFormattingParams) -> List[TextEdit]:
        document = self.document(params.text_document.uri)
        if document is None:
            return []
        result = SQLFormatter(self.config.formatting_options()).format_document(document.text)
        formatted_text = result.formatted_text
        if formatted_text and document.text.endswith("\n"):
            formatted_text += "\n"
        if formatted_text == document.text:
            return []
        self.logger.debug("Formatting %s (version %s)", document.uri, document.version)
        total_range = Range(
            start=Position(line=0, character=0),
            end=end_position(document.text),
        )
        return [TextEdit(range=total_range, new_text=formatted_text)]


__all__ = ["DocumentState", "WorkspaceIndex", "encode_semantic_tokens"]
