"""Semantic token handler."""

from __future__ import annotations

from lsprotocol.types import SemanticTokensParams

from ..protocol import SEMANTIC_LEGEND


def register(server) -> None:
    workspace = server.workspace_index

    @server.feature("textDocument/semanticTokens/full", SEMANTIC_LEGEND)
    async def _semantic_tokens(ls, params: SemanticTokensParams):
        return workspace.semantic_tokens(params)
