from __future__ import annotations

import pytest

DOCUMENT_URI = "file:///workspace/query.sql"


@pytest.fixture()
def workspace():
    pytest.importorskip("pygls")
    from complexsql.lsp.workspace import WorkspaceIndex

    return WorkspaceIndex()


@pytest.fixture()
def open_document(workspace):
    """Open ``text`` in the workspace and return its diagnostics."""
    from lsprotocol.types import TextDocumentItem

    def _open(text: str, *, version: int = 1):
        item = TextDocumentItem(uri=DOCUMENT_URI, language_id="sql", version=version, text=text)
        return workspace.did_open(item)

    return _open
