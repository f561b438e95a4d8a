"""pygls based Language Server entrypoint."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from lsprotocol.types import InitializedParams, TextDocumentSyncKind
from pygls.server import LanguageServer
from pygls.uris import to_fs_path

from complexsql import __version__
from complexsql.config import WorkspaceConfig
from complexsql.errors import ConfigError
from complexsql.observability.logging import get_logger

from .handlers import register_all
from .workspace import WorkspaceIndex

logger = get_logger(__name__)


class ComplexSQLLanguageServer(LanguageServer):
    """Concrete LanguageServer holding the SQL document index."""

    def __init__(self, config: Optional[WorkspaceConfig] = None) -> None:
        super().__init__(
            name="complexsql-lsp",
            version=__version__,
            text_document_sync_kind=TextDocumentSyncKind.Full,
        )
        self.workspace_index = WorkspaceIndex(config)
        self._explicit_config = config is not None
        register_all(self)
        self._register_lifecycle_handlers()

    def _register_lifecycle_handlers(self) -> None:
        workspace = self.workspace_index

        @self.feature("initialized")
        async def _on_initialized(ls: "ComplexSQLLanguageServer", params: InitializedParams) -> None:  # noqa: ARG001
            if ls._explicit_config or not ls.workspace.root_uri:
                return
            root_path = to_fs_path(ls.workspace.root_uri)
            if not root_path:
                return
            try:
                workspace.load_config(Path(root_path))
            except ConfigError as exc:
                logger.warning("Ignoring invalid workspace configuration: %s", exc.format())
                return
            logger.info("Workspace configuration loaded from %s", root_path)


def create_server(config: Optional[WorkspaceConfig] = None) -> ComplexSQLLanguageServer:
    return ComplexSQLLanguageServer(config)


def main() -> None:
    server = create_server()
    logger.info("Starting complexsql LSP (pid=%s)", os.getpid())
    server.start_io()


if __name__ == "__main__":  # pragma: no cover
    main()
