"""Language server exposing SQL semantic tokens, formatting and diagnostics."""

from .server import ComplexSQLLanguageServer, create_server
from .workspace import DocumentState, WorkspaceIndex, encode_semantic_tokens

__all__ = [
    "ComplexSQLLanguageServer",
    "create_server",
    "DocumentState",
    "WorkspaceIndex",
    "encode_semantic_tokens",
]
