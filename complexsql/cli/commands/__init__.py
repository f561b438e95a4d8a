"""
Command handlers for the complexsql CLI.

Each handler takes the parsed ``argparse.Namespace`` and reports failures
through :func:`complexsql.cli.errors.handle_cli_exception`.
"""

from .highlight import cmd_highlight, cmd_tokens
from .tools import cmd_format, cmd_lsp

__all__ = ["cmd_highlight", "cmd_tokens", "cmd_format", "cmd_lsp"]
