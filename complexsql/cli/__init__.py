"""
complexsql CLI entry point.

This module builds the argument parser and dispatches to the command
modules under :mod:`complexsql.cli.commands`.
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Optional

from complexsql import __version__
from complexsql.observability.logging import configure_logging

from .commands import cmd_format, cmd_highlight, cmd_lsp, cmd_tokens
from .context import build_cli_context
from .errors import handle_cli_exception


def _configure_runtime_logging(args) -> None:
    """Configure the package logger from --log-level or COMPLEXSQL_LOG_LEVEL."""
    log_level = getattr(args, 'log_level', None) or os.getenv('COMPLEXSQL_LOG_LEVEL', 'warn')
    configure_logging(log_level)


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level parser with all subcommands registered."""
    parser = argparse.ArgumentParser(
        description="Highlight and format SQL snippets for teaching pages",
        prog="complexsql"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        '--config',
        default=None,
        help='Path to a complexsql.toml configuration file'
    )
    parser.add_argument(
        '--workspace',
        default=None,
        help='Workspace root directory (defaults to current working directory)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print full tracebacks and detailed CLI errors (or set COMPLEXSQL_VERBOSE=1)'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default=None,
        help='Set logging level (or set COMPLEXSQL_LOG_LEVEL)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Highlight subcommand
    highlight_parser = subparsers.add_parser(
        'highlight',
        help='Render SQL as an HTML fragment with syntax classes'
    )
    highlight_parser.add_argument('paths', nargs='+', help="SQL files, directories or '-' for stdin")
    highlight_parser.add_argument(
        '--wrap', action='store_true', help='Wrap each fragment in <pre><code>'
    )
    highlight_parser.add_argument(
        '--output', '-o', default=None, help='Write the HTML to this file instead of stdout'
    )
    highlight_parser.set_defaults(func=cmd_highlight)

    # Format subcommand
    format_parser = subparsers.add_parser(
        'format',
        help='Re-flow SQL into one clause per line'
    )
    format_parser.add_argument('paths', nargs='+', help="SQL files, directories or '-' for stdin")
    mode = format_parser.add_mutually_exclusive_group()
    mode.add_argument(
        '--check', action='store_true', help='Exit with status 1 if any file would be reformatted'
    )
    mode.add_argument(
        '--write', action='store_true', help='Write formatted SQL back to the files'
    )
    format_parser.add_argument(
        '--indent', default=None, help='Indent width for list items (overrides configuration)'
    )
    format_parser.add_argument(
        '--split-statements', action='store_true',
        help='Format each ;-terminated statement separately'
    )
    format_parser.set_defaults(func=cmd_format)

    # Tokens subcommand
    tokens_parser = subparsers.add_parser(
        'tokens',
        help='Print the classified token stream'
    )
    tokens_parser.add_argument('path', help="SQL file or '-' for stdin")
    tokens_parser.add_argument('--json', action='store_true', help='Print tokens as a JSON array')
    tokens_parser.set_defaults(func=cmd_tokens)

    # Language server subcommand
    lsp_parser = subparsers.add_parser(
        'lsp',
        help='Start the SQL language server over stdio'
    )
    lsp_parser.set_defaults(func=cmd_lsp)

    return parser


def main(argv: Optional[list] = None) -> None:
    """
    Main CLI entrypoint with subcommand support.

    Args:
        argv: Command-line arguments (None uses sys.argv[1:])

    Examples:
        >>> main(['format', 'queries/', '--check'])  # doctest: +SKIP
        >>> main(['highlight', 'query.sql', '--wrap'])  # doctest: +SKIP
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command specified, print help
    if not hasattr(args, 'func'):
        parser.print_help()
        sys.exit(1)

    _configure_runtime_logging(args)

    workspace_root = Path(args.workspace) if args.workspace else Path.cwd()
    try:
        args.cli_context = build_cli_context(workspace_root, args.config)
    except Exception as exc:
        handle_cli_exception(exc, verbose=args.verbose)

    # Execute command
    args.func(args)


__all__ = ["main", "build_parser"]
