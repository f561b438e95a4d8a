"""
Developer tooling commands: formatting and the language server.
"""

import argparse
import os
import sys
from pathlib import Path

from ...formatting import SQLFormatter
from ..context import get_cli_context
from ..errors import CLIRuntimeError, CLIValidationError, handle_cli_exception
from ..utils import collect_sql_sources, pluralize, read_source
from ..validation import STDIN_PATH, validate_indent


def cmd_format(args: argparse.Namespace) -> None:
    """
    Handle the 'format' subcommand to re-flow SQL source files.

    Args:
        args: Parsed command-line arguments containing:
            - paths: Files, directories or '-' for stdin
            - check: If True, only check if formatting is needed
            - write: If True, write changes back to the files
            - indent: Optional indent width override
            - split_statements: Format each statement separately

    Raises:
        SystemExit: If check mode finds files that would change

    Examples:
        >>> args = argparse.Namespace(paths=['query.sql'], check=True, write=False,
        ...                           indent=None, split_statements=False)
        >>> cmd_format(args)  # doctest: +SKIP
        All files are already formatted
    """
    try:
        ctx = get_cli_context(args)
        options = ctx.config.formatting_options()
        if args.indent is not None:
            options.indent_size = validate_indent(args.indent)
        if args.split_statements:
            options.split_statements = True
        formatter = SQLFormatter(options)

        sources = collect_sql_sources(args.paths)
        if (args.write or args.check) and STDIN_PATH in sources:
            raise CLIValidationError(
                "--write and --check need file paths, not stdin",
                hint="Drop the flag to print the formatted SQL instead",
            )

        changed_count = 0
        for source in sources:
            content = read_source(source)
            result = formatter.format_document(content)
            for warning in result.warnings:
                print(f"Warning in {source}: {warning}", file=sys.stderr)

            formatted = result.formatted_text + "\n" if result.formatted_text else ""

            if args.check:
                if formatted != content:
                    print(f"Would reformat {source}")
                    changed_count += 1
            elif args.write:
                if formatted != content:
                    Path(source).write_text(formatted, encoding='utf-8')
                    print(f"Formatted {source}")
                    changed_count += 1
            else:
                if len(sources) > 1:
                    print(f"-- {source}")
                sys.stdout.write(formatted)

        if args.check:
            if changed_count > 0:
                print(f"{changed_count} {pluralize('file', changed_count)} would be reformatted")
                raise SystemExit(1)
            print("All files are already formatted")
        elif args.write:
            print(f"Formatted {changed_count} {pluralize('file', changed_count)}")

    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))


def cmd_lsp(args: argparse.Namespace) -> None:
    """
    Handle the 'lsp' subcommand to launch the SQL language server.

    Starts the language server over stdio for editor integration. The
    server provides semantic highlighting, formatting and diagnostics for
    unterminated strings and comments.

    Raises:
        SystemExit: If language server fails to start or pygls is not installed
    """
    try:
        ctx = get_cli_context(args)

        try:
            from complexsql.lsp.server import create_server
        except ImportError as exc:
            raise CLIRuntimeError(
                "pygls is not installed",
                hint="Install with: pip install complexsql[lsp]",
            ) from exc

        server = create_server(ctx.config)
        print(f"Starting complexsql language server (pid={os.getpid()})", file=sys.stderr)

        try:
            server.start_io()
        except KeyboardInterrupt:
            print("Language server interrupted by user.", file=sys.stderr)

    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
