"""
Utility functions for CLI operations.

This module provides source discovery and reading helpers shared by the
highlight, format and tokens commands.
"""

import sys
from pathlib import Path
from typing import List, Sequence

from .errors import CLIFileNotFoundError, CLIRuntimeError, wrap_exception
from .validation import STDIN_PATH, validate_path

SQL_SUFFIXES = ('.sql',)


def pluralize(word: str, count: int) -> str:
    """
    Simple English pluralization.

    Examples:
        >>> pluralize("file", 1)
        'file'
        >>> pluralize("file", 3)
        'files'
    """
    return word if count == 1 else f"{word}s"


def collect_sql_sources(values: Sequence[str]) -> List[str]:
    """
    Expand CLI path arguments into SQL sources.

    Files are taken as given, directories expand to the ``.sql`` files
    beneath them in sorted order, and ``-`` stands for standard input.

    Raises:
        CLIFileNotFoundError: If a path is missing or a directory has no SQL files
    """
    sources: List[str] = []
    for value in values:
        if value == STDIN_PATH:
            sources.append(STDIN_PATH)
            continue

        path = validate_path(value)
        if path.is_dir():
            found = sorted(
                candidate for candidate in path.rglob('*')
                if candidate.is_file() and candidate.suffix.lower() in SQL_SUFFIXES
            )
            if not found:
                raise CLIFileNotFoundError(
                    f"No SQL files found in {path}",
                    hint="Directories are searched recursively for *.sql files",
                )
            sources.extend(str(candidate) for candidate in found)
        elif path.is_file():
            sources.append(str(path))
        else:
            raise CLIFileNotFoundError(
                f"SQL source not found: {path}",
                hint="Pass an existing file, a directory or '-' for stdin",
            )
    return sources


def read_source(source: str) -> str:
    """Read SQL text from a file path or from stdin for ``-``."""
    if source == STDIN_PATH:
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        raise wrap_exception(
            exc,
            message=f"Could not read {source}",
            error_class=CLIRuntimeError,
            hint="Check that the file is readable UTF-8 text",
        ) from exc
