"""
Validation of command line values for the SQL commands.

Bad values surface as ``CLIValidationError`` so every command reports them
with the same code and hint layout.
"""

import os
from pathlib import Path
from typing import Any

from .errors import CLIValidationError

# Pseudo path that selects standard input
STDIN_PATH = "-"


def validate_path(value: Any) -> Path:
    """
    Convert a SQL source argument to a Path.

    Existence is checked later by the source collector, which tells files
    and directories apart.

    Raises:
        CLIValidationError: If value is not a string or PathLike

    Examples:
        >>> validate_path("queries/report.sql")
        PosixPath('queries/report.sql')
    """
    if isinstance(value, (str, os.PathLike)):
        return Path(value)

    raise CLIValidationError(
        f"Expected a SQL file or directory path, got {type(value).__name__}",
        hint="Pass a file, a directory or '-' for stdin"
    )


def validate_indent(value: Any) -> int:
    """
    Validate the ``--indent`` width of the format command.

    Raises:
        CLIValidationError: If value is not a positive integer
    """
    try:
        indent = int(value)
    except (TypeError, ValueError) as exc:
        raise CLIValidationError(
            f"Invalid indent width: {value!r}",
            hint="Use a positive integer such as 2 or 4"
        ) from exc

    if indent < 1:
        raise CLIValidationError(
            f"Indent width must be positive, got {indent}",
            hint="Use a positive integer such as 2 or 4"
        )
    return indent
