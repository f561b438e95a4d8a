"""
Errors reported by the complexsql commands.

Every command catches its failure, turns it into one of the ``CLIError``
classes below and hands it to :func:`handle_cli_exception`, which prints
``Error [CODE]: message`` and an optional ``Hint:`` line to stderr.
"""

import os
import sys
import traceback
from typing import Any, Dict, Optional


# Longest traceback excerpt printed in verbose mode
_CLI_TRACE_LIMIT = 4000


class CLIError(Exception):
    """
    A command failure with a stable code and an optional fix-it hint.

    ``context`` holds extra detail (the config path, the wrapped OS error)
    that is only printed with ``--verbose``.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        hint: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class CLIConfigError(CLIError):
    """``complexsql.toml`` or ``.complexsqlrc`` is missing or invalid."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_CONFIG_ERROR')
        super().__init__(message, **kwargs)


class CLIValidationError(CLIError):
    """A flag value such as ``--indent`` was rejected."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_VALIDATION_ERROR')
        super().__init__(message, **kwargs)


class CLIRuntimeError(CLIError):
    """Reading or writing SQL failed, or the language server could not start."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_RUNTIME_ERROR')
        super().__init__(message, **kwargs)


class CLIFileNotFoundError(CLIError):
    """A SQL path does not exist or a directory holds no ``.sql`` files."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_FILE_NOT_FOUND')
        super().__init__(message, **kwargs)


def format_cli_error(
    exc: BaseException,
    *,
    verbose: bool = False,
    include_traceback: bool = False
) -> str:
    """
    Render an error the way the commands print it.

    Errors that are not ``CLIError`` show their exception type, so an
    unexpected failure in the highlighter or formatter is still readable.

    Examples:
        >>> print(format_cli_error(CLIValidationError("Invalid indent width: 'x'",
        ...                                           hint="Use a positive integer such as 2 or 4")))
        Error [CLI_VALIDATION_ERROR]: Invalid indent width: 'x'
        Hint: Use a positive integer such as 2 or 4
    """
    lines = []

    if isinstance(exc, CLIError):
        lines.append(f"Error [{exc.code}]: {exc.message}")

        if exc.hint:
            lines.append(f"Hint: {exc.hint}")

        if verbose and exc.context:
            lines.append("\nContext:")
            for key, value in exc.context.items():
                lines.append(f"  {key}: {value}")
    else:
        lines.append(f"Error: {exc.__class__.__name__}: {exc}")

    if include_traceback:
        lines.append("\nTraceback:")
        lines.append(format_traceback_excerpt())

    return "\n".join(lines)


def format_traceback_excerpt() -> str:
    """Return the active traceback, cut to ``_CLI_TRACE_LIMIT`` characters."""
    trace = traceback.format_exc().strip()
    if len(trace) <= _CLI_TRACE_LIMIT:
        return trace
    return f"{trace[:_CLI_TRACE_LIMIT - 3]}..."


def wrap_exception(
    exc: BaseException,
    *,
    message: str,
    error_class: type = CLIRuntimeError,
    **kwargs
) -> CLIError:
    """
    Re-express an OS or decoding error as a ``CLIError``.

    The original exception text and type are kept in ``context`` so
    ``--verbose`` shows why a SQL file could not be read or written.
    """
    context = kwargs.get('context', {})
    context['original_exception'] = str(exc)
    context['original_type'] = exc.__class__.__name__
    kwargs['context'] = context

    return error_class(message, **kwargs)


def _env_flag(name: str) -> bool:
    val = os.getenv(name)
    if val is None:
        return False
    return val.strip().lower() in {"1", "true", "yes", "on"}


def cli_verbose_enabled(verbose_flag: bool = False) -> bool:
    """True for ``--verbose``, ``COMPLEXSQL_VERBOSE`` or ``COMPLEXSQL_DEBUG``."""
    return verbose_flag or _env_flag("COMPLEXSQL_VERBOSE") or _env_flag("COMPLEXSQL_DEBUG")


def cli_reraise_enabled() -> bool:
    """Re-raise instead of exiting when COMPLEXSQL_RERAISE or COMPLEXSQL_DEBUG is set."""
    return _env_flag("COMPLEXSQL_RERAISE") or _env_flag("COMPLEXSQL_DEBUG")


def handle_cli_exception(
    exc: BaseException,
    *,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """
    Print ``exc`` to stderr and exit with ``exit_code``.

    Verbose mode adds the error context and a traceback excerpt.
    """
    verbose_effective = cli_verbose_enabled(verbose)
    if cli_reraise_enabled():
        raise exc

    error_message = format_cli_error(
        exc,
        verbose=verbose_effective,
        include_traceback=verbose_effective
    )
    print(error_message, file=sys.stderr)

    sys.exit(exit_code)
