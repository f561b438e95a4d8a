"""Error model for complexsql.

The highlighter and formatter never raise for SQL input; these errors
cover the configuration and tooling layers around them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ErrorLocation:
    """Where in a configuration file a problem was found (1-based)."""

    path: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    def describe(self) -> str:
        if not self.path:
            return "unknown location"
        parts = [self.path]
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        return ":".join(parts)


class ComplexSQLError(Exception):
    """
    Base class for problems reported to the user.

    ``format()`` gives a one-line message such as
    ``Invalid JSON configuration: ... (.complexsqlrc:1:11; CONFIG_INVALID)``
    followed by the hint, if any.
    """

    code: Optional[str] = None
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.location = ErrorLocation(path=path, line=line, column=column)
        if code is not None:
            self.code = code
        if hint is not None:
            self.hint = hint

    @property
    def path(self) -> Optional[str]:
        return self.location.path

    @property
    def line(self) -> Optional[int]:
        return self.location.line

    @property
    def column(self) -> Optional[int]:
        return self.location.column

    def format(self) -> str:
        meta = [part for part in (self.path and self.location.describe(), self.code) if part]
        text = f"{self.message} ({'; '.join(meta)})" if meta else self.message
        if self.hint:
            text = f"{text} Hint: {self.hint}"
        return text


class ConfigError(ComplexSQLError):
    """A workspace configuration file could not be read or has invalid values."""

    code = "CONFIG_INVALID"


__all__ = [
    "ComplexSQLError",
    "ConfigError",
    "ErrorLocation",
]
