"""Logging helpers shared by the library, CLI and language server."""

from .logging import configure_logging, get_logger, resolve_level

__all__ = ["configure_logging", "get_logger", "resolve_level"]
