"""Centralised logging helpers for complexsql."""

from __future__ import annotations

import logging
from typing import Dict, Optional

_LOGGER_CACHE: Dict[str, logging.Logger] = {}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_LEVEL_MAP = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'warning': logging.WARNING,
    'error': logging.ERROR,
}


def get_logger(name: str = "complexsql") -> logging.Logger:
    """Return a cached :class:`logging.Logger` instance."""

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = logging.getLogger(name)
    return _LOGGER_CACHE[name]


def resolve_level(value: Optional[str], default: int = logging.WARNING) -> int:
    """Map a level name such as ``"warn"`` to its numeric value."""

    if not value:
        return default
    return _LEVEL_MAP.get(value.strip().lower(), default)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a console handler to the package logger at ``level``."""

    root_logger = get_logger("complexsql")
    root_logger.setLevel(resolve_level(level))
    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)
    return root_logger
