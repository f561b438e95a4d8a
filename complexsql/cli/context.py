"""
CLI context and workspace configuration resolution.

This module provides the CLIContext dataclass shared by every command of a
single invocation.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config import WorkspaceConfig, load_workspace_config
from ..errors import ConfigError
from .errors import CLIConfigError


@dataclass
class CLIContext:
    """
    Shared context resolved from workspace configuration.

    Attributes:
        workspace_root: Root directory of the workspace
        config: Parsed workspace configuration
    """

    workspace_root: Path
    config: WorkspaceConfig


def build_cli_context(workspace_root: Path, config_path: Optional[str] = None) -> CLIContext:
    """
    Load workspace configuration and wrap it in a CLIContext.

    Raises:
        CLIConfigError: If the configuration file is missing or invalid
    """
    explicit = Path(config_path) if config_path else None
    try:
        config = load_workspace_config(workspace_root, explicit)
    except ConfigError as exc:
        location = exc.location.describe()
        message = exc.message if location == "unknown location" else f"{exc.message} ({location})"
        raise CLIConfigError(
            message,
            hint=exc.hint or "Fix the configuration file or pass --config",
            context={"path": exc.path},
        ) from exc
    return CLIContext(workspace_root=config.root, config=config)


def get_cli_context(args: argparse.Namespace) -> CLIContext:
    """
    Retrieve CLIContext from parsed arguments.

    The context is attached to args during argument parsing, before command
    execution.

    Raises:
        CLIConfigError: If context was not initialized
    """
    ctx = getattr(args, "cli_context", None)
    if ctx is None:
        raise CLIConfigError(
            "CLI context was not initialized before command execution",
            hint="This is an internal error - please report it",
            code="CLI_CONTEXT_NOT_INITIALIZED"
        )
    return ctx
