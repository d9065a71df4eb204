"""
CLI context management.

This module provides the CLIContext dataclass shared by every command of a
single invocation.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config import WorkspaceConfig, load_workspace_config
from .errors import CLIConfigError


@dataclass
class CLIContext:
    """
    Shared context resolved from workspace configuration.

    Attributes:
        workspace_root: Root directory of the workspace
        config: Parsed workspace configuration
        verbose: Whether verbose error output was requested
    """

    workspace_root: Path
    config: WorkspaceConfig
    verbose: bool = False


def build_cli_context(
    workspace_root: Path,
    config_path: Optional[Path] = None,
    *,
    verbose: bool = False,
) -> CLIContext:
    """
    Load workspace configuration and wrap it in a CLIContext.

    Raises:
        CLIConfigError: If the configuration file cannot be parsed or holds invalid values
    """
    if config_path is not None and not config_path.exists():
        raise CLIConfigError(
            f"Configuration file not found: {config_path}",
            hint="Check the --config path"
        )
    try:
        config = load_workspace_config(workspace_root, config_path)
    except (ValueError, OSError) as exc:
        raise CLIConfigError(
            f"Invalid workspace configuration: {exc}",
            hint="Fix astra.toml (or .astrarc) and try again",
            context={"workspace": str(workspace_root)},
        ) from exc
    return CLIContext(workspace_root=workspace_root, config=config, verbose=verbose)


def get_cli_context(args: argparse.Namespace) -> CLIContext:
    """
    Retrieve CLIContext from parsed arguments.

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
