"""
Command modules for the Astra CLI.

Each module implements one group of subcommands; this package re-exports
the handlers wired into the argument parser.
"""

from .build import build_executable, cmd_compile, cmd_run
from .transpile import cmd_transpile, transpile_to_cpp

__all__ = [
    "build_executable",
    "cmd_compile",
    "cmd_run",
    "cmd_transpile",
    "transpile_to_cpp",
]
