"""
Astra CLI entry point.

This module builds the argument parser and dispatches to the command
modules:

    astra transpile hello.astra   # write hello.cpp
    astra compile hello.astra     # write hello.cpp and build ./hello
    astra run hello.astra         # build, run and exit with the program's status
    astra hello.astra             # same as 'transpile'
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from astra import __version__
from astra.lang import LANGUAGE_VERSION, SOURCE_EXTENSION

from .commands import cmd_compile, cmd_run, cmd_transpile
from .context import build_cli_context
from .errors import CLIError, handle_cli_exception
from .output import print_banner


VALID_COMMANDS = {'transpile', 'compile', 'run'}

# Global options followed by a separate value argument
_OPTIONS_WITH_VALUES = {'--config', '--workspace', '--log-level'}


def _configure_logging(args) -> None:
    """Configure the 'astra' logger from --log-level or ASTRA_LOG_LEVEL."""
    log_level = (
        getattr(args, 'log_level', None) or
        os.getenv('ASTRA_LOG_LEVEL', 'warn')
    ).lower()

    level_map = {
        'debug': logging.DEBUG,
        'info': logging.INFO,
        'warn': logging.WARNING,
        'warning': logging.WARNING,
        'error': logging.ERROR,
    }

    numeric_level = level_map.get(log_level, logging.WARNING)

    astra_logger = logging.getLogger('astra')
    astra_logger.setLevel(numeric_level)

    # Add console handler if not already present
    if not astra_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        astra_logger.addHandler(handler)
        # Prevent propagation to root logger to avoid duplicate messages
        astra_logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Astra – the transpiled programming language (Astra to C++)",
        prog="astra"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__} (language {LANGUAGE_VERSION})"
    )
    parser.add_argument(
        '--config',
        default=None,
        help='Path to an astra.toml configuration file'
    )
    parser.add_argument(
        '--workspace',
        default=None,
        help='Workspace root directory (defaults to current working directory)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print full tracebacks and detailed CLI errors (or set ASTRA_VERBOSE=1)'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Do not print the banner'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default=None,
        help='Set logging level (or set ASTRA_LOG_LEVEL)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    transpile_parser = subparsers.add_parser('transpile', help='Transpile Astra code to C++')
    transpile_parser.add_argument('file', help=f'Input {SOURCE_EXTENSION} file')
    transpile_parser.set_defaults(func=cmd_transpile)

    compile_parser = subparsers.add_parser('compile', help='Transpile Astra code and compile it')
    compile_parser.add_argument('file', help=f'Input {SOURCE_EXTENSION} file')
    compile_parser.set_defaults(func=cmd_compile)

    run_parser = subparsers.add_parser('run', help='Transpile, compile, and execute the program')
    run_parser.add_argument('file', help=f'Input {SOURCE_EXTENSION} file')
    run_parser.add_argument(
        'program_args',
        nargs=argparse.REMAINDER,
        help='Arguments passed to the compiled program'
    )
    run_parser.set_defaults(func=cmd_run)

    return parser


def _normalize_argv(argv: List[str]) -> List[str]:
    """Treat a bare input file (``astra hello.astra``) as ``astra transpile hello.astra``."""
    skip_next = False
    for index, arg in enumerate(argv):
        if skip_next:
            skip_next = False
            continue
        if arg.startswith('-'):
            skip_next = arg in _OPTIONS_WITH_VALUES
            continue
        if arg not in VALID_COMMANDS:
            return argv[:index] + ['transpile'] + argv[index:]
        return argv
    return argv


def main(argv: Optional[list] = None) -> None:
    """
    Main CLI entrypoint with subcommand support.

    Args:
        argv: Command-line arguments (None uses sys.argv[1:])

    Examples:
        >>> main(['transpile', 'hello.astra'])  # doctest: +SKIP
        >>> main(['run', 'hello.astra'])  # doctest: +SKIP
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(_normalize_argv(list(argv)))

    _configure_logging(args)
    if not args.quiet:
        print_banner()

    if not hasattr(args, 'func'):
        parser.print_help()
        sys.exit(1)

    try:
        workspace_root = Path(args.workspace).resolve() if args.workspace else Path.cwd()
        config_path = Path(args.config).resolve() if args.config else None
        args.cli_context = build_cli_context(workspace_root, config_path, verbose=args.verbose)
    except CLIError as exc:
        handle_cli_exception(exc, verbose=args.verbose)
        return

    args.func(args)


__all__ = ["build_parser", "main"]
