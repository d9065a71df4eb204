"""
Compile and run command implementations.

'compile' transpiles an ``.astra`` file and builds the generated C++ into a
native executable.  'run' additionally executes the program and exits with
its exit status.
"""

import argparse
import sys
from pathlib import Path

from astra.errors import AstraError

from ..context import CLIContext, get_cli_context
from ..errors import CLIError, handle_cli_exception
from ..output import print_success
from ..toolchain import compile_cpp, run_executable
from ..validation import validate_source_file
from .transpile import transpile_to_cpp


def build_executable(ctx: CLIContext, source_path: Path) -> Path:
    """Transpile ``source_path`` and compile the result; return the executable path."""
    result = transpile_to_cpp(ctx, source_path)
    executable = compile_cpp(result.output_path, ctx.config.compiler)
    print_success(f"Ready to run: {executable}")
    return executable


def cmd_compile(args: argparse.Namespace) -> None:
    """
    Handle the 'compile' subcommand.

    Raises:
        SystemExit: With status 1 if transpiling or compiling fails
    """
    try:
        ctx = get_cli_context(args)
        source_path = validate_source_file(args.file)
        build_executable(ctx, source_path)
    except (CLIError, AstraError) as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))


def cmd_run(args: argparse.Namespace) -> None:
    """
    Handle the 'run' subcommand.

    Raises:
        SystemExit: With the program's exit status, or 1 if building fails
    """
    try:
        ctx = get_cli_context(args)
        source_path = validate_source_file(args.file)
        executable = build_executable(ctx, source_path)
        exit_code = run_executable(executable, getattr(args, "program_args", None) or ())
    except (CLIError, AstraError) as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
        return
    sys.exit(exit_code)
