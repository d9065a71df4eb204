"""
Transpile command implementation.

This module handles the 'transpile' subcommand, which turns an ``.astra``
file into a ``.cpp`` file next to it (or in ``[compiler] output_dir``).  The
implicit default invocation ``astra file.astra`` ends up here as well.
"""

import argparse
from pathlib import Path

from astra.errors import AstraError
from astra.transpiler import TranslationResult, transpile_file

from ..context import CLIContext, get_cli_context
from ..errors import (
    CLIBuildError,
    CLIError,
    CLIFileNotFoundError,
    CLIValidationError,
    handle_cli_exception,
    wrap_exception,
)
from ..output import print_diagnostics, print_info, print_success
from ..validation import validate_source_file


def transpile_to_cpp(ctx: CLIContext, source_path: Path) -> TranslationResult:
    """
    Translate ``source_path`` and write the generated C++.

    Args:
        ctx: CLI context holding the workspace configuration
        source_path: Validated path of the ``.astra`` file

    Returns:
        Translation result with ``output_path`` set

    Raises:
        CLIFileNotFoundError: If the source file cannot be read
        CLIValidationError: If the source file is not UTF-8 text
        CLIBuildError: If the output file cannot be written
    """
    print_info(f"Processing {source_path}")
    try:
        result = transpile_file(
            source_path,
            ctx.config.transpiler.to_options(),
            output_dir=ctx.config.compiler.output_dir,
        )
    except UnicodeDecodeError as exc:
        raise wrap_exception(
            exc,
            message=f"Error reading file {source_path}: not valid UTF-8 text",
            error_class=CLIValidationError,
            hint="Save the source file with UTF-8 encoding",
        ) from exc
    except OSError as exc:
        if exc.filename is not None and Path(exc.filename) == source_path:
            raise wrap_exception(
                exc,
                message=f"Error reading file {source_path}: {exc.strerror or exc}",
                error_class=CLIFileNotFoundError,
                hint="Check the file path and try again",
            ) from exc
        raise wrap_exception(
            exc,
            message=f"Error writing output for {source_path}: {exc.strerror or exc}",
            error_class=CLIBuildError,
            hint="Check that the output directory is writable",
        ) from exc

    print_success(f"Transpiled {source_path} to {result.output_path}")
    print_diagnostics(result.diagnostics)
    return result


def cmd_transpile(args: argparse.Namespace) -> None:
    """
    Handle the 'transpile' subcommand.

    Args:
        args: Parsed command-line arguments containing:
            - file: Path to the .astra source file

    Raises:
        SystemExit: On any error during transpilation

    Examples:
        >>> args = argparse.Namespace(file='hello.astra', ...)
        >>> cmd_transpile(args)  # doctest: +SKIP
        ℹ Processing hello.astra
        ✓ Transpiled hello.astra to hello.cpp
    """
    try:
        ctx = get_cli_context(args)
        source_path = validate_source_file(args.file)
        transpile_to_cpp(ctx, source_path)
    except (CLIError, AstraError) as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
