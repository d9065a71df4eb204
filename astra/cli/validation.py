"""
Centralized validation for CLI arguments.

This module provides the validation functions shared by the CLI commands so
that every command rejects bad input the same way.
"""

import os
from pathlib import Path
from typing import Any, Optional

from astra.lang import SOURCE_EXTENSION

from .errors import CLIValidationError


def validate_path(value: Any, *, allow_none: bool = False, must_exist: bool = False) -> Optional[Path]:
    """
    Validate and convert value to Path.

    Args:
        value: Value to validate (string, PathLike, or None)
        allow_none: Whether None is acceptable
        must_exist: Whether the path must exist on the filesystem

    Returns:
        Path object or None if allow_none=True and value is None

    Raises:
        CLIValidationError: If value is not a valid path type or doesn't exist when must_exist=True

    Examples:
        >>> validate_path("/tmp/file.astra")
        PosixPath('/tmp/file.astra')
        >>> validate_path(None, allow_none=True) is None
        True
    """
    if value is None:
        if allow_none:
            return None
        raise CLIValidationError(
            "Path value cannot be None",
            hint="Provide a valid file or directory path"
        )

    if isinstance(value, (str, os.PathLike)):
        path = Path(value)

        if must_exist and not path.exists():
            raise CLIValidationError(
                f"Path does not exist: {path}",
                hint="Ensure the file or directory exists before running this command"
            )

        return path

    raise CLIValidationError(
        f"Expected path-like value, got {type(value).__name__}",
        hint="Provide a string or Path object"
    )


def validate_source_file(value: Any) -> Path:
    """
    Validate the input file of a transpile/compile/run command.

    Only the extension is checked here; a missing file is reported when it
    is read.

    Raises:
        CLIValidationError: If no file was given or it is not an ``.astra`` file

    Examples:
        >>> validate_source_file("hello.astra")
        PosixPath('hello.astra')
        >>> validate_source_file("hello.cpp")
        Traceback (most recent call last):
        ...
        astra.cli.errors.CLIValidationError: File must have .astra extension: hello.cpp
    """
    if value is None:
        raise CLIValidationError(
            "No input file given",
            hint=f"Usage: astra [transpile|compile|run] filename{SOURCE_EXTENSION}"
        )
    path = validate_path(value)
    if path.suffix != SOURCE_EXTENSION:
        raise CLIValidationError(
            f"File must have {SOURCE_EXTENSION} extension: {path}",
            hint=f"Rename the file to end in {SOURCE_EXTENSION}"
        )
    return path


__all__ = ["validate_path", "validate_source_file"]
