"""
Error handling for the Astra CLI.

This module provides the exception hierarchy for CLI operations, with error
codes, hints and context, plus the top-level handler that formats an error
and exits.
"""

import os
import sys
import traceback
from typing import Any, Dict, Optional


# Maximum length for traceback output in CLI
_CLI_TRACE_LIMIT = 4000


class CLIError(Exception):
    """
    Base exception for all CLI operations.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code for programmatic handling
        hint: Optional suggestion for resolving the error
        context: Additional metadata about the error
    """

    def __init__(
        self,
        message: str,
        *,
        code: str,
        hint: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class CLIConfigError(CLIError):
    """
    Configuration file errors.

    Raised when:
    - astra.toml / .astrarc cannot be parsed
    - A setting has an invalid value
    """

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_CONFIG_ERROR')
        super().__init__(message, **kwargs)


class CLIValidationError(CLIError):
    """
    Invalid command arguments.

    Raised when:
    - No input file was given
    - The input file does not have the .astra extension
    """

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_VALIDATION_ERROR')
        super().__init__(message, **kwargs)


class CLIRuntimeError(CLIError):
    """Errors during command execution."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_RUNTIME_ERROR')
        super().__init__(message, **kwargs)


class CLIBuildError(CLIRuntimeError):
    """
    Transpile or compile failures.

    Raised when:
    - The generated .cpp file cannot be written
    - The C++ compiler exits with a non-zero status
    """

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_BUILD_ERROR')
        super().__init__(message, **kwargs)


class CLIFileNotFoundError(CLIError):
    """Source file missing or unreadable."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_FILE_NOT_FOUND')
        super().__init__(message, **kwargs)


class CLIDependencyError(CLIError):
    """
    Missing system dependencies.

    Raised when the C++ compiler cannot be found on PATH.
    """

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('code', 'CLI_DEPENDENCY_ERROR')
        super().__init__(message, **kwargs)


def format_cli_error(
    exc: BaseException,
    *,
    verbose: bool = False,
    include_traceback: bool = False
) -> str:
    """
    Format exception for CLI display with context and hints.

    Args:
        exc: Exception to format
        verbose: Include additional context and metadata
        include_traceback: Include full Python traceback

    Returns:
        Formatted error message suitable for CLI output

    Examples:
        >>> try:
        ...     raise CLIValidationError("Bad extension", hint="Use a .astra file")
        ... except Exception as e:
        ...     print(format_cli_error(e))
        Error [CLI_VALIDATION_ERROR]: Bad extension
        Hint: Use a .astra file
    """
    # AstraError and friends know how to describe themselves
    formatter = getattr(exc, "format", None)
    if callable(formatter):
        try:
            return formatter()
        except Exception:
            pass

    lines = []

    if isinstance(exc, CLIError):
        lines.append(f"Error [{exc.code}]: {exc.message}")

        if exc.hint:
            lines.append(f"Hint: {exc.hint}")

        if verbose and exc.context:
            lines.append("\nContext:")
            for key, value in exc.context.items():
                lines.append(f"  {key}: {value}")
    else:
        error_type = exc.__class__.__name__
        lines.append(f"Error: {error_type}: {exc}")

    if include_traceback:
        lines.append("\nTraceback:")
        lines.append(format_traceback_excerpt())

    return "\n".join(lines)


def format_traceback_excerpt() -> str:
    """
    Format current exception traceback with size limit.

    Note:
        Should only be called within an exception handler context.
    """
    trace = traceback.format_exc().strip()
    if len(trace) <= _CLI_TRACE_LIMIT:
        return trace
    return f"{trace[:_CLI_TRACE_LIMIT - 3]}..."


def wrap_exception(
    exc: BaseException,
    *,
    message: str,
    error_class: type = CLIRuntimeError,
    **kwargs
) -> CLIError:
    """
    Wrap a generic exception as a CLI-specific error.

    The original exception's type and text are kept in ``context``.

    Examples:
        >>> try:
        ...     open('/nonexistent.astra')
        ... except FileNotFoundError as e:
        ...     cli_err = wrap_exception(
        ...         e,
        ...         message="Could not read source file",
        ...         error_class=CLIFileNotFoundError,
        ...     )
        >>> cli_err.context['original_type']
        'FileNotFoundError'
    """
    context = kwargs.get('context', {})
    context['original_exception'] = str(exc)
    context['original_type'] = exc.__class__.__name__
    kwargs['context'] = context

    return error_class(message, **kwargs)


def _env_flag(name: str) -> bool:
    val = os.getenv(name)
    if val is None:
        return False
    return val.strip().lower() in {"1", "true", "yes", "on"}


def cli_verbose_enabled(verbose_flag: bool = False) -> bool:
    """Respects an explicit flag and the ASTRA_VERBOSE/ASTRA_DEBUG environment variables."""
    return verbose_flag or _env_flag("ASTRA_VERBOSE") or _env_flag("ASTRA_DEBUG")


def cli_reraise_enabled() -> bool:
    """Controlled by ASTRA_RERAISE or ASTRA_DEBUG environment variables."""
    return _env_flag("ASTRA_RERAISE") or _env_flag("ASTRA_DEBUG")


def handle_cli_exception(
    exc: BaseException,
    *,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """
    Handle exception at CLI top-level with proper formatting and exit.

    Note:
        This function calls sys.exit() and does not return.
    """
    verbose_effective = cli_verbose_enabled(verbose)
    if cli_reraise_enabled():
        raise exc

    error_message = format_cli_error(
        exc,
        verbose=verbose_effective,
        include_traceback=verbose_effective
    )
    print(error_message, file=sys.stderr)

    sys.exit(exit_code)
