"""
Output formatting for CLI operations.

Status lines are printed through a shared rich ``Console`` so they are
coloured on a terminal and plain text everywhere else.
"""

from typing import Iterable

from rich.console import Console
from rich.text import Text

from astra.transpiler import Diagnostic


console = Console(highlight=False, soft_wrap=True)

BANNER_ART = (
    " █████  ███████ ████████ ██████   █████ ",
    "██   ██ ██         ██    ██   ██ ██   ██",
    "███████ ███████    ██    ██████  ███████",
    "██   ██      ██    ██    ██   ██ ██   ██",
    "██   ██ ███████    ██    ██   ██ ██   ██",
)

_RULE = "─" * 44


def _status(symbol: str, style: str, message: str) -> None:
    console.print(Text.assemble((symbol, style), " ", message))


def print_banner() -> None:
    """Print the Astra banner."""
    console.print(Text(_RULE, style="magenta"))
    for row in BANNER_ART:
        console.print(Text.assemble(("│", "magenta"), " ", (row, "cyan"), " ", ("│", "magenta")))
    console.print(Text(_RULE, style="magenta"))


def print_success(message: str) -> None:
    """
    Print success message with checkmark prefix.

    Examples:
        >>> print_success("Transpiled hello.astra to hello.cpp")
        ✓ Transpiled hello.astra to hello.cpp
    """
    _status("✓", "green", message)


def print_error(message: str) -> None:
    """
    Print error message with cross prefix.

    Examples:
        >>> print_error("Compilation failed")
        ✗ Compilation failed
    """
    _status("✗", "red", message)


def print_warning(message: str) -> None:
    """
    Print warning message with warning prefix.

    Examples:
        >>> print_warning("1 line could not be translated")
        ⚠ 1 line could not be translated
    """
    _status("⚠", "yellow", message)


def print_info(message: str) -> None:
    """
    Print informational message with info prefix.

    Examples:
        >>> print_info("Processing hello.astra")
        ℹ Processing hello.astra
    """
    _status("ℹ", "blue", message)


def print_progress(message: str) -> None:
    _status("⟳", "yellow", message)


def print_detail(message: str) -> None:
    """Print an indented continuation line, e.g. one line of compiler output."""
    console.print(Text.assemble("  ", ("→", "red"), " ", message))


def print_diagnostics(diagnostics: Iterable[Diagnostic]) -> None:
    """List lines that were replaced by diagnostic placeholders."""
    diagnostics = list(diagnostics)
    if not diagnostics:
        return
    noun = "line" if len(diagnostics) == 1 else "lines"
    print_warning(f"{len(diagnostics)} {noun} could not be translated:")
    for diagnostic in diagnostics:
        print_detail(diagnostic.describe())
