"""
C++ toolchain invocation.

Locates the platform compiler, builds a generated ``.cpp`` file into a native
executable and runs it.  Every call blocks until the child process exits;
there is no timeout and no retry.
"""

import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from astra.config import CompilerConfig

from .errors import CLIBuildError, CLIDependencyError, CLIRuntimeError
from .output import print_detail, print_error, print_progress, print_success


logger = logging.getLogger(__name__)

COMPILER_ENV_VAR = "ASTRA_CXX"


def get_compiler_command(
    platform: Optional[str] = None,
    config: Optional[CompilerConfig] = None,
) -> List[str]:
    """
    Return the compiler executable and language-standard flag.

    ``clang++`` is used on macOS and ``g++`` everywhere else.  The
    ``ASTRA_CXX`` environment variable and ``[compiler] command`` setting
    override the executable, in that order.

    Examples:
        >>> get_compiler_command("darwin")
        ['clang++', '-std=c++20']
        >>> get_compiler_command("linux")
        ['g++', '-std=c++20']
    """
    config = config or CompilerConfig()
    platform = platform or sys.platform
    default = "clang++" if platform == "darwin" else "g++"
    command = os.getenv(COMPILER_ENV_VAR) or config.command or default
    return [command, f"-std={config.std}"]


def executable_path_for(cpp_path: Path, platform: Optional[str] = None) -> Path:
    platform = platform or sys.platform
    suffix = ".exe" if platform.startswith("win") else ""
    return cpp_path.with_name(cpp_path.stem + suffix)


def compile_cpp(cpp_path: Path, config: Optional[CompilerConfig] = None) -> Path:
    """
    Compile ``cpp_path`` into a native executable.

    Returns:
        Path of the produced executable

    Raises:
        CLIDependencyError: If the compiler is not installed
        CLIBuildError: If the compiler exits with a non-zero status
    """
    config = config or CompilerConfig()
    executable = executable_path_for(cpp_path)
    compiler = get_compiler_command(config=config)
    command = [*compiler, *config.extra_flags, str(cpp_path), "-o", str(executable)]

    print_progress(f"Compiling with {' '.join(compiler)}...")
    logger.info("Running %s", " ".join(command))
    try:
        completed = subprocess.run(command, capture_output=True, text=True)
    except FileNotFoundError as exc:
        raise CLIDependencyError(
            f"Compiler not found: {compiler[0]}",
            hint="Install g++ or clang++, or point ASTRA_CXX at a C++ compiler",
            context={"original_exception": str(exc)},
        ) from exc

    if completed.returncode != 0:
        stderr_lines = _non_empty_lines(completed.stderr)
        print_error("Compilation error:")
        for line in stderr_lines:
            print_detail(line)
        raise CLIBuildError(
            f"Failed to compile {cpp_path}",
            hint="The generated C++ was rejected by the compiler; see the messages above",
            context={"returncode": completed.returncode, "stderr": stderr_lines},
        )

    print_success(f"Successfully compiled {cpp_path}")
    return executable


def run_executable(executable: Path, args: Sequence[str] = ()) -> int:
    """
    Run a compiled program and return its exit status.

    Raises:
        CLIRuntimeError: If the program cannot be started
    """
    print_progress(f"Running {executable}...")
    try:
        completed = subprocess.run([str(executable.resolve()), *args])
    except OSError as exc:
        raise CLIRuntimeError(
            f"Failed to execute program {executable}",
            context={"original_exception": str(exc)},
        ) from exc
    print_success(f"Program exited with code {completed.returncode}")
    return completed.returncode


def _non_empty_lines(text: Optional[str]) -> List[str]:
    if not text:
        return []
    return [line for line in text.splitlines() if line.strip()]


__all__ = [
    "COMPILER_ENV_VAR",
    "compile_cpp",
    "executable_path_for",
    "get_compiler_command",
    "run_executable",
]
