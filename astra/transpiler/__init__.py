"""Astra to C++ translation engine."""

from .engine import TranslationResult, Transpiler, output_path_for, transpile_file, transpile_source
from .state import (
    Diagnostic,
    FunctionSignature,
    TranslationState,
    TranspilerOptions,
    UNDERFLOW_CLAMP,
    UNDERFLOW_ERROR,
)

__all__ = [
    "Diagnostic",
    "FunctionSignature",
    "TranslationResult",
    "TranslationState",
    "Transpiler",
    "TranspilerOptions",
    "UNDERFLOW_CLAMP",
    "UNDERFLOW_ERROR",
    "output_path_for",
    "transpile_file",
    "transpile_source",
]
