"""
Translation state shared by every line translator.

One :class:`TranslationState` is created per input file and threaded
explicitly through each component call.  It records the symbols seen so far,
the nesting depth and the raw C++ capture buffer.

The symbol tables are bookkeeping only: no translator reads them back, so the
output for a line depends solely on its own text, the current depth and the
raw-capture flag.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from astra.errors import AstraTranslationError
from astra.lang import ACCESS_MODIFIERS, PREFIX_MODIFIERS, VOID_TYPE


logger = logging.getLogger(__name__)

UNDERFLOW_CLAMP = "clamp"
UNDERFLOW_ERROR = "error"
UNDERFLOW_POLICIES = (UNDERFLOW_CLAMP, UNDERFLOW_ERROR)


@dataclass(frozen=True)
class TranspilerOptions:
    """Knobs that change how a translation pass behaves."""

    underflow: str = UNDERFLOW_CLAMP
    indent: int = 4

    def __post_init__(self) -> None:
        if self.underflow not in UNDERFLOW_POLICIES:
            raise ValueError(
                f"Unknown underflow policy '{self.underflow}'. "
                f"Expected one of: {', '.join(UNDERFLOW_POLICIES)}"
            )
        if self.indent < 0:
            raise ValueError("Indent width cannot be negative")


@dataclass(frozen=True)
class FunctionSignature:
    """A parsed ``fn`` declaration."""

    name: str
    return_type: str = VOID_TYPE
    params: Tuple[Tuple[str, str], ...] = ()
    modifiers: Tuple[str, ...] = ()

    @property
    def access(self) -> Optional[str]:
        for modifier in self.modifiers:
            if modifier in ACCESS_MODIFIERS:
                return modifier
        return None

    def render(self) -> str:
        """Render the C++ signature without access label or block opener."""
        params = ", ".join(f"{type_} {name}" for name, type_ in self.params)
        prefix = "".join(
            f"{modifier} " for modifier in self.modifiers if modifier in PREFIX_MODIFIERS
        )
        return f"{prefix}{self.return_type} {self.name}({params})"


@dataclass(frozen=True)
class Diagnostic:
    """A source line that was replaced by a diagnostic placeholder."""

    line: int
    kind: str
    source: str

    def describe(self) -> str:
        return f"line {self.line}: could not parse {self.kind}: {self.source}"


@dataclass
class TranslationState:
    options: TranspilerOptions = field(default_factory=TranspilerOptions)
    variables: Dict[str, str] = field(default_factory=dict)
    functions: Dict[str, FunctionSignature] = field(default_factory=dict)
    depth: int = 0
    in_raw: bool = False
    raw_buffer: List[str] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)
    line_number: int = 0

    # ------------------------------------------------------------------
    # Nesting
    # ------------------------------------------------------------------

    def indent(self, depth: Optional[int] = None) -> str:
        level = self.depth if depth is None else max(depth, 0)
        return " " * (self.options.indent * level)

    def push(self) -> None:
        self.depth += 1

    def pop(self) -> None:
        """Close one block, applying the underflow policy at depth zero."""
        if self.depth > 0:
            self.depth -= 1
            return
        if self.options.underflow == UNDERFLOW_ERROR:
            raise AstraTranslationError(
                "Closing brace without a matching block opener",
                line=self.line_number,
                hint="Remove the extra '}' or add the missing block header",
            )
        logger.warning("Line %d: unmatched '}' ignored at depth 0", self.line_number)

    # ------------------------------------------------------------------
    # Symbols
    # ------------------------------------------------------------------

    def declare_variable(self, name: str, type_: str) -> None:
        previous = self.variables.get(name)
        if previous is not None:
            logger.debug("Variable '%s' redeclared (%s -> %s)", name, previous, type_)
        self.variables[name] = type_

    def declare_function(self, signature: FunctionSignature) -> None:
        if signature.name in self.functions:
            logger.debug("Function '%s' redeclared; keeping the latest signature", signature.name)
        self.functions[signature.name] = signature

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def placeholder(self, kind: str, line: str) -> str:
        """Record a diagnostic and return the placeholder line replacing ``line``."""
        diagnostic = Diagnostic(line=self.line_number, kind=kind, source=line)
        self.diagnostics.append(diagnostic)
        logger.warning("Line %d: could not parse %s: %s", self.line_number, kind, line)
        return f"// Error parsing {kind}: {line}"


__all__ = [
    "Diagnostic",
    "FunctionSignature",
    "TranslationState",
    "TranspilerOptions",
    "UNDERFLOW_CLAMP",
    "UNDERFLOW_ERROR",
    "UNDERFLOW_POLICIES",
]
