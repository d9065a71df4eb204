"""
Control-flow headers and block closing.

Every header may end with an optional ``{``; the translator drops it and
emits its own opener, wrapping the condition in parentheses when needed.
``elif`` and ``else`` come in two forms.  On their own line they follow the
``}`` that closed the previous branch and open a new block.  Written as
``} elif c {`` or ``} else {`` they close the previous branch themselves and
keep the nesting depth, so one bare ``}`` closes the whole chain.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from astra.lang import BLOCK_CLOSE, BLOCK_OPEN, INFERRED_TYPE

from .classify import leading_keyword, split_top_level
from .state import TranslationState


_RANGE_PATTERN = re.compile(r"^for\s+(?P<var>[A-Za-z_]\w*)\s+in\s+range\s*\((?P<args>.*)\)$")

_ELSE_IF_PATTERN = re.compile(r"^else\s+if\b(?P<condition>.*)$")

_FOREACH_PATTERN = re.compile(r"^for\s+(?P<var>[A-Za-z_]\w*)\s+in\s+(?P<container>\S.*)$")


def _strip_opener(header: str) -> str:
    header = header.strip()
    if header.endswith(BLOCK_OPEN):
        header = header[:-1].rstrip()
    return header


def _is_wrapped(condition: str) -> bool:
    """True when the outermost parentheses enclose the whole condition."""
    if not (condition.startswith("(") and condition.endswith(")")):
        return False
    depth = 0
    for index, char in enumerate(condition):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0 and index != len(condition) - 1:
                return False
    return depth == 0


def wrap_condition(condition: str) -> str:
    condition = condition.strip()
    return condition if _is_wrapped(condition) else f"({condition})"


def _condition_of(line: str, keyword: str) -> Optional[str]:
    header = _strip_opener(line)
    condition = header[len(keyword):].strip()
    return condition or None


def _split_continuation(line: str) -> Tuple[bool, str]:
    """Separate the leading ``}`` of a ``} elif c {`` / ``} else {`` line."""
    if line.startswith(BLOCK_CLOSE):
        return True, line[1:].strip()
    return False, line


def continuation_keyword(line: str) -> str:
    """
    Return ``elif`` or ``else`` for a same-line continuation, otherwise ''.

    Examples:
        >>> continuation_keyword("} else {")
        'else'
        >>> continuation_keyword("} catch (e) {")
        ''
    """
    continued, remainder = _split_continuation(line)
    if continued and leading_keyword(remainder) in ("elif", "else"):
        return leading_keyword(remainder)
    return ""


def _open_branch(state: TranslationState, header: str, continued: bool) -> List[str]:
    """
    Emit an ``else``/``else if`` branch.

    ``} else {`` on one line closes the previous branch itself, so it sits one
    level out and keeps the depth.  A bare ``else`` follows a ``}`` that has
    already closed the previous branch; it opens a block at the current depth.
    """
    if continued:
        return [f"{state.indent(state.depth - 1)}{BLOCK_CLOSE} {header} {BLOCK_OPEN}"]
    output = f"{state.indent()}{header} {BLOCK_OPEN}"
    state.push()
    return [output]


def translate_if(state: TranslationState, line: str) -> List[str]:
    condition = _condition_of(line, "if")
    if condition is None:
        return [state.placeholder("if statement", line)]
    output = f"{state.indent()}if {wrap_condition(condition)} {BLOCK_OPEN}"
    state.push()
    return [output]


def translate_elif(state: TranslationState, line: str) -> List[str]:
    continued, header = _split_continuation(line)
    condition = _condition_of(header, "elif")
    if condition is None:
        return [state.placeholder("elif statement", line)]
    return _open_branch(state, f"else if {wrap_condition(condition)}", continued)


def translate_else(state: TranslationState, line: str) -> List[str]:
    continued, header = _split_continuation(line)
    header = _strip_opener(header)
    match = _ELSE_IF_PATTERN.match(header)
    if match is not None:
        condition = match.group("condition").strip()
        if not condition:
            return [state.placeholder("elif statement", line)]
        return _open_branch(state, f"else if {wrap_condition(condition)}", continued)
    if header != "else":
        return [state.placeholder("else statement", line)]
    return _open_branch(state, "else", continued)


def translate_for(state: TranslationState, line: str) -> List[str]:
    header = _strip_opener(line)

    match = _RANGE_PATTERN.match(header)
    if match is not None:
        var = match.group("var")
        bounds = [part.strip() for part in split_top_level(match.group("args"))]
        if not all(bounds) or len(bounds) > 2:
            return [state.placeholder("for loop", line)]
        start, end = ("0", bounds[0]) if len(bounds) == 1 else (bounds[0], bounds[1])
        output = f"{state.indent()}for (int {var} = {start}; {var} < {end}; {var}++) {BLOCK_OPEN}"
        state.push()
        return [output]

    match = _FOREACH_PATTERN.match(header)
    if match is not None:
        var = match.group("var")
        container = match.group("container").strip()
        output = f"{state.indent()}for ({INFERRED_TYPE}& {var} : {container}) {BLOCK_OPEN}"
        state.push()
        return [output]

    return [state.placeholder("for loop", line)]


def translate_while(state: TranslationState, line: str) -> List[str]:
    condition = _condition_of(line, "while")
    if condition is None:
        return [state.placeholder("while loop", line)]
    output = f"{state.indent()}while {wrap_condition(condition)} {BLOCK_OPEN}"
    state.push()
    return [output]


def translate_close(state: TranslationState) -> List[str]:
    """Close the innermost block; the brace lines up with its opening header."""
    state.pop()
    return [f"{state.indent()}{BLOCK_CLOSE}"]


CONTROL_TRANSLATORS = {
    "if": translate_if,
    "elif": translate_elif,
    "else": translate_else,
    "for": translate_for,
    "while": translate_while,
}


__all__ = [
    "CONTROL_TRANSLATORS",
    "continuation_keyword",
    "translate_close",
    "translate_elif",
    "translate_else",
    "translate_for",
    "translate_if",
    "translate_while",
    "wrap_condition",
]
