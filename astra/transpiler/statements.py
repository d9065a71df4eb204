"""
Statements: ``return``, declarations and everything else.

Declarations look like ``name = value`` or ``name: type = value`` and may be
preceded by one of ``mut``, ``const`` or ``static``.  Without an annotation
the binding gets the ``any`` placeholder type.  Any other line is an
expression statement and only needs a terminator.
"""

from __future__ import annotations

import re
from typing import List, Optional

from astra.lang import (
    BLOCK_CLOSE,
    BLOCK_OPEN,
    DECLARATION_QUALIFIERS,
    INFERRED_TYPE,
    RETURN_KEYWORD,
    STATEMENT_TERMINATOR,
    STRUCTURAL_ENDINGS,
)

from .state import TranslationState


_DECLARATION_TARGET = re.compile(
    r"^(?:(?P<qualifier>" + "|".join(sorted(DECLARATION_QUALIFIERS)) + r")\s+)?"
    r"(?P<name>[A-Za-z_]\w*)\s*(?::\s*(?P<type>\S.*?))?\s*$"
)

# Characters that turn a following "=" into part of another operator.
_OPERATOR_PREFIXES = "=!<>+-*/%&|^~"

_NESTING_OPEN = "([{"
_NESTING_CLOSE = ")]}"


def terminate(text: str) -> str:
    return text if text.endswith(STATEMENT_TERMINATOR) else text + STATEMENT_TERMINATOR


def find_assignment(line: str) -> Optional[int]:
    """
    Return the index of the first top-level plain ``=`` in ``line``.

    Equals signs inside string or character literals, inside brackets, or
    belonging to ``==``, ``!=``, ``<=``, ``>=`` and compound assignments are
    skipped.

    Examples:
        >>> find_assignment("x = 5")
        2
        >>> find_assignment("x == 5") is None
        True
        >>> find_assignment('print("a=b")') is None
        True
    """
    depth = 0
    quote: Optional[str] = None
    index = 0
    while index < len(line):
        char = line[index]
        if quote is not None:
            if char == "\\":
                index += 2
                continue
            if char == quote:
                quote = None
        elif char in "\"'":
            quote = char
        elif char in _NESTING_OPEN:
            depth += 1
        elif char in _NESTING_CLOSE:
            depth = max(depth - 1, 0)
        elif char == "=" and depth == 0:
            following = line[index + 1] if index + 1 < len(line) else ""
            preceding = line[index - 1] if index > 0 else ""
            if following == "=":
                index += 2
                continue
            if preceding not in _OPERATOR_PREFIXES:
                return index
        index += 1
    return None


def translate_return(state: TranslationState, line: str) -> List[str]:
    value = line[len(RETURN_KEYWORD):].strip()
    if value.endswith(STATEMENT_TERMINATOR):
        value = value[:-1].rstrip()
    statement = f"{RETURN_KEYWORD} {value}" if value else RETURN_KEYWORD
    return [state.indent() + terminate(statement)]


def translate_declaration(state: TranslationState, line: str, position: int) -> Optional[List[str]]:
    """
    Translate a ``target = value`` line split at ``position``.

    Returns ``None`` when the left side is not a plain (optionally typed)
    name, e.g. ``items[0] = 1``; such lines are expression statements.
    """
    target = _DECLARATION_TARGET.match(line[:position].strip())
    if target is None:
        return None
    value = line[position + 1:].strip()
    if not value or value == STATEMENT_TERMINATOR:
        return [state.placeholder("variable declaration", line)]

    name = target.group("name")
    type_ = target.group("type") or INFERRED_TYPE
    qualifier = f"{target.group('qualifier')} " if target.group("qualifier") else ""
    state.declare_variable(name, type_)
    return [f"{state.indent()}{qualifier}{type_} {name} = {terminate(value)}"]


def translate_expression(state: TranslationState, line: str) -> List[str]:
    """
    Pass a line through as an expression statement.

    Lines already ending in ``;``, ``{`` or ``}`` keep their text.  A line
    such as ``match(x) {`` opens a block and pushes one level so that its
    bare ``}`` balances; ``} catch (...) {`` continues the current block.
    """
    if line.endswith(BLOCK_OPEN):
        if line.startswith(BLOCK_CLOSE):
            return [state.indent(state.depth - 1) + line]
        output = state.indent() + line
        state.push()
        return [output]
    if line.endswith(STRUCTURAL_ENDINGS):
        return [state.indent() + line]
    return [state.indent() + terminate(line)]


def translate_statement(state: TranslationState, line: str) -> List[str]:
    position = find_assignment(line)
    if position is not None:
        translated = translate_declaration(state, line, position)
        if translated is not None:
            return translated
    return translate_expression(state, line)


__all__ = [
    "find_assignment",
    "terminate",
    "translate_declaration",
    "translate_expression",
    "translate_return",
    "translate_statement",
]
