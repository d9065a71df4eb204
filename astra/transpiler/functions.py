"""
Function declarations.

Shape of a declaration line::

    [modifier ...] fn name(param, param: type, ...) [-> return_type] [{]

Each modifier is one of ``pub``/``public``, ``priv``/``private``,
``prot``/``protected``, ``static`` or ``virtual``.  Access modifiers become
a ``public:`` style label in front of the signature; ``static`` and
``virtual`` become prefixes.  Untyped parameters get the ``any`` placeholder
type and a missing return type means ``void``.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from astra.lang import BLOCK_OPEN, FUNCTION_KEYWORD, INFERRED_TYPE, MODIFIER_SPELLINGS, VOID_TYPE

from .classify import split_top_level
from .state import FunctionSignature, TranslationState


_FUNCTION_PATTERN = re.compile(
    r"^(?P<modifiers>(?:\w+\s+)*)fn\s+(?P<name>[A-Za-z_]\w*)\s*"
    r"\((?P<params>.*?)\)\s*"
    r"(?:->\s*(?P<return_type>[^\s{][^{]*?))?\s*\{?\s*$"
)

_IDENTIFIER = re.compile(r"^[A-Za-z_]\w*$")


def is_function_line(line: str) -> bool:
    """True when ``line`` is a run of modifiers followed by the ``fn`` keyword."""
    for token in line.split():
        if token == FUNCTION_KEYWORD:
            return True
        if token not in MODIFIER_SPELLINGS:
            return False
    return False


def _parse_param(raw: str) -> Optional[Tuple[str, str]]:
    param = raw.strip()
    default = ""
    if "=" in param:
        param, _, default = param.partition("=")
        param = param.strip()
        default = default.strip()
        if not default:
            return None
    if ":" in param:
        name, _, type_ = param.partition(":")
        name = name.strip()
        type_ = type_.strip()
    else:
        name, type_ = param, INFERRED_TYPE
    if not _IDENTIFIER.match(name) or not type_:
        return None
    if default:
        name = f"{name} = {default}"
    return name, type_


def parse_signature(line: str) -> Optional[FunctionSignature]:
    """Parse a declaration line, returning ``None`` when it is malformed."""
    match = _FUNCTION_PATTERN.match(line)
    if match is None:
        return None

    modifiers: List[str] = []
    for token in match.group("modifiers").split():
        canonical = MODIFIER_SPELLINGS.get(token)
        if canonical is None:
            return None
        if canonical not in modifiers:
            modifiers.append(canonical)

    params: List[Tuple[str, str]] = []
    raw_params = match.group("params").strip()
    if raw_params:
        for raw in split_top_level(raw_params):
            parsed = _parse_param(raw)
            if parsed is None:
                return None
            params.append(parsed)

    return_type = (match.group("return_type") or VOID_TYPE).strip()
    return FunctionSignature(
        name=match.group("name"),
        return_type=return_type,
        params=tuple(params),
        modifiers=tuple(modifiers),
    )


def translate_function(state: TranslationState, line: str) -> List[str]:
    signature = parse_signature(line)
    if signature is None:
        return [state.placeholder("function", line)]

    label = f"{signature.access}: " if signature.access else ""
    output = f"{state.indent()}{label}{signature.render()} {BLOCK_OPEN}"
    state.declare_function(signature)
    state.push()
    return [output]


__all__ = ["is_function_line", "parse_signature", "translate_function"]
