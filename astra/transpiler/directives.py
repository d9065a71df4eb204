"""One-line directives: ``use``, ``def``, ``ifdef``/``ifndef``/``endif`` and ``type``."""

from __future__ import annotations

from typing import List, Optional

from astra.lang import BLOCK_OPEN, DIRECTIVE_KEYWORDS, ENUM_KEYWORD, STATEMENT_TERMINATOR

from .state import TranslationState


def translate_directive(state: TranslationState, line: str) -> Optional[List[str]]:
    """
    Translate ``line`` when its first token is a directive keyword.

    Returns ``None`` for any other line so the caller can try the next
    component.  The nesting depth is never changed here.

    Examples:
        use vector            ->  #include <vector>
        def PI 3.14           ->  #define PI 3.14
        type Color {RED, BLUE} ->  enum Color {RED, BLUE};
    """
    parts = line.split(None, 1)
    keyword = parts[0]
    template = DIRECTIVE_KEYWORDS.get(keyword)
    if template is None:
        return None
    rest = parts[1].strip() if len(parts) > 1 else ""

    if "{rest}" in template and not rest:
        return [state.placeholder("directive", line)]

    if keyword == ENUM_KEYWORD:
        declaration = template.format(rest=rest)
        if not declaration.endswith((STATEMENT_TERMINATOR, BLOCK_OPEN)):
            declaration += STATEMENT_TERMINATOR
        return [state.indent() + declaration]

    return [template.format(rest=rest)]


__all__ = ["translate_directive"]
