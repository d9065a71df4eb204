"""
Single pass translation of Astra source into C++.

The engine reads every line once, in order, and routes it to the first
component that claims it:

1. raw C++ capture (while inside a ``::++ {`` region)
2. blank lines, comments, the raw sentinel and bare ``}``
3. directives (``use``, ``def``, ``ifdef``, ``ifndef``, ``endif``, ``type``)
4. function declarations (``[modifiers] fn ...``)
5. control flow (``if``, ``elif``, ``else``, ``for``, ``while``)
6. ``return``
7. declarations and expression statements

Each line is translated from its own text, the current nesting depth and
the raw-capture flag only.  The symbol tables kept in
:class:`~astra.transpiler.state.TranslationState` are never read back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from astra.lang import DIRECTIVE_KEYWORDS, RETURN_KEYWORD, TARGET_EXTENSION
from astra.prelude import render_prelude

from .classify import LineKind, classify_line, first_token, leading_keyword
from .control_flow import CONTROL_TRANSLATORS, continuation_keyword, translate_close
from .directives import translate_directive
from .functions import is_function_line, translate_function
from .raw import capture, finish_capture, flush_unterminated, start_capture
from .state import Diagnostic, TranslationState, TranspilerOptions
from .statements import translate_return, translate_statement


logger = logging.getLogger(__name__)


@dataclass
class TranslationResult:
    """Output of one translation pass."""

    body: List[str]
    state: TranslationState
    output_path: Optional[Path] = None

    @property
    def code(self) -> str:
        """Complete C++ source: the constant prelude followed by the body."""
        return render_prelude() + "\n".join(self.body) + "\n"

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return self.state.diagnostics


class Transpiler:
    """Translate Astra source text into C++."""

    def __init__(self, options: Optional[TranspilerOptions] = None) -> None:
        self.options = options or TranspilerOptions()

    def transpile(self, source: str) -> TranslationResult:
        """
        Translate ``source`` with a fresh state.

        Args:
            source: Full text of an ``.astra`` file

        Returns:
            The translated body lines together with the final state

        Raises:
            AstraTranslationError: Only under the ``error`` underflow policy
        """
        state = TranslationState(options=self.options)
        body: List[str] = []
        for number, raw_line in enumerate(source.splitlines(), start=1):
            state.line_number = number
            body.extend(self.translate_line(state, raw_line))

        body.extend(flush_unterminated(state))
        if state.depth:
            logger.warning("%d block(s) still open at end of input", state.depth)
        return TranslationResult(body=body, state=state)

    def translate_line(self, state: TranslationState, raw_line: str) -> List[str]:
        kind, line = classify_line(raw_line)

        if state.in_raw:
            if kind is LineKind.CLOSE:
                return finish_capture(state)
            capture(state, line)
            return []

        if kind is LineKind.BLANK:
            return [""]
        if kind is LineKind.COMMENT:
            return []
        if kind is LineKind.RAW_START:
            start_capture(state)
            return []
        if kind is LineKind.CLOSE:
            return translate_close(state)

        return self._translate_content(state, line)

    def _translate_content(self, state: TranslationState, line: str) -> List[str]:
        if first_token(line) in DIRECTIVE_KEYWORDS:
            translated = translate_directive(state, line)
            if translated is not None:
                return translated

        if is_function_line(line):
            return translate_function(state, line)

        keyword = continuation_keyword(line) or leading_keyword(line)
        handler = CONTROL_TRANSLATORS.get(keyword)
        if handler is not None:
            return handler(state, line)
        if keyword == RETURN_KEYWORD:
            return translate_return(state, line)

        return translate_statement(state, line)


def transpile_source(source: str, options: Optional[TranspilerOptions] = None) -> TranslationResult:
    return Transpiler(options).transpile(source)


def output_path_for(source_path: Path, output_dir: Optional[Path] = None) -> Path:
    target = source_path.with_suffix(TARGET_EXTENSION)
    if output_dir is not None:
        target = output_dir / target.name
    return target


def transpile_file(
    source_path: Union[str, Path],
    options: Optional[TranspilerOptions] = None,
    *,
    output_dir: Optional[Path] = None,
) -> TranslationResult:
    """
    Read ``source_path``, translate it and write the ``.cpp`` file next to it.

    The whole input is read before translation starts and the whole output
    is written after it ends.  ``OSError`` from reading or writing is left
    to the caller.

    Returns:
        The translation result; ``result.output_path`` holds the written file
    """
    source_path = Path(source_path)
    source = source_path.read_text(encoding="utf-8")
    result = transpile_source(source, options)

    target = output_path_for(source_path, output_dir)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(result.code, encoding="utf-8")
    logger.info("Transpiled %s to %s", source_path, target)
    result.output_path = target
    return result


__all__ = [
    "TranslationResult",
    "Transpiler",
    "output_path_for",
    "transpile_file",
    "transpile_source",
]
