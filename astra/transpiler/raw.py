"""
Raw C++ passthrough regions.

A line holding only ``::++ {`` switches the pass into capturing mode.  Every
following line is buffered untouched until a bare ``}`` ends the region, at
which point the buffer is replayed into the output in its original order.
Raw regions never affect the nesting depth.
"""

from __future__ import annotations

import logging
from typing import List

from .state import Diagnostic, TranslationState


logger = logging.getLogger(__name__)


def start_capture(state: TranslationState) -> None:
    state.in_raw = True
    state.raw_buffer.clear()


def capture(state: TranslationState, line: str) -> None:
    state.raw_buffer.append(line)


def finish_capture(state: TranslationState) -> List[str]:
    """Leave capturing mode and return the buffered lines."""
    flushed = list(state.raw_buffer)
    state.raw_buffer.clear()
    state.in_raw = False
    logger.debug("Flushed raw region of %d line(s)", len(flushed))
    return flushed


def flush_unterminated(state: TranslationState) -> List[str]:
    """Flush a region still open at end of input and record it as a diagnostic."""
    if not state.in_raw:
        return []
    state.diagnostics.append(
        Diagnostic(line=state.line_number, kind="raw block", source="unterminated '::++ {' region")
    )
    logger.warning("Raw region still open at end of input; flushing it verbatim")
    return finish_capture(state)


__all__ = ["capture", "finish_capture", "flush_unterminated", "start_capture"]
