"""Line classification for the translation pass."""

from __future__ import annotations

import re
from enum import Enum
from typing import List, Tuple

from astra.lang import BLOCK_CLOSE, COMMENT_MARKERS, RAW_START_SENTINEL


_LEADING_IDENTIFIER = re.compile(r"[A-Za-z_]\w*")


class LineKind(Enum):
    BLANK = "blank"
    COMMENT = "comment"
    RAW_START = "raw_start"
    CLOSE = "close"
    CONTENT = "content"


def classify_line(raw_line: str) -> Tuple[LineKind, str]:
    """
    Trim ``raw_line`` and decide which component should handle it.

    Args:
        raw_line: One line of Astra source, with or without its newline

    Returns:
        The line kind and the trimmed text

    Examples:
        >>> classify_line("   ")
        (<LineKind.BLANK: 'blank'>, '')
        >>> classify_line("  // note")
        (<LineKind.COMMENT: 'comment'>, '// note')
        >>> classify_line("x = 1")
        (<LineKind.CONTENT: 'content'>, 'x = 1')
    """
    line = raw_line.strip()
    if not line:
        return LineKind.BLANK, line
    if line == RAW_START_SENTINEL:
        return LineKind.RAW_START, line
    if line == BLOCK_CLOSE:
        return LineKind.CLOSE, line
    if line.startswith(COMMENT_MARKERS):
        return LineKind.COMMENT, line
    return LineKind.CONTENT, line


def first_token(line: str) -> str:
    """Return the first whitespace-delimited token of ``line`` ('' when empty)."""
    parts = line.split(None, 1)
    return parts[0] if parts else ""


def leading_keyword(line: str) -> str:
    """Return the identifier ``line`` starts with, so ``if(x)`` yields ``if``."""
    match = _LEADING_IDENTIFIER.match(line)
    return match.group(0) if match else ""


_OPENERS = "(<[{"
_CLOSERS = ")>]}"


def split_top_level(text: str, separator: str = ",") -> List[str]:
    """
    Split ``text`` on ``separator`` outside of (), <>, [] and {} pairs.

    Examples:
        >>> split_top_level("a: map<int, int>, b")
        ['a: map<int, int>', ' b']
    """
    parts: List[str] = []
    depth = 0
    current: List[str] = []
    for char in text:
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS and depth > 0:
            depth -= 1
        if char == separator and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


__all__ = ["LineKind", "classify_line", "first_token", "leading_keyword", "split_top_level"]
