"""
Astra language keywords and fixed tokens.

This module is the single source of truth for the tokens the translator
recognises at the start of a line, together with the spellings of the
function modifiers and the placeholder type used for untyped bindings.

**Usage:**
    from astra.lang import DIRECTIVE_KEYWORDS, RAW_START_SENTINEL

    if line == RAW_START_SENTINEL:
        ...
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Tuple


# ============================================================================
# Line markers
# ============================================================================

# Must appear alone on its line; the region ends at the next bare "}".
RAW_START_SENTINEL = "::++ {"

BLOCK_CLOSE = "}"

COMMENT_MARKERS: Tuple[str, ...] = ("//", "##")


# ============================================================================
# Directives (one line in, one preprocessor line out)
# ============================================================================

DIRECTIVE_KEYWORDS: Dict[str, str] = {
    "use": "#include <{rest}>",
    "def": "#define {rest}",
    "ifdef": "#ifdef {rest}",
    "ifndef": "#ifndef {rest}",
    "endif": "#endif",
    "type": "enum {rest}",
}

ENUM_KEYWORD = "type"


# ============================================================================
# Functions
# ============================================================================

FUNCTION_KEYWORD = "fn"

# Surface spelling -> canonical modifier name
MODIFIER_SPELLINGS: Dict[str, str] = {
    "pub": "public",
    "public": "public",
    "priv": "private",
    "private": "private",
    "prot": "protected",
    "protected": "protected",
    "virtual": "virtual",
    "static": "static",
}

ACCESS_MODIFIERS: FrozenSet[str] = frozenset({"public", "private", "protected"})

PREFIX_MODIFIERS: Tuple[str, ...] = ("static", "virtual")

VOID_TYPE = "void"


# ============================================================================
# Statements
# ============================================================================

RETURN_KEYWORD = "return"

# Qualifiers allowed in front of a declared name ("mut x: int = 1")
DECLARATION_QUALIFIERS: FrozenSet[str] = frozenset({"mut", "const", "static"})

# Placeholder for bindings without an annotation; the prelude maps it to auto.
INFERRED_TYPE = "any"

STATEMENT_TERMINATOR = ";"

BLOCK_OPEN = "{"

# A line ending in one of these is already structurally complete.
STRUCTURAL_ENDINGS: Tuple[str, ...] = (STATEMENT_TERMINATOR, BLOCK_OPEN, BLOCK_CLOSE)


# ============================================================================
# Files
# ============================================================================

SOURCE_EXTENSION = ".astra"
TARGET_EXTENSION = ".cpp"
