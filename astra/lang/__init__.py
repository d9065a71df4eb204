"""Fixed tokens of the Astra surface language."""

from .keywords import (
    ACCESS_MODIFIERS,
    BLOCK_CLOSE,
    BLOCK_OPEN,
    COMMENT_MARKERS,
    DECLARATION_QUALIFIERS,
    DIRECTIVE_KEYWORDS,
    ENUM_KEYWORD,
    FUNCTION_KEYWORD,
    INFERRED_TYPE,
    MODIFIER_SPELLINGS,
    PREFIX_MODIFIERS,
    RAW_START_SENTINEL,
    RETURN_KEYWORD,
    SOURCE_EXTENSION,
    STATEMENT_TERMINATOR,
    STRUCTURAL_ENDINGS,
    TARGET_EXTENSION,
    VOID_TYPE,
)

LANGUAGE_VERSION = "1.0"

__all__ = [
    "LANGUAGE_VERSION",
    "ACCESS_MODIFIERS",
    "BLOCK_CLOSE",
    "BLOCK_OPEN",
    "COMMENT_MARKERS",
    "DECLARATION_QUALIFIERS",
    "DIRECTIVE_KEYWORDS",
    "ENUM_KEYWORD",
    "FUNCTION_KEYWORD",
    "INFERRED_TYPE",
    "MODIFIER_SPELLINGS",
    "PREFIX_MODIFIERS",
    "RAW_START_SENTINEL",
    "RETURN_KEYWORD",
    "SOURCE_EXTENSION",
    "STATEMENT_TERMINATOR",
    "STRUCTURAL_ENDINGS",
    "TARGET_EXTENSION",
    "VOID_TYPE",
]
