"""Per-language naming conventions."""

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet

from .sanitizer import (
    CAMEL_CASE,
    PASCAL_CASE,
    SNAKE_CASE,
    IdentifierStyle,
    sanitize_identifier,
)

logger = logging.getLogger(__name__)

GENERIC = "generic"

LANGUAGE_ALIASES: Dict[str, str] = {
    "go": "go",
    "golang": "go",
    "rust": "rust",
    "rs": "rust",
    "typescript": "typescript",
    "ts": "typescript",
    "python": "python",
    "py": "python",
    GENERIC: GENERIC,
}

GO_KEYWORDS = frozenset([
    "break", "case", "chan", "const", "continue", "default", "defer", "else",
    "fallthrough", "for", "func", "go", "goto", "if", "import", "interface",
    "map", "package", "range", "return", "select", "struct", "switch", "type",
    "var", "bool", "byte", "complex64", "complex128", "error", "float32",
    "float64", "int", "int8", "int16", "int32", "int64", "rune", "string",
    "uint", "uint8", "uint16", "uint32", "uint64", "uintptr", "true", "false",
    "iota", "nil", "append", "cap", "close", "complex", "copy", "delete",
    "imag", "len", "make", "new", "panic", "print", "println", "real", "recover",
])

RUST_KEYWORDS = frozenset([
    "as", "break", "const", "continue", "crate", "else", "enum", "extern",
    "false", "fn", "for", "if", "impl", "in", "let", "loop", "match", "mod",
    "move", "mut", "pub", "ref", "return", "self", "static", "struct",
    "super", "trait", "true", "type", "unsafe", "use", "where", "while",
    "async", "await", "dyn", "abstract", "become", "box", "do", "final",
    "macro", "override", "priv", "typeof", "unsized", "virtual", "yield",
    "try", "union", "raw",
])

TYPESCRIPT_KEYWORDS = frozenset([
    "abstract", "any", "as", "asserts", "bigint", "boolean", "break", "case",
    "catch", "class", "const", "constructor", "continue", "debugger", "declare",
    "default", "delete", "do", "else", "enum", "export", "extends", "false",
    "finally", "for", "from", "function", "get", "if", "implements", "import",
    "in", "infer", "instanceof", "interface", "is", "keyof", "let", "module",
    "namespace", "never", "new", "null", "number", "object", "of", "package",
    "private", "protected", "public", "readonly", "require", "return", "set",
    "static", "string", "super", "switch", "symbol", "this", "throw", "true",
    "try", "type", "typeof", "undefined", "unique", "unknown", "var", "void",
    "while", "with", "yield",
])

PYTHON_KEYWORDS = frozenset([
    "false", "none", "true", "and", "as", "assert", "async", "await", "break",
    "class", "continue", "def", "del", "elif", "else", "except", "finally",
    "for", "from", "global", "if", "import", "in", "is", "lambda", "nonlocal",
    "not", "or", "pass", "raise", "return", "try", "while", "with", "yield",
    # builtins that make confusing attribute names
    "bool", "bytes", "dict", "float", "id", "int", "list", "object", "set",
    "str", "tuple", "type",
])

GENERIC_KEYWORDS = frozenset([
    "class", "default", "enum", "false", "function", "import", "interface",
    "null", "nil", "none", "return", "struct", "true", "type",
])


@dataclass(frozen=True)
class NamingConvention:
    """Casing and reserved-word rules for one target language family."""
    language: str
    field_case: str
    keywords: FrozenSet[str]
    type_case: str = PASCAL_CASE

    def type_name(self, text: str) -> str:
        """Sanitize text into a type (record) name."""
        return sanitize_identifier(
            text, IdentifierStyle.TYPE_NAME, self.type_case, self.keywords
        )

    def field_name(self, text: str) -> str:
        """Sanitize a JSON key into a field display name."""
        return sanitize_identifier(
            text, IdentifierStyle.FIELD_NAME, self.field_case, self.keywords
        )


NAMING_CONVENTIONS: Dict[str, NamingConvention] = {
    # Go fields must be exported to be visible to encoding/json
    "go": NamingConvention("go", PASCAL_CASE, GO_KEYWORDS),
    "rust": NamingConvention("rust", SNAKE_CASE, RUST_KEYWORDS),
    "typescript": NamingConvention("typescript", CAMEL_CASE, TYPESCRIPT_KEYWORDS),
    "python": NamingConvention("python", SNAKE_CASE, PYTHON_KEYWORDS),
    GENERIC: NamingConvention(GENERIC, CAMEL_CASE, GENERIC_KEYWORDS),
}


def canonical_language(language: str) -> str:
    """
    Normalize a language name or alias.

    Args:
        language: e.g. "ts", "Python", "golang"

    Returns:
        Canonical language key, or "generic" for unrecognized names
    """
    return LANGUAGE_ALIASES.get((language or "").strip().lower(), GENERIC)


def supported_languages():
    """Canonical names of the languages with dedicated conventions."""
    return [name for name in NAMING_CONVENTIONS if name != GENERIC]


def get_naming_convention(language: str) -> NamingConvention:
    """
    Look up the naming convention for a language.

    Unknown languages fall back to the generic convention.

    Args:
        language: Language name or alias

    Returns:
        NamingConvention for the language
    """
    canonical = canonical_language(language)
    if canonical == GENERIC and (language or "").strip().lower() != GENERIC:
        logger.debug(f"Unknown language '{language}', using generic naming convention")
    return NAMING_CONVENTIONS[canonical]
