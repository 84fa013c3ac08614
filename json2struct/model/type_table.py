"""Mapping of primitive kinds to each target language's scalar types."""

from typing import Dict

from .types import FieldSlot, PrimitiveKind, custom_type_name
from ..naming.conventions import GENERIC, canonical_language

PRIMITIVE_TYPES: Dict[str, Dict[PrimitiveKind, str]] = {
    "go": {
        PrimitiveKind.STRING: "string",
        PrimitiveKind.INTEGER: "int64",
        PrimitiveKind.NUMBER: "float64",
        PrimitiveKind.BOOLEAN: "bool",
        PrimitiveKind.ANY: "interface{}",
    },
    "rust": {
        PrimitiveKind.STRING: "String",
        PrimitiveKind.INTEGER: "i64",
        PrimitiveKind.NUMBER: "f64",
        PrimitiveKind.BOOLEAN: "bool",
        PrimitiveKind.ANY: "serde_json::Value",
    },
    "typescript": {
        PrimitiveKind.STRING: "string",
        PrimitiveKind.INTEGER: "number",
        PrimitiveKind.NUMBER: "number",
        PrimitiveKind.BOOLEAN: "boolean",
        PrimitiveKind.ANY: "any",
    },
    "python": {
        PrimitiveKind.STRING: "str",
        PrimitiveKind.INTEGER: "int",
        PrimitiveKind.NUMBER: "float",
        PrimitiveKind.BOOLEAN: "bool",
        PrimitiveKind.ANY: "Any",
    },
    GENERIC: {
        PrimitiveKind.STRING: "string",
        PrimitiveKind.INTEGER: "integer",
        PrimitiveKind.NUMBER: "number",
        PrimitiveKind.BOOLEAN: "boolean",
        PrimitiveKind.ANY: "any",
    },
}

OPTIONAL_WRAPPERS: Dict[str, str] = {
    "go": "*{}",
    "rust": "Option<{}>",
    "typescript": "{} | null",
    "python": "Optional[{}]",
    GENERIC: "{}?",
}

ARRAY_WRAPPERS: Dict[str, str] = {
    "go": "[]{}",
    "rust": "Vec<{}>",
    "typescript": "{}[]",
    "python": "List[{}]",
    GENERIC: "{}[]",
}


def map_primitive(kind: PrimitiveKind, language: str) -> str:
    """Scalar type name for kind in language (generic row for unknown languages)."""
    return PRIMITIVE_TYPES[canonical_language(language)][kind]


def optional_wrapper(base: str, language: str) -> str:
    return OPTIONAL_WRAPPERS[canonical_language(language)].format(base)


def array_wrapper(base: str, language: str) -> str:
    return ARRAY_WRAPPERS[canonical_language(language)].format(base)


def render_field_type(slot: FieldSlot, language: str) -> str:
    """
    Render a field's full type in a language's notation.

    The array wrapper is applied first and the optional wrapper outside it,
    so an optional array of strings in Python is "Optional[List[str]]".

    Args:
        slot: Field to render
        language: Target language or alias

    Returns:
        Type expression string
    """
    name = custom_type_name(slot.type)
    base = name if name is not None else map_primitive(slot.type, language)
    if slot.is_array:
        base = array_wrapper(base, language)
    if slot.is_optional:
        base = optional_wrapper(base, language)
    return base
