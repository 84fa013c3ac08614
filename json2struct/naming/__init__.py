"""Identifier sanitization and per-language naming conventions."""

from .conventions import (
    NamingConvention,
    canonical_language,
    get_naming_convention,
    supported_languages,
)
from .sanitizer import (
    IdentifierStyle,
    sanitize_identifier,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)

__all__ = [
    "NamingConvention",
    "canonical_language",
    "get_naming_convention",
    "supported_languages",
    "IdentifierStyle",
    "sanitize_identifier",
    "to_camel_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_snake_case",
]
