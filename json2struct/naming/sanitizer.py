"""Identifier sanitization and case conversion.

Every name the inference engine produces (record type names and field
display names) passes through :func:`sanitize_identifier`. The functions in
this module are pure: their output depends only on their arguments.
"""

import re
from enum import Enum
from functools import lru_cache
from typing import FrozenSet, Iterable, List, Optional

PASCAL_CASE = "pascal"
CAMEL_CASE = "camel"
SNAKE_CASE = "snake"

SUPPORTED_CASES = (PASCAL_CASE, CAMEL_CASE, SNAKE_CASE)

DEFAULT_FIELD_NAME = "field"
DEFAULT_TYPE_NAME = "Data"

# Anything outside [A-Za-z0-9] is a word boundary, underscores included
_BOUNDARY = re.compile(r'[^A-Za-z0-9]+')


class IdentifierStyle(Enum):
    """Which kind of identifier is being produced."""
    TYPE_NAME = "type"
    FIELD_NAME = "field"


def _split_case_transitions(chunk: str) -> List[str]:
    """Split "userName" style chunks; acronym runs such as "userID" stay whole."""
    words = []
    start = 0
    for i in range(1, len(chunk)):
        if chunk[i - 1].islower() and chunk[i].isupper():
            following = chunk[i + 1] if i + 1 < len(chunk) else ""
            if not following.isupper():
                words.append(chunk[start:i])
                start = i
    words.append(chunk[start:])
    return words


def split_words(text: str) -> List[str]:
    """
    Break raw text into word tokens.

    Args:
        text: Arbitrary key text, e.g. "user-name", "firstName", "créé le"

    Returns:
        Non-empty ASCII word tokens in order
    """
    words: List[str] = []
    for chunk in _BOUNDARY.split(text or ""):
        if chunk:
            words.extend(w for w in _split_case_transitions(chunk) if w)
    return words


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def join_words(words: List[str], case: str) -> str:
    """Join word tokens using the given case ("pascal", "camel" or "snake")."""
    if case == PASCAL_CASE:
        return "".join(_capitalize(w) for w in words)
    if case == CAMEL_CASE:
        if not words:
            return ""
        return words[0].lower() + "".join(_capitalize(w) for w in words[1:])
    if case == SNAKE_CASE:
        return "_".join(w.lower() for w in words)
    raise ValueError(f"Unsupported identifier case: {case}")


def to_pascal_case(text: str) -> str:
    return join_words(split_words(text), PASCAL_CASE)


def to_camel_case(text: str) -> str:
    return join_words(split_words(text), CAMEL_CASE)


def to_snake_case(text: str) -> str:
    return join_words(split_words(text), SNAKE_CASE)


def to_kebab_case(text: str) -> str:
    return to_snake_case(text).replace("_", "-")


@lru_cache(maxsize=32)
def _lowered(keywords: FrozenSet[str]) -> FrozenSet[str]:
    return frozenset(k.lower() for k in keywords)


def sanitize_identifier(
    text: str,
    style: IdentifierStyle,
    case: Optional[str] = None,
    keywords: Iterable[str] = (),
    digit_prefix: str = "_",
    keyword_suffix: str = "_",
) -> str:
    """
    Convert arbitrary text into a valid, keyword-safe identifier.

    Args:
        text: Raw text (usually a JSON key or a joined key path)
        style: Type-name or field-name style
        case: Word casing; defaults to "pascal" for type names and
            "camel" for field names
        keywords: Reserved words, compared case-insensitively
        digit_prefix: Prepended when the identifier would start with a digit
        keyword_suffix: Appended when the identifier is a reserved word

    Returns:
        A non-empty identifier matching [A-Za-z_][A-Za-z0-9_]*
    """
    if case is None:
        case = PASCAL_CASE if style is IdentifierStyle.TYPE_NAME else CAMEL_CASE

    words = split_words(text)
    if not words:
        fallback = DEFAULT_TYPE_NAME if style is IdentifierStyle.TYPE_NAME else DEFAULT_FIELD_NAME
        words = split_words(fallback)

    identifier = join_words(words, case)

    if identifier[0].isdigit():
        identifier = digit_prefix + identifier

    if identifier.lower() in _lowered(frozenset(keywords)):
        identifier += keyword_suffix

    return identifier
