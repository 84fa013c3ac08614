"""Inferred type model and primitive type lookup tables."""

from .types import (
    CustomType,
    FieldSlot,
    FieldType,
    NameRegistry,
    PrimitiveKind,
    RecordType,
    custom_type_name,
    is_custom,
    is_primitive,
)
from .type_table import (
    array_wrapper,
    map_primitive,
    optional_wrapper,
    render_field_type,
)

__all__ = [
    "CustomType",
    "FieldSlot",
    "FieldType",
    "NameRegistry",
    "PrimitiveKind",
    "RecordType",
    "custom_type_name",
    "is_custom",
    "is_primitive",
    "array_wrapper",
    "map_primitive",
    "optional_wrapper",
    "render_field_type",
]
