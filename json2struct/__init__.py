"""Infer language-agnostic record types from JSON samples."""

from .__version__ import __version__
from .model.types import CustomType, FieldSlot, PrimitiveKind, RecordType
from .schema_inference import StructureInferrer, StructureStats, estimate_complexity, infer
from .utils.exceptions import (
    Json2StructError,
    LikelyCircularError,
    RootNotObjectError,
    StructureError,
    TooDeepError,
)

__all__ = [
    "__version__",
    "CustomType",
    "FieldSlot",
    "PrimitiveKind",
    "RecordType",
    "StructureInferrer",
    "StructureStats",
    "estimate_complexity",
    "infer",
    "Json2StructError",
    "LikelyCircularError",
    "RootNotObjectError",
    "StructureError",
    "TooDeepError",
]
