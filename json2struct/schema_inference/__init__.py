"""Structural inference engine and structure pre-scan."""

from .inferrer import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_MERGE_THRESHOLD,
    StructureInferrer,
    infer,
)
from .structure import (
    CIRCULAR_DEPTH_LIMIT,
    StructureStats,
    estimate_complexity,
    validate_nesting_depth,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_MERGE_THRESHOLD",
    "StructureInferrer",
    "infer",
    "CIRCULAR_DEPTH_LIMIT",
    "StructureStats",
    "estimate_complexity",
    "validate_nesting_depth",
]
