"""Structure statistics and depth pre-scan for sample documents.

Nesting levels are counted the same way the inference engine counts them:
every object is one level, an array is transparent (its elements sit one
level below the object holding it) unless it appears directly inside another
array, in which case it occupies a level of its own.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict

from ..utils.exceptions import LikelyCircularError

logger = logging.getLogger(__name__)

CIRCULAR_DEPTH_LIMIT = 100


@dataclass
class StructureStats:
    """Complexity summary of a sample document."""
    max_depth: int = 0
    object_count: int = 0
    array_count: int = 0
    field_count: int = 0
    max_array_length: int = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


def estimate_complexity(value: Any) -> StructureStats:
    """
    Measure nesting depth and container counts of a JSON-like value.

    The walk is iterative, so arbitrarily deep input cannot exhaust the
    interpreter stack.

    Args:
        value: Parsed JSON value

    Returns:
        StructureStats for the value
    """
    stats = StructureStats()
    # (value, level, directly inside an array)
    stack = [(value, 1, False)]

    while stack:
        current, level, in_array = stack.pop()

        if isinstance(current, dict):
            stats.object_count += 1
            stats.field_count += len(current)
            stats.max_depth = max(stats.max_depth, level)
            for child in current.values():
                if isinstance(child, (dict, list)):
                    stack.append((child, level + 1, False))

        elif isinstance(current, list):
            stats.array_count += 1
            stats.max_array_length = max(stats.max_array_length, len(current))
            if in_array:
                stats.max_depth = max(stats.max_depth, level)
                element_level = level + 1
            else:
                element_level = level
            for element in current:
                if isinstance(element, (dict, list)):
                    stack.append((element, element_level, True))

    return stats


def validate_nesting_depth(value: Any, limit: int = CIRCULAR_DEPTH_LIMIT) -> int:
    """
    Reject structures deep enough to look generated or circular.

    Args:
        value: Parsed JSON value
        limit: Deepest acceptable nesting

    Returns:
        The measured nesting depth

    Raises:
        LikelyCircularError: If the depth exceeds limit
    """
    depth = estimate_complexity(value).max_depth
    if depth > limit:
        logger.warning(f"Sample nests {depth} levels deep, above the limit of {limit}")
        raise LikelyCircularError(depth, limit)
    return depth
