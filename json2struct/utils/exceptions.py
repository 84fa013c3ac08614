"""Custom exceptions for json2struct."""

from typing import Optional


class Json2StructError(Exception):
    """Base exception for json2struct errors."""
    pass


class ConfigurationError(Json2StructError):
    """Raised when configuration is invalid."""
    pass


class SampleLoadError(Json2StructError):
    """Raised when a sample document cannot be read or parsed."""
    pass


class StructureError(Json2StructError):
    """Raised when a sample cannot be turned into a type model."""
    pass


class RootNotObjectError(StructureError):
    """Raised when the top level of the sample is not an object."""

    def __init__(self, actual_type: Optional[str] = None):
        self.actual_type = actual_type
        message = "Sample root must be a JSON object"
        if actual_type:
            message += f", got {actual_type}"
        super().__init__(message)


class TooDeepError(StructureError):
    """Raised when the sample nests deeper than the configured bound."""

    def __init__(self, depth: int, path: str, max_depth: Optional[int] = None):
        self.depth = depth
        self.path = path
        self.max_depth = max_depth
        message = f"JSON structure is too deeply nested ({depth} levels) at '{path or '<root>'}'"
        if max_depth is not None:
            message += f"; maximum depth is {max_depth}"
        super().__init__(message)


class LikelyCircularError(StructureError):
    """Raised when the depth pre-scan suggests a pathological or generated structure."""

    def __init__(self, depth: int, limit: int):
        self.depth = depth
        self.limit = limit
        super().__init__(
            f"JSON structure is too deeply nested ({depth} levels, limit {limit}); "
            f"possible circular reference in the generating data"
        )
