"""Report rendering for inferred models."""

from .generator import ReportGenerator

__all__ = ["ReportGenerator"]
