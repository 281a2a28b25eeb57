"""Pydantic models for movcheck."""

from .box import BoxRecord
from .result import FileCheckResult, ResultBuilder, StopReason, format_duration, format_size

__all__ = [
    # Main model
    "FileCheckResult",
    # Boxes
    "BoxRecord",
    # Building
    "ResultBuilder",
    "StopReason",
    # Formatting
    "format_duration",
    "format_size",
]
