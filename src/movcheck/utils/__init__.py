"""Utility functions for movcheck."""

from movcheck.models.result import format_duration, format_size

from .container import (
    KNOWN_BOX_TYPES,
    MP4_EXTENSIONS,
    REQUIRED_BOXES,
    has_media_extension,
    is_known_box_type,
    is_printable_tag,
)
from .deps import check_system_dependencies, print_dependency_status
from .fileaccess import FileAccessError, get_file_length, is_path_safe, open_read_only

__all__ = [
    # Formatting
    "format_size",
    "format_duration",
    # Dependency checking
    "check_system_dependencies",
    "print_dependency_status",
    # Container constants
    "KNOWN_BOX_TYPES",
    "MP4_EXTENSIONS",
    "REQUIRED_BOXES",
    "has_media_extension",
    "is_known_box_type",
    "is_printable_tag",
    # File access
    "FileAccessError",
    "get_file_length",
    "is_path_safe",
    "open_read_only",
]
