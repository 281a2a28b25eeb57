"""Output formatters for movcheck."""

from movcheck.models import format_duration, format_size

from .json import format_json, format_json_list, summarize, to_dict
from .quiet import format_quiet, format_quiet_list

__all__ = [
    "format_json",
    "format_json_list",
    "format_quiet",
    "format_quiet_list",
    "format_duration",
    "format_size",
    "summarize",
    "to_dict",
]
