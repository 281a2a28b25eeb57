"""JSON integrity report formatter.

A report wraps one or more results in an envelope:

    {
      "report_version": "1.0",
      "generated_by": "movcheck 0.1.0",
      "summary": {"checked": 2, "valid": 1, "with_issues": 1, "total_size_bytes": ...},
      "files": [
        {..FileCheckResult fields..,
         "integrity": {"validation_percentage": ..., "atoms_found": ...},
         "duration": {"playable_percentage": ..., "missing_duration": ..., ...}}
      ]
    }
"""

import json
from typing import Any

from movcheck._version import __version__
from movcheck.models import FileCheckResult

REPORT_VERSION = "1.0"


def to_dict(result: FileCheckResult) -> dict[str, Any]:
    """Convert a result to a report entry with derived integrity and duration figures."""
    entry = result.model_dump(mode="json")
    entry["integrity"] = {
        "validation_percentage": round(result.validation_percentage, 2),
        "atoms_found": len(result.boxes),
        "incomplete_atoms": sum(1 for box in result.boxes if not box.is_complete),
    }
    entry["duration"] = {
        "total_formatted": result.duration_formatted,
        "playable_formatted": result.playable_duration_formatted,
        "missing_duration": result.missing_duration,
        "playable_percentage": round(result.playable_percentage, 2),
    }
    return entry


def summarize(results: list[FileCheckResult]) -> dict[str, int]:
    """Count checked, valid and damaged files."""
    with_issues = sum(1 for r in results if r.has_issues)
    return {
        "checked": len(results),
        "valid": len(results) - with_issues,
        "with_issues": with_issues,
        "total_size_bytes": sum(r.file_size for r in results),
    }


def format_json(result: FileCheckResult, indent: int = 2) -> str:
    """Format a single result entry as JSON (no envelope)."""
    return json.dumps(to_dict(result), indent=indent, ensure_ascii=False)


def format_json_list(results: list[FileCheckResult], indent: int = 2) -> str:
    """Format results as a JSON integrity report with a summary envelope."""
    report = {
        "report_version": REPORT_VERSION,
        "generated_by": f"movcheck {__version__}",
        "summary": summarize(results),
        "files": [to_dict(r) for r in results],
    }
    return json.dumps(report, indent=indent, ensure_ascii=False)
