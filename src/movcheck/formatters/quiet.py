"""Quiet output formatter - one-line summary."""

import os

from movcheck.models import FileCheckResult, format_size


def format_quiet(result: FileCheckResult) -> str:
    """Format a result as one-line summary.

    Format: filename | size | validated % | playable/total | OK or N issue(s)
    """
    parts = []

    parts.append(os.path.basename(result.file_path) or result.file_path)
    parts.append(format_size(result.file_size))
    parts.append(f"{result.validation_percentage:.1f}% validated")

    if result.total_duration > 0:
        parts.append(f"{result.playable_duration_formatted} / {result.duration_formatted} playable")
    else:
        parts.append("duration N/A")

    if result.has_issues:
        count = len(result.issues)
        parts.append(f"CORRUPTED ({count} issue{'s' if count != 1 else ''})")
    else:
        parts.append("OK")

    return " | ".join(parts)


def format_quiet_list(results: list[FileCheckResult]) -> str:
    """Format multiple results as one-line summaries.

    Args:
        results: List of FileCheckResult objects

    Returns:
        Multiple lines, one per file
    """
    return "\n".join(format_quiet(r) for r in results)
