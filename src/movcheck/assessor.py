"""Structural integrity rules and playable-duration estimate."""

import math
from collections.abc import Sequence

from movcheck.models import BoxRecord, FileCheckResult, ResultBuilder, StopReason
from movcheck.utils.container import REQUIRED_BOXES

INVALID_STRUCTURE_ISSUE = "File structure is invalid or incomplete"


def estimate_playable_duration(total_duration: float, file_size: int, bytes_validated: int) -> float:
    """Estimate playable seconds from the share of bytes that validated.

    Assumes media data is spread evenly over the timeline (constant bitrate).
    The sample tables in 'moov' are never parsed, so this is an approximation.
    """
    if total_duration > 0 and file_size > 0:
        completion_ratio = bytes_validated / file_size
        return total_duration * completion_ratio
    return 0.0


def _sanitize_duration(value: float) -> float:
    try:
        duration = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(duration) or duration < 0:
        return 0.0
    return duration


def check_boxes(
    boxes: Sequence[BoxRecord],
    file_size: int,
    stop_reason: StopReason,
) -> list[str]:
    """Run the structural checks over walked boxes.

    Returns:
        New issue strings, in detection order
    """
    issues: list[str] = []
    types = [box.type for box in boxes]

    # Zero boxes is already explained by the walker
    if boxes:
        for box_type, meaning in REQUIRED_BOXES.items():
            if box_type not in types:
                issues.append(f"Missing '{box_type}' atom ({meaning})")

    if "ftyp" in types and types[0] != "ftyp":
        ftyp = next(box for box in boxes if box.type == "ftyp")
        issues.append(f"'ftyp' atom should be first, but found at offset {ftyp.offset:,}")

    if boxes:
        last = boxes[-1]
        if last.is_complete and last.end != file_size:
            gap = file_size - last.end
            issues.append(f"Gap of {gap:,} bytes after last atom '{last.type}' at offset {last.end:,}")

    if stop_reason.is_fatal or not boxes:
        issues.append(INVALID_STRUCTURE_ISSUE)

    return issues


def assess_boxes(
    file_path: str,
    boxes: Sequence[BoxRecord],
    issues: Sequence[str],
    total_duration: float,
    file_size: int,
    bytes_validated: int,
    stop_reason: StopReason = StopReason.END_OF_FILE,
) -> FileCheckResult:
    """Evaluate walker output and build the final verdict.

    Args:
        file_path: Path the boxes were read from
        boxes: Decoded boxes in file order
        issues: Issues already logged by the walker
        total_duration: Duration reported by a probe, 0 if unknown
        file_size: Length of the file in bytes
        bytes_validated: Offset the walker reached
        stop_reason: Why the walker stopped

    Returns:
        Immutable FileCheckResult
    """
    total = _sanitize_duration(total_duration)
    all_issues = list(issues) + check_boxes(boxes, file_size, stop_reason)

    return FileCheckResult(
        file_path=file_path,
        file_size=file_size,
        bytes_validated=bytes_validated,
        boxes=tuple(boxes),
        issues=tuple(all_issues),
        total_duration=total,
        playable_duration=estimate_playable_duration(total, file_size, bytes_validated),
    )


def assess(builder: ResultBuilder, total_duration: float = 0.0) -> FileCheckResult:
    """Assess a walked ResultBuilder.

    The builder is updated with the added issues and durations before being
    finalized, so it mirrors the returned result.
    """
    result = assess_boxes(
        builder.file_path,
        builder.boxes,
        builder.issues,
        total_duration,
        builder.file_size,
        builder.bytes_validated,
        builder.stop_reason,
    )
    builder.issues = list(result.issues)
    builder.total_duration = result.total_duration
    builder.playable_duration = result.playable_duration
    return result
