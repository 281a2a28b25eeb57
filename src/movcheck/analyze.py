"""Core analysis functions."""

from __future__ import annotations

import functools
import os
import warnings
from collections.abc import Callable
from typing import TYPE_CHECKING, BinaryIO

from movcheck.assessor import assess
from movcheck.models import FileCheckResult, ResultBuilder, StopReason
from movcheck.probes import BaseDurationProbe, get_duration_probe
from movcheck.utils.fileaccess import FileAccessError, get_file_length, open_read_only
from movcheck.walker import walk_boxes

if TYPE_CHECKING:
    from movcheck.config import MovcheckConfig

DurationProbe = Callable[[], float]


def _probe_duration(duration_probe: DurationProbe | None) -> float:
    """Call a duration probe, treating failures as unknown (0.0)."""
    if duration_probe is None:
        return 0.0
    try:
        return float(duration_probe())
    except Exception as e:
        warnings.warn(f"Duration probe failed: {e}", RuntimeWarning, stacklevel=3)
        return 0.0


def _analyze_into(
    builder: ResultBuilder,
    stream: BinaryIO,
    file_length: int,
    duration_probe: DurationProbe | None,
) -> FileCheckResult:
    walk_boxes(stream, file_length, builder)

    # A file too small to hold one header keeps only that issue
    if builder.stop_reason is StopReason.TOO_SMALL:
        return builder.finalize()

    return assess(builder, _probe_duration(duration_probe))


def analyze(
    file_path: str,
    file_length: int,
    stream: BinaryIO,
    duration_probe: DurationProbe | None = None,
) -> FileCheckResult:
    """Check the box structure of an open stream.

    This is the core entry point. It:
    1. Walks the top-level boxes of the stream
    2. Asks the duration probe for the total playback time
    3. Applies the structural rules and estimates playable duration

    Malformed content never raises; it is reported in ``issues``. I/O errors
    from the stream itself propagate to the caller.

    Args:
        file_path: Path recorded in the result
        file_length: Number of bytes the stream holds
        stream: Readable, seekable binary stream
        duration_probe: Zero-argument callable returning seconds (0 = unknown)

    Returns:
        Immutable FileCheckResult
    """
    builder = ResultBuilder(file_path=file_path, file_size=file_length)
    return _analyze_into(builder, stream, file_length, duration_probe)


def analyze_file(
    path: str,
    probe: BaseDurationProbe | None = None,
    config: MovcheckConfig | None = None,
) -> FileCheckResult:
    """Check the integrity of a MOV/MP4 file on disk.

    Access and read failures are turned into issues; whatever had been
    decoded before a read error is kept in the result.

    Args:
        path: Path to the video file
        probe: Duration probe to use (best available probe if omitted)
        config: Configuration used to pick the probe

    Returns:
        Immutable FileCheckResult
    """
    builder = ResultBuilder(file_path=path)

    if not os.path.exists(path):
        builder.add_issue("File does not exist")
        return builder.finalize()

    try:
        stream = open_read_only(path)
    except (FileAccessError, FileNotFoundError) as e:
        builder.add_issue(f"File is in use or locked: {e}")
        return builder.finalize()

    if probe is None:
        probe = get_duration_probe(config)

    with stream:
        try:
            file_length = get_file_length(stream)
            builder.file_size = file_length
            return _analyze_into(
                builder, stream, file_length, functools.partial(probe.probe, path)
            )
        except OSError as e:
            builder.add_issue(f"Error reading file: {e}")
            builder.stop_reason = StopReason.READ_ERROR
            return builder.finalize()


def analyze_files(
    paths: list[str],
    probe: BaseDurationProbe | None = None,
    config: MovcheckConfig | None = None,
) -> list[FileCheckResult]:
    """Check multiple files, one after another.

    Args:
        paths: List of file paths
        probe: Duration probe shared by all files
        config: Configuration used to pick the probe

    Returns:
        List of FileCheckResult objects, in input order
    """
    if probe is None:
        probe = get_duration_probe(config)

    results = []
    for path in paths:
        try:
            results.append(analyze_file(path, probe=probe))
        except Exception as e:
            warnings.warn(f"Failed to analyze {path}: {e}", stacklevel=2)
    return results
