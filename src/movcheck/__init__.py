"""movcheck - MOV/MP4 container integrity checker.

Find truncated or structurally damaged QuickTime/MP4 files and estimate how
much of each one is still playable.

Usage:
    from movcheck import analyze_file

    result = analyze_file("clip.mov")

    if result.has_issues:
        for issue in result.issues:
            print(issue)
        print(f"Playable: {result.playable_duration:.1f}s of {result.total_duration:.1f}s")

    # Export as JSON
    print(result.model_dump_json())
"""

from movcheck._version import __version__
from movcheck.analyze import analyze, analyze_file, analyze_files
from movcheck.assessor import assess, assess_boxes, estimate_playable_duration
from movcheck.config import ConfigError, MovcheckConfig, get_config, load_config
from movcheck.formatters import (
    format_json,
    format_json_list,
    format_quiet,
    format_quiet_list,
    to_dict,
)
from movcheck.models import BoxRecord, FileCheckResult, ResultBuilder, StopReason
from movcheck.probes import (
    BaseDurationProbe,
    FFprobeDurationProbe,
    StaticDurationProbe,
    get_duration_probe,
)
from movcheck.utils import FileAccessError, check_system_dependencies
from movcheck.walker import walk_boxes

__all__ = [
    # Version
    "__version__",
    # Main functions
    "analyze",
    "analyze_file",
    "analyze_files",
    "walk_boxes",
    "assess",
    "assess_boxes",
    "estimate_playable_duration",
    # Models
    "FileCheckResult",
    "BoxRecord",
    "ResultBuilder",
    "StopReason",
    # Probes
    "BaseDurationProbe",
    "FFprobeDurationProbe",
    "StaticDurationProbe",
    "get_duration_probe",
    # Formatters
    "format_json",
    "format_json_list",
    "format_quiet",
    "format_quiet_list",
    "to_dict",
    # Configuration
    "MovcheckConfig",
    "ConfigError",
    "get_config",
    "load_config",
    # Errors and dependencies
    "FileAccessError",
    "check_system_dependencies",
]
