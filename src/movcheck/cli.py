"""
Command-line interface for movcheck.

Usage:
  movcheck clip.mov                  # Check one file
  movcheck -q *.mp4                  # One line per file
  movcheck -o report.json *.mov      # JSON export
  movcheck --status                  # Show ffprobe availability
"""

from __future__ import annotations

import argparse
import os
import sys

from movcheck._version import __version__
from movcheck.analyze import analyze_file
from movcheck.config import ConfigError, load_config
from movcheck.formatters import format_json_list, format_quiet, format_size
from movcheck.models import FileCheckResult
from movcheck.probes import get_duration_probe
from movcheck.utils import has_media_extension, print_dependency_status


def format_result(result: FileCheckResult) -> str:
    """Format a result as a short multi-line block."""
    lines = []
    lines.append("=" * 70)
    lines.append(f"File: {os.path.basename(result.file_path)}")
    lines.append("=" * 70)
    lines.append(f"  Size:         {format_size(result.file_size)}")
    lines.append(f"  Atoms:        {len(result.boxes)}")
    lines.append(
        f"  Validated:    {result.bytes_validated:,} / {result.file_size:,} bytes "
        f"({result.validation_percentage:.1f}%)"
    )
    if result.total_duration > 0:
        lines.append(f"  Duration:     {result.duration_formatted}")
        lines.append(
            f"  Playable:     {result.playable_duration_formatted} "
            f"({result.playable_percentage:.1f}%)"
        )

    if result.has_issues:
        lines.append("")
        lines.append(f"  Issues ({len(result.issues)}):")
        for issue in result.issues:
            lines.append(f"    - {issue}")
        lines.append("")
        lines.append("  Status:       CORRUPTED or INCOMPLETE")
    else:
        lines.append("  Status:       VALID and COMPLETE")
    return "\n".join(lines)


def main() -> int:
    """Main entry point for movcheck CLI."""
    parser = argparse.ArgumentParser(
        prog="movcheck",
        description="Check MOV/MP4 files for truncation and structural damage.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit status:
  0  every file is structurally complete
  1  at least one file has issues, or an argument was invalid

Examples:
  movcheck clip.mov
  movcheck -q *.mp4
  movcheck -o report.json *.mov
        """,
    )
    parser.add_argument("files", nargs="*", help="MOV/MP4 file(s) to check")
    parser.add_argument("-o", "--output", help="Save results to JSON file")
    parser.add_argument("-q", "--quiet", action="store_true", help="One-line summary per file")
    parser.add_argument(
        "--no-probe",
        action="store_true",
        help="Skip duration probing (playable duration reported as 0)",
    )
    parser.add_argument(
        "--status",
        action="store_true",
        help="Show dependency availability status",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args()

    try:
        config = load_config()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.status:
        print_dependency_status(config.probe.ffprobe_path)
        return 0

    if not args.files:
        parser.error("the following arguments are required: files")

    if args.no_probe:
        config.probe.enabled = False
    probe = get_duration_probe(config)

    results = []
    failed = 0
    missing = 0

    for file_path in args.files:
        if not has_media_extension(file_path, config.scan.extensions):
            if not os.path.exists(file_path):
                print(f"Error: File does not exist: {file_path}", file=sys.stderr)
                missing += 1
                continue
            print(f"Skipping (not a MOV/MP4 file): {file_path}", file=sys.stderr)
            continue

        result = analyze_file(file_path, probe=probe)
        results.append(result)
        if result.has_issues:
            failed += 1

        if args.quiet:
            print(format_quiet(result))
        else:
            print(format_result(result))
            print()

    if not args.quiet and len(results) > 1:
        print(f"Checked {len(results)} file(s): {len(results) - failed} valid, {failed} with issues")

    if args.output and results:
        json_output = format_json_list(results)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(json_output)
        print(f"Report saved to: {args.output}")

    return 1 if failed > 0 or missing > 0 else 0


if __name__ == "__main__":
    sys.exit(main())
