"""Dependency checking utilities."""

import shutil


def check_system_dependencies(ffprobe_path: str = "ffprobe") -> dict[str, bool]:
    """Check availability of system dependencies (binaries).

    Returns:
        Dict mapping tool names to availability status.
    """
    return {"ffprobe": shutil.which(ffprobe_path) is not None}


def print_dependency_status(ffprobe_path: str = "ffprobe") -> None:
    """Print dependency status to stdout."""
    deps = check_system_dependencies(ffprobe_path)

    print("movcheck dependency status:")
    print("=" * 40)

    print("\nSystem binaries:")
    for name, available in sorted(deps.items()):
        icon = "✓" if available else "✗"
        print(f"  {icon} {name}")

    if not deps["ffprobe"]:
        print("\n⚠️  ffprobe not found: durations will be reported as 0. Install: brew install ffmpeg")
