"""FFprobe duration probe."""

import math
import shutil
import subprocess
from typing import ClassVar

from movcheck.probes.base import BaseDurationProbe


class FFprobeDurationProbe(BaseDurationProbe):
    """Read the container duration with ffprobe.

    Only the format-level duration is requested, printed as a bare number.
    """

    name: ClassVar[str] = "ffprobe"
    priority: ClassVar[int] = 10  # Run first

    def __init__(self, ffprobe_path: str = "ffprobe", timeout_seconds: float = 30.0) -> None:
        self.ffprobe_path = ffprobe_path
        self.timeout_seconds = timeout_seconds

    def is_available(self) -> bool:
        """Check if the ffprobe binary can be found."""
        return shutil.which(self.ffprobe_path) is not None

    def probe(self, path: str) -> float:
        """Return the duration reported by ffprobe, or 0.0."""
        output = self._run_ffprobe(path)
        return self._parse_duration(output)

    def _run_ffprobe(self, path: str) -> str:
        """Run ffprobe and return its stdout."""
        try:
            cmd = [
                self.ffprobe_path,
                "-v",
                "error",
                "-show_entries",
                "format=duration",
                "-of",
                "default=noprint_wrappers=1:nokey=1",
                path,
            ]
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=self.timeout_seconds
            )
            if result.stdout:
                return result.stdout
        except (subprocess.TimeoutExpired, FileNotFoundError, PermissionError):
            pass
        return ""

    @staticmethod
    def _parse_duration(output: str) -> float:
        """Parse the first numeric line of ffprobe output ("N/A" means unknown)."""
        for line in output.splitlines():
            value = line.strip()
            if not value:
                continue
            try:
                duration = float(value)
            except ValueError:
                return 0.0
            if not math.isfinite(duration) or duration < 0:
                return 0.0
            return duration
        return 0.0
