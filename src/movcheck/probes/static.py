"""Fixed-value duration probe."""

from typing import ClassVar

from movcheck.probes.base import BaseDurationProbe


class StaticDurationProbe(BaseDurationProbe):
    """Report the same duration for every file.

    Used when the caller already knows the duration, and as the zero probe
    when no real probe is available.
    """

    name: ClassVar[str] = "static"
    priority: ClassVar[int] = 1000

    def __init__(self, seconds: float = 0.0) -> None:
        self.seconds = seconds

    def is_available(self) -> bool:
        """Always available."""
        return True

    def probe(self, path: str) -> float:
        return self.seconds
