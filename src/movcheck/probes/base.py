"""Base duration probe class."""

from abc import ABC, abstractmethod
from typing import ClassVar


class BaseDurationProbe(ABC):
    """Abstract base class for duration probes.

    A probe reports the total playback duration of a media file in seconds.
    Probes never raise for unreadable media: they return 0.0 to signal that
    the duration is unknown.

    Attributes:
        name: Human-readable name of the probe
        priority: Lower numbers are tried first (default: 100)
    """

    name: ClassVar[str] = "base"
    priority: ClassVar[int] = 100

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this probe can run on this system.

        Returns:
            True if all dependencies are available
        """
        pass

    @abstractmethod
    def probe(self, path: str) -> float:
        """Return the duration of a file in seconds, or 0.0 if unknown.

        Args:
            path: Path to the media file
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, priority={self.priority})"
