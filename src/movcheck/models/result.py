"""Integrity result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from .box import BoxRecord


def format_size(size_bytes: int | float) -> str:
    """Convert bytes to human-readable string."""
    if size_bytes < 0:
        return "N/A"
    size = float(size_bytes)
    for unit in ["B", "KB", "MB", "GB", "TB", "PB"]:
        if size < 1024:
            if unit == "B":
                return f"{int(size)} {unit}"
            return f"{size:.2f} {unit}"
        size /= 1024
    return f"{size:.2f} EB"


def format_duration(seconds: float) -> str:
    """Convert seconds to a human-readable duration string."""
    if not seconds or seconds <= 0:
        return "N/A"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes < 60:
        return f"{minutes}m {secs:.1f}s"
    hours = minutes // 60
    minutes = minutes % 60
    return f"{hours}h {minutes}m {secs:.0f}s"


class StopReason(str, Enum):
    """Why the box walker stopped."""

    END_OF_FILE = "end_of_file"
    TOO_SMALL = "too_small"
    TRUNCATED = "truncated"
    INVALID_SIZE = "invalid_size"
    READ_ERROR = "read_error"

    @property
    def is_fatal(self) -> bool:
        """Return True if walking ended on a truncation or structural error."""
        return self in (StopReason.TRUNCATED, StopReason.INVALID_SIZE)


class FileCheckResult(BaseModel):
    """Integrity verdict for one file.

    This is the only thing the core hands to report renderers and batch
    aggregators. It is immutable; build it with ResultBuilder.
    """

    model_config = ConfigDict(frozen=True)

    file_path: str
    file_size: int = Field(default=0, ge=0)
    bytes_validated: int = Field(default=0, ge=0)
    boxes: tuple[BoxRecord, ...] = ()
    issues: tuple[str, ...] = ()
    total_duration: float = Field(default=0.0, ge=0)
    playable_duration: float = Field(default=0.0, ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> FileCheckResult:
        if self.bytes_validated > self.file_size:
            raise ValueError(
                f"bytes_validated ({self.bytes_validated}) exceeds file_size ({self.file_size})"
            )
        if self.playable_duration > self.total_duration:
            raise ValueError(
                f"playable_duration ({self.playable_duration}) exceeds "
                f"total_duration ({self.total_duration})"
            )
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_issues(self) -> bool:
        """Check if any problem was detected."""
        return len(self.issues) > 0

    @property
    def box_types(self) -> list[str]:
        """Return box tags in file order."""
        return [box.type for box in self.boxes]

    def has_box(self, box_type: str) -> bool:
        """Check if a top-level box with the given tag was decoded."""
        return any(box.type == box_type for box in self.boxes)

    @property
    def validation_percentage(self) -> float:
        """Return the share of the file covered by valid boxes (0-100)."""
        if self.file_size <= 0:
            return 0.0
        return self.bytes_validated * 100.0 / self.file_size

    @property
    def missing_duration(self) -> float:
        """Return the estimated unplayable duration in seconds."""
        return self.total_duration - self.playable_duration

    @property
    def playable_percentage(self) -> float:
        """Return playable duration as a percentage of the total (0-100)."""
        if self.total_duration <= 0:
            return 0.0
        return self.playable_duration * 100.0 / self.total_duration

    @property
    def duration_formatted(self) -> str:
        """Return total duration as human-readable string."""
        return format_duration(self.total_duration)

    @property
    def playable_duration_formatted(self) -> str:
        """Return playable duration as human-readable string."""
        return format_duration(self.playable_duration)


@dataclass
class ResultBuilder:
    """Mutable accumulator threaded through the walker and the assessor."""

    file_path: str
    file_size: int = 0
    bytes_validated: int = 0
    boxes: list[BoxRecord] = field(default_factory=list)
    issues: list[str] = field(default_factory=list)
    stop_reason: StopReason = StopReason.END_OF_FILE
    total_duration: float = 0.0
    playable_duration: float = 0.0

    def add_box(self, box: BoxRecord) -> None:
        self.boxes.append(box)

    def add_issue(self, message: str) -> None:
        self.issues.append(message)

    def finalize(self) -> FileCheckResult:
        """Freeze the accumulated state into a FileCheckResult."""
        return FileCheckResult(
            file_path=self.file_path,
            file_size=self.file_size,
            bytes_validated=self.bytes_validated,
            boxes=tuple(self.boxes),
            issues=tuple(self.issues),
            total_duration=self.total_duration,
            playable_duration=self.playable_duration,
        )
