"""Duration probes for movcheck."""

from __future__ import annotations

from typing import TYPE_CHECKING

from movcheck.probes.base import BaseDurationProbe
from movcheck.probes.ffprobe import FFprobeDurationProbe
from movcheck.probes.static import StaticDurationProbe

if TYPE_CHECKING:
    from movcheck.config import MovcheckConfig


def get_available_probes(config: MovcheckConfig | None = None) -> list[BaseDurationProbe]:
    """Get list of available probe instances, sorted by priority.

    Args:
        config: Configuration to build probes from (global config if omitted)

    Returns:
        List of probe instances that are available on this system,
        sorted by priority (lowest first).
    """
    if config is None:
        from movcheck.config import get_config

        config = get_config()

    if not config.probe.enabled:
        return []

    candidates: list[BaseDurationProbe] = [
        FFprobeDurationProbe(
            ffprobe_path=config.probe.ffprobe_path,
            timeout_seconds=config.probe.timeout_seconds,
        ),
    ]
    available = [probe for probe in candidates if probe.is_available()]
    available.sort(key=lambda x: x.priority)
    return available


def get_duration_probe(config: MovcheckConfig | None = None) -> BaseDurationProbe:
    """Return the best available probe, or a probe reporting 0.0."""
    available = get_available_probes(config)
    if available:
        return available[0]
    return StaticDurationProbe(0.0)


def get_probe_status(config: MovcheckConfig | None = None) -> dict[str, bool]:
    """Get availability status of all probes.

    Returns:
        Dict mapping probe names to availability status.
    """
    available = {probe.name for probe in get_available_probes(config)}
    return {FFprobeDurationProbe.name: FFprobeDurationProbe.name in available}


__all__ = [
    # Base class
    "BaseDurationProbe",
    # Probes
    "FFprobeDurationProbe",
    "StaticDurationProbe",
    # Functions
    "get_available_probes",
    "get_duration_probe",
    "get_probe_status",
]
