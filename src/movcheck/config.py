"""Configuration management for movcheck.

Supports loading configuration from:
1. Environment variables (MOVCHECK_*)
2. Config file (~/.movcheck/config.yaml)
3. Default values

Example config file (~/.movcheck/config.yaml):
    probe:
      ffprobe_path: "/usr/local/bin/ffprobe"
      timeout_seconds: 30
      enabled: true
    scan:
      extensions: [".mov", ".mp4", ".m4v", ".m4a"]
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from movcheck.utils.container import MP4_EXTENSIONS

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".movcheck" / "config.yaml",
    Path.home() / ".config" / "movcheck" / "config.yaml",
    Path(".movcheck.yaml"),
]


class ConfigError(ValueError):
    """Invalid configuration value."""

    pass


@dataclass
class ProbeConfig:
    """Duration probe configuration."""

    ffprobe_path: str = "ffprobe"
    timeout_seconds: float = 30.0
    enabled: bool = True


@dataclass
class ScanConfig:
    """File selection configuration."""

    extensions: list[str] = field(default_factory=lambda: list(MP4_EXTENSIONS))


@dataclass
class MovcheckConfig:
    """Main configuration for movcheck."""

    probe: ProbeConfig = field(default_factory=ProbeConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)


def _load_yaml_config(locations: list[Path] | None = None) -> dict[str, Any]:
    """Load configuration from the first YAML file found."""
    for config_path in locations if locations is not None else CONFIG_LOCATIONS:
        if config_path.exists():
            try:
                with open(config_path) as f:
                    data = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
            if data is None:
                return {}
            if not isinstance(data, dict):
                raise ConfigError(f"Config file {config_path} must contain a mapping")
            return data
    return {}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with MOVCHECK_ prefix."""
    return os.environ.get(f"MOVCHECK_{key}", default)


def _parse_bool(value: str | None) -> bool | None:
    """Parse boolean from string."""
    if value is None:
        return None
    return value.lower() in ("true", "1", "yes", "on")


def _parse_extensions(value: str | list[str]) -> list[str]:
    """Normalize extensions to lowercase with a leading dot."""
    items = value.split(",") if isinstance(value, str) else list(value)
    extensions = []
    for item in items:
        ext = str(item).strip().lower()
        if not ext:
            continue
        extensions.append(ext if ext.startswith(".") else f".{ext}")
    return extensions


def _section(file_config: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a config section, which must be a mapping if present."""
    section = file_config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping, got {type(section).__name__}")
    return section


def _file_bool(value: Any, key: str) -> bool:
    """Parse a boolean read from the config file."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return bool(_parse_bool(value))
    raise ConfigError(f"Config value '{key}' must be a boolean, got {value!r}")


def load_config(locations: list[Path] | None = None) -> MovcheckConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (MOVCHECK_*)
    2. Config file (~/.movcheck/config.yaml)
    3. Default values

    Raises:
        ConfigError: If a value cannot be parsed
    """
    file_config = _load_yaml_config(locations)

    probe_config = _section(file_config, "probe")
    enabled_env = _get_env("PROBE_ENABLED")
    try:
        timeout = float(_get_env("PROBE_TIMEOUT") or probe_config.get("timeout_seconds", 30))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid probe timeout: {e}") from e
    if timeout <= 0:
        raise ConfigError(f"Probe timeout must be positive, got {timeout}")

    ffprobe_path = _get_env("FFPROBE_PATH") or probe_config.get("ffprobe_path", "ffprobe")
    if not isinstance(ffprobe_path, str):
        raise ConfigError(f"Config value 'probe.ffprobe_path' must be a string, got {ffprobe_path!r}")

    probe = ProbeConfig(
        ffprobe_path=ffprobe_path,
        timeout_seconds=timeout,
        enabled=(
            bool(_parse_bool(enabled_env))
            if enabled_env
            else _file_bool(probe_config.get("enabled", True), "probe.enabled")
        ),
    )

    scan_config = _section(file_config, "scan")
    extensions = _get_env("EXTENSIONS") or scan_config.get("extensions", MP4_EXTENSIONS)
    if not isinstance(extensions, (str, list)):
        raise ConfigError(
            f"Config value 'scan.extensions' must be a string or list, got {extensions!r}"
        )
    scan = ScanConfig(extensions=_parse_extensions(extensions))

    return MovcheckConfig(probe=probe, scan=scan)


# Global config instance (lazy loaded)
_config: MovcheckConfig | None = None


def get_config() -> MovcheckConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
