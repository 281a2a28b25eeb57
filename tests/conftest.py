"""Pytest configuration and fixtures."""

import struct
import subprocess
from collections.abc import Callable

import pytest

from movcheck.config import reset_config


def command_exists(cmd: str) -> bool:
    """Check if a command exists in PATH."""
    try:
        subprocess.run(
            [cmd, "-version"],
            capture_output=True,
            timeout=5,
        )
        return True
    except (FileNotFoundError, subprocess.TimeoutExpired):
        return False


def make_box(box_type: bytes, size: int, declared: int | None = None, extended: bool = False) -> bytes:
    """Build a box whose header declares ``size`` and whose body is zero-filled.

    ``declared`` overrides the 32-bit size field (0 or a bogus value), and
    ``extended`` writes size 1 followed by a 64-bit size.
    """
    if extended:
        header = struct.pack(">I4sQ", 1, box_type, size)
    else:
        header = struct.pack(">I4s", size if declared is None else declared, box_type)
    return header + b"\x00" * max(0, size - len(header))


@pytest.fixture
def box() -> Callable[..., bytes]:
    """Return the box builder."""
    return make_box


@pytest.fixture
def valid_movie() -> bytes:
    """ftyp (32) + moov (1000) + mdat (2000), 3032 bytes."""
    return make_box(b"ftyp", 32) + make_box(b"moov", 1000) + make_box(b"mdat", 2000)


@pytest.fixture
def movie_file(tmp_path, valid_movie):
    """Write the valid movie to disk and return its path."""
    path = tmp_path / "clip.mov"
    path.write_bytes(valid_movie)
    return path


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep user config files and MOVCHECK_* variables out of tests."""
    import movcheck.config as config_module

    for key in ("FFPROBE_PATH", "PROBE_TIMEOUT", "PROBE_ENABLED", "EXTENSIONS"):
        monkeypatch.delenv(f"MOVCHECK_{key}", raising=False)
    monkeypatch.setattr(config_module, "CONFIG_LOCATIONS", [tmp_path / "missing.yaml"])
    reset_config()
    yield
    reset_config()


@pytest.fixture
def has_ffprobe() -> bool:
    """Check if ffprobe is available."""
    return command_exists("ffprobe")
