"""Tests for duration probes."""

import subprocess
from types import SimpleNamespace

import pytest

from movcheck.config import MovcheckConfig, ProbeConfig
from movcheck.probes import (
    FFprobeDurationProbe,
    StaticDurationProbe,
    get_available_probes,
    get_duration_probe,
    get_probe_status,
)


class TestFFprobeDurationProbe:
    """Test FFprobeDurationProbe."""

    def test_priority(self):
        """Test probe name and priority."""
        assert FFprobeDurationProbe.name == "ffprobe"
        assert FFprobeDurationProbe.priority == 10

    def test_is_available_returns_bool(self):
        """Test availability check returns a boolean."""
        assert isinstance(FFprobeDurationProbe().is_available(), bool)

    def test_unavailable_binary(self):
        """Test a binary that does not exist is unavailable."""
        probe = FFprobeDurationProbe(ffprobe_path="/nonexistent/ffprobe")
        assert probe.is_available() is False

    @pytest.mark.parametrize(
        "output,expected",
        [
            ("12.345000\n", 12.345),
            ("\n  7.5  \n", 7.5),
            ("N/A\n", 0.0),
            ("", 0.0),
            ("-3.0\n", 0.0),
            ("nan\n", 0.0),
        ],
    )
    def test_parse_duration(self, output, expected):
        """Test ffprobe output parsing."""
        assert FFprobeDurationProbe._parse_duration(output) == expected

    def test_probe_runs_ffprobe(self, monkeypatch):
        """Test the command line and timeout passed to ffprobe."""
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append((cmd, kwargs))
            return SimpleNamespace(returncode=0, stdout="61.2\n", stderr="")

        monkeypatch.setattr(subprocess, "run", fake_run)

        probe = FFprobeDurationProbe(ffprobe_path="ffprobe-test", timeout_seconds=4)
        assert probe.probe("/media/clip.mov") == 61.2

        cmd, kwargs = calls[0]
        assert cmd[0] == "ffprobe-test"
        assert "format=duration" in cmd
        assert cmd[-1] == "/media/clip.mov"
        assert kwargs["timeout"] == 4

    def test_probe_timeout(self, monkeypatch):
        """Test a timeout yields 0.0."""

        def fake_run(cmd, **kwargs):
            raise subprocess.TimeoutExpired(cmd, kwargs["timeout"])

        monkeypatch.setattr(subprocess, "run", fake_run)
        assert FFprobeDurationProbe().probe("/media/clip.mov") == 0.0

    def test_probe_missing_binary(self):
        """Test a missing binary yields 0.0."""
        probe = FFprobeDurationProbe(ffprobe_path="/nonexistent/ffprobe")
        assert probe.probe("/media/clip.mov") == 0.0

    @pytest.mark.requires_ffprobe
    def test_probe_non_media_file(self, tmp_path, has_ffprobe):
        """Test ffprobe on garbage reports unknown duration."""
        if not has_ffprobe:
            pytest.skip("ffprobe not available")

        path = tmp_path / "garbage.mov"
        path.write_bytes(b"\x00" * 100)
        assert FFprobeDurationProbe().probe(str(path)) == 0.0


class TestProbeSelection:
    """Test probe registry functions."""

    def test_static_probe(self):
        """Test the static probe reports its fixed value."""
        probe = StaticDurationProbe(33.0)
        assert probe.is_available() is True
        assert probe.probe("anything.mov") == 33.0

    def test_disabled_probing(self):
        """Test disabled probing gives a zero probe."""
        config = MovcheckConfig(probe=ProbeConfig(enabled=False))

        assert get_available_probes(config) == []
        probe = get_duration_probe(config)
        assert isinstance(probe, StaticDurationProbe)
        assert probe.probe("clip.mov") == 0.0

    def test_missing_binary_falls_back(self):
        """Test an unavailable ffprobe falls back to the zero probe."""
        config = MovcheckConfig(probe=ProbeConfig(ffprobe_path="/nonexistent/ffprobe"))
        assert isinstance(get_duration_probe(config), StaticDurationProbe)
        assert get_probe_status(config) == {"ffprobe": False}

    def test_configured_binary(self, monkeypatch):
        """Test configuration is passed to the ffprobe probe."""
        monkeypatch.setattr(FFprobeDurationProbe, "is_available", lambda self: True)
        config = MovcheckConfig(probe=ProbeConfig(ffprobe_path="/opt/ffprobe", timeout_seconds=3))

        probe = get_duration_probe(config)

        assert isinstance(probe, FFprobeDurationProbe)
        assert probe.ffprobe_path == "/opt/ffprobe"
        assert probe.timeout_seconds == 3
        assert get_probe_status(config) == {"ffprobe": True}
