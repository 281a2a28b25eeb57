"""Tests for read-only file access helpers."""

import io

import pytest

from movcheck.utils import (
    FileAccessError,
    get_file_length,
    has_media_extension,
    is_path_safe,
    open_read_only,
)


class TestFileAccess:
    """Test fileaccess helpers."""

    def test_open_read_only(self, movie_file, valid_movie):
        """Test files open in binary read mode."""
        with open_read_only(str(movie_file)) as f:
            assert f.read(8) == valid_movie[:8]
            assert f.mode == "rb"

    def test_open_missing(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            open_read_only(str(tmp_path / "missing.mov"))

    def test_open_directory(self, tmp_path):
        """Test a directory raises FileAccessError."""
        with pytest.raises(FileAccessError):
            open_read_only(str(tmp_path))

    def test_is_path_safe(self, movie_file, tmp_path):
        """Test only existing regular files are safe."""
        assert is_path_safe(str(movie_file)) is True
        assert is_path_safe(str(tmp_path)) is False
        assert is_path_safe(str(tmp_path / "missing.mov")) is False

    def test_get_file_length_keeps_position(self):
        """Test length lookup restores the stream position."""
        stream = io.BytesIO(b"x" * 50)
        stream.seek(10)

        assert get_file_length(stream) == 50
        assert stream.tell() == 10

    @pytest.mark.parametrize(
        "path,expected",
        [("a/clip.MOV", True), ("clip.m4a", True), ("clip.mkv", False), ("mov", False)],
    )
    def test_has_media_extension(self, path, expected):
        """Test extension matching is case-insensitive."""
        assert has_media_extension(path) is expected
