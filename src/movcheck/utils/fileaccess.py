"""Read-only file access helpers."""

import os
from typing import BinaryIO


class FileAccessError(OSError):
    """File exists but cannot be opened for reading (locked or denied)."""

    pass


def is_path_safe(path: str) -> bool:
    """Check that a path resolves to an existing regular file."""
    try:
        return os.path.isfile(os.path.abspath(path))
    except (OSError, ValueError):
        return False


def open_read_only(path: str) -> BinaryIO:
    """Open a file for binary reading, surfacing access problems as FileAccessError.

    Args:
        path: Path to the file

    Returns:
        Open binary file handle (caller closes it)

    Raises:
        FileNotFoundError: If the file does not exist
        FileAccessError: If the file cannot be opened
    """
    try:
        return open(path, "rb")
    except FileNotFoundError:
        raise
    except PermissionError as e:
        raise FileAccessError(f"Access denied - check file permissions ({e.strerror})") from e
    except IsADirectoryError as e:
        raise FileAccessError(f"Path is a directory: {path}") from e
    except OSError as e:
        raise FileAccessError(f"File is currently in use by another application: {e}") from e


def get_file_length(stream: BinaryIO) -> int:
    """Return the length of an open stream, restoring its position."""
    current = stream.tell()
    stream.seek(0, os.SEEK_END)
    length = stream.tell()
    stream.seek(current)
    return length
