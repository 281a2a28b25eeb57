"""Top-level box walker for QuickTime/MP4 containers."""

from typing import BinaryIO

from movcheck.models import BoxRecord, ResultBuilder, StopReason
from movcheck.utils.container import (
    EXTENDED_HEADER_SIZE,
    HEADER_SIZE,
    SIZE_EXTENDED,
    SIZE_TO_EOF,
    is_known_box_type,
    is_printable_tag,
    unpack_extended_size,
    unpack_header,
)


def _read_at(stream: BinaryIO, offset: int, count: int, file_length: int) -> bytes:
    """Read up to count bytes at offset without going past file_length."""
    available = max(0, file_length - offset)
    stream.seek(offset)
    return stream.read(min(count, available))


def walk_boxes(
    stream: BinaryIO,
    file_length: int,
    builder: ResultBuilder | None = None,
) -> ResultBuilder:
    """Decode top-level box headers from offset 0 until EOF or the first fatal problem.

    The walker only reads headers. It seeks to each box start rather than
    relying on the stream position, records every decoded header (complete or
    not) and stops at the first truncation or invalid size without trying to
    resynchronize.

    Args:
        stream: Readable, seekable binary stream
        file_length: Number of bytes the file is known to hold
        builder: Accumulator to populate (a new one is created if omitted)

    Returns:
        The builder, with boxes, issues, bytes_validated and stop_reason set
    """
    if builder is None:
        builder = ResultBuilder(file_path=str(getattr(stream, "name", "")))
    builder.file_size = file_length

    if file_length < HEADER_SIZE:
        builder.add_issue(f"File too small to be a valid container (< {HEADER_SIZE} bytes)")
        builder.stop_reason = StopReason.TOO_SMALL
        builder.bytes_validated = 0
        return builder

    position = 0
    stop_reason = StopReason.END_OF_FILE

    while position < file_length:
        header = _read_at(stream, position, HEADER_SIZE, file_length)
        if len(header) < HEADER_SIZE:
            builder.add_issue(f"Incomplete atom header at offset {position:,}")
            stop_reason = StopReason.TRUNCATED
            break

        size, box_type, raw_type = unpack_header(header)

        header_size = HEADER_SIZE
        if size == SIZE_EXTENDED:
            ext = _read_at(stream, position + HEADER_SIZE, 8, file_length)
            if len(ext) < 8:
                builder.add_issue(
                    f"Incomplete extended size for atom '{box_type}' at offset {position:,}"
                )
                stop_reason = StopReason.TRUNCATED
                break
            size = unpack_extended_size(ext)
            header_size = EXTENDED_HEADER_SIZE
        elif size == SIZE_TO_EOF:
            size = file_length - position

        if size < header_size:
            builder.add_issue(
                f"Invalid atom size ({size}) at offset {position:,} for type '{box_type}'"
            )
            stop_reason = StopReason.INVALID_SIZE
            break

        is_complete = position + size <= file_length
        builder.add_box(
            BoxRecord(type=box_type, size=size, offset=position, is_complete=is_complete)
        )

        if not is_complete:
            available = file_length - position
            missing = size - available
            builder.add_issue(
                f"Incomplete atom '{box_type}' at offset {position:,}: "
                f"Expected {size:,} bytes, available {available:,} bytes, "
                f"missing {missing:,} bytes ({missing * 100.0 / size:.1f}%)"
            )
            stop_reason = StopReason.TRUNCATED
            break

        # Printable vendor tags are accepted silently
        if not is_known_box_type(box_type) and not is_printable_tag(raw_type):
            builder.add_issue(f"Unknown/invalid atom type '{box_type}' at offset {position:,}")

        position += size
        builder.bytes_validated = position

    builder.bytes_validated = position
    builder.stop_reason = stop_reason
    return builder
