"""Container format constants and helpers."""

import struct

# Top-level and common child box types accepted without complaint
KNOWN_BOX_TYPES = frozenset(
    [
        "ftyp",
        "moov",
        "mdat",
        "free",
        "skip",
        "wide",
        "pnot",
        "mvhd",
        "trak",
        "tkhd",
        "mdia",
        "mdhd",
        "hdlr",
        "minf",
        "vmhd",
        "smhd",
        "dinf",
        "stbl",
        "stsd",
        "stts",
        "stsc",
        "stsz",
        "stco",
        "co64",
        "edts",
        "elst",
        "udta",
        "meta",
    ]
)

# Boxes every well-formed file must carry, with what they hold
REQUIRED_BOXES = {
    "ftyp": "file type header",
    "moov": "metadata",
    "mdat": "media data",
}

# MOV/MP4 file extensions
MP4_EXTENSIONS = [".mov", ".mp4", ".m4v", ".m4a"]

HEADER_SIZE = 8
EXTENDED_HEADER_SIZE = 16

# Declared sizes with special meaning
SIZE_TO_EOF = 0
SIZE_EXTENDED = 1

_HEADER = struct.Struct(">I4s")
_EXTENDED_SIZE = struct.Struct(">Q")


def unpack_header(header: bytes) -> tuple[int, str, bytes]:
    """Split an 8-byte box header into (declared size, tag, raw tag bytes)."""
    size, raw_type = _HEADER.unpack(header)
    return size, decode_box_type(raw_type), raw_type


def unpack_extended_size(data: bytes) -> int:
    """Decode a 64-bit big-endian extended size field."""
    return int(_EXTENDED_SIZE.unpack(data)[0])


def decode_box_type(raw_type: bytes) -> str:
    """Decode a 4-byte tag, one character per byte."""
    return raw_type.decode("latin-1")


def is_printable_tag(raw_type: bytes) -> bool:
    """Check if every byte of a tag is printable ASCII (32-126)."""
    return all(32 <= b <= 126 for b in raw_type)


def is_known_box_type(box_type: str) -> bool:
    """Check if a tag is in the known allow-list."""
    return box_type in KNOWN_BOX_TYPES


def has_media_extension(path: str, extensions: list[str] | None = None) -> bool:
    """Check if a path carries one of the MOV/MP4 extensions."""
    exts = extensions if extensions is not None else MP4_EXTENSIONS
    lowered = path.lower()
    return any(lowered.endswith(ext.lower()) for ext in exts)
