"""Binary content detection over the probe window."""

from __future__ import annotations

from streamselector.enums import ContentKind

# Bytes that map to ISO control code points when read as Latin-1
# (U+0000-U+001F, U+007F-U+009F), minus \t \n \r.  Deleting them with
# bytes.translate() and comparing lengths finds any occurrence in one
# C-level pass.
_CONTROL_DELETE = (
    bytes(range(0x09))
    + b"\x0b\x0c"
    + bytes(range(0x0E, 0x20))
    + bytes(range(0x7F, 0xA0))
)


def is_binary(data: bytes | bytearray | memoryview) -> bool:
    """Return True if *data* contains any non-whitespace control byte."""
    data = bytes(data)
    return len(data.translate(None, _CONTROL_DELETE)) != len(data)


def classify(data: bytes | bytearray | memoryview) -> ContentKind:
    """Classify a probe prefix.

    Empty data carries no text signal, so it is classified as
    :attr:`ContentKind.BINARY`.
    """
    if not data or is_binary(data):
        return ContentKind.BINARY
    return ContentKind.TEXT
