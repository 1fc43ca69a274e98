# tests/test_binary.py
import pytest

from streamselector.binary import classify, is_binary
from streamselector.enums import ContentKind


def test_empty_input_is_not_binary():
    assert is_binary(b"") is False


def test_plain_ascii_is_not_binary():
    assert is_binary(b"Hello, world!") is False


def test_text_with_newlines_tabs_is_not_binary():
    assert is_binary(b"Hello\n\tworld\r\n") is False


def test_single_null_is_binary():
    assert is_binary(b"\x00") is True


@pytest.mark.parametrize("position", [0, 7, 19])
def test_control_byte_position_does_not_matter(position: int):
    data = bytearray(b"a" * 20)
    data[position] = 0x01
    assert is_binary(data) is True


@pytest.mark.parametrize(
    "byte",
    [*range(0x00, 0x09), 0x0B, 0x0C, *range(0x0E, 0x20), *range(0x7F, 0xA0)],
)
def test_iso_control_bytes_are_binary(byte: int):
    assert is_binary(b"text" + bytes([byte]) + b"text") is True


@pytest.mark.parametrize("byte", [0x09, 0x0A, 0x0D, 0x20, 0x7E, 0xA0, 0xFF])
def test_non_control_bytes_are_text(byte: int):
    assert is_binary(bytes([byte]) * 5) is False


def test_one_control_byte_in_large_text_is_binary():
    data = b"Normal text " * 100 + b"\x01"
    assert is_binary(data) is True


def test_jpeg_header_is_binary():
    assert is_binary(b"\xff\xd8\xff\xe0\x00\x10JFIF") is True


def test_latin1_text_is_not_binary():
    assert is_binary("Héllo wörld".encode("latin-1")) is False


def test_accepts_memoryview():
    assert is_binary(memoryview(b"abc\x00")) is True


def test_classify_text():
    assert classify(b"hello") is ContentKind.TEXT


def test_classify_binary():
    assert classify(b"\x00hello") is ContentKind.BINARY


def test_classify_empty_defaults_to_binary():
    assert classify(b"") is ContentKind.BINARY
