"""Shared test fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest


class RecordingSink:
    """In-memory sink that records every call made to it."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.writes: list[bytes] = []
        self.closed = False

    def write(self, data: bytes) -> int:
        if self.closed:
            msg = "write to closed sink"
            raise ValueError(msg)
        self.calls.append("write")
        self.writes.append(bytes(data))
        return len(data)

    def flush(self) -> None:
        self.calls.append("flush")

    def close(self) -> None:
        self.calls.append("close")
        self.closed = True

    @property
    def received(self) -> bytes:
        return b"".join(self.writes)


@dataclass
class Suppliers:
    """A pair of counting suppliers handing out :class:`RecordingSink` objects."""

    binary: RecordingSink = field(default_factory=RecordingSink)
    text: RecordingSink = field(default_factory=RecordingSink)
    binary_calls: int = 0
    text_calls: int = 0

    def get_binary(self) -> RecordingSink:
        self.binary_calls += 1
        return self.binary

    def get_text(self) -> RecordingSink:
        self.text_calls += 1
        return self.text


@pytest.fixture
def suppliers() -> Suppliers:
    return Suppliers()
