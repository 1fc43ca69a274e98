"""Route a byte stream to a binary or a text sink based on its first bytes."""

from __future__ import annotations

from streamselector._utils import DEFAULT_PROBE_SIZE
from streamselector.binary import classify, is_binary
from streamselector.enums import ContentKind
from streamselector.selector import OutputStreamSelector, Sink
from streamselector.wrapper import WrapperStream, unwrap

__version__ = "1.0.0"
__all__ = [
    "DEFAULT_PROBE_SIZE",
    "ContentKind",
    "OutputStreamSelector",
    "Sink",
    "WrapperStream",
    "classify",
    "is_binary",
    "unwrap",
]
