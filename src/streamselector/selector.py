"""OutputStreamSelector — pick a binary or text sink from the first bytes written."""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Any, Protocol

from streamselector._utils import DEFAULT_PROBE_SIZE, _OneShot, _validate_probe_size
from streamselector.binary import classify
from streamselector.enums import ContentKind

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from types import TracebackType

logger = logging.getLogger(__name__)


class Sink(Protocol):
    """The subset of a binary file object the selector delegates to."""

    def write(self, data: bytes, /) -> Any: ...

    def flush(self) -> Any: ...

    def close(self) -> Any: ...


@dataclasses.dataclass(slots=True)
class _Undecided:
    """Probing: leading bytes are held until the buffer fills or the stream ends."""

    capacity: int
    buffer: bytearray = dataclasses.field(default_factory=bytearray)
    flush_pending: bool = False

    @property
    def remaining(self) -> int:
        return self.capacity - len(self.buffer)


@dataclasses.dataclass(frozen=True, slots=True)
class _Decided:
    """A sink has been chosen and the probed bytes replayed into it."""

    sink: Sink
    kind: ContentKind


class OutputStreamSelector:
    """Write-only stream that commits to one of two sinks based on its content.

    The first *probe_size* bytes are buffered.  Once the buffer is full, or
    the selector is closed before that, the buffered prefix is classified:
    any ISO control byte other than tab, LF or CR selects the binary sink,
    otherwise the text sink is selected.  A stream closed without any data
    selects the binary sink.

    The chosen supplier is invoked exactly once; the other is never invoked.
    The buffered prefix is then replayed into the sink and every later
    write, flush and close is delegated to it.  The selector owns the chosen
    sink and closes it on :meth:`close`.

    Not thread-safe: a single caller is expected to write sequentially.
    """

    def __init__(
        self,
        binary_supplier: Callable[[], Sink],
        text_supplier: Callable[[], Sink],
        *,
        probe_size: int = DEFAULT_PROBE_SIZE,
    ) -> None:
        """Initialize the selector.

        :param binary_supplier: Zero-argument callable returning the sink for
            binary content.  Called at most once.
        :param text_supplier: Zero-argument callable returning the sink for
            text content.  Called at most once.
        :param probe_size: Number of leading bytes examined before a sink is
            chosen.
        :raises TypeError: If a supplier is not callable.
        :raises ValueError: If *probe_size* is not a positive integer.
        """
        _validate_probe_size(probe_size)
        self._suppliers = {
            ContentKind.BINARY: _OneShot(binary_supplier, "binary"),
            ContentKind.TEXT: _OneShot(text_supplier, "text"),
        }
        self._probe_size = probe_size
        self._state: _Undecided | _Decided = _Undecided(probe_size)
        self._closed = False

    def __repr__(self) -> str:
        if self._closed:
            status = "closed"
        elif isinstance(self._state, _Decided):
            status = self._state.kind.value
        else:
            status = "undecided"
        return f"<{type(self).__name__} probe_size={self._probe_size} {status}>"

    def _ensure_open(self) -> None:
        if self._closed:
            msg = "I/O operation on closed stream"
            raise ValueError(msg)

    def write(
        self,
        data: bytes | bytearray | memoryview,
        offset: int = 0,
        length: int | None = None,
    ) -> int:
        """Write *length* bytes of *data* starting at *offset*.

        :param data: A bytes-like object.
        :param offset: Index of the first byte to write.
        :param length: Number of bytes to write.  Defaults to everything
            from *offset* to the end of *data*.
        :returns: The number of bytes written.
        :raises ValueError: If the stream is closed, *length* is negative or
            the range falls outside *data*.
        """
        self._ensure_open()
        view = memoryview(data).cast("B")
        if offset < 0 or offset > len(view):
            msg = f"Offset out of range: {offset} for {len(view)} bytes"
            raise ValueError(msg)
        if length is None:
            length = len(view) - offset
        if length < 0:
            msg = f"Length cannot be negative. Got: {length}"
            raise ValueError(msg)
        if offset + length > len(view):
            msg = f"Range {offset}:{offset + length} out of bounds ({len(view)} bytes)"
            raise ValueError(msg)
        if length == 0:
            return 0
        self._write(view[offset : offset + length])
        return length

    def _write(self, chunk: memoryview) -> None:
        state = self._state
        if isinstance(state, _Decided):
            state.sink.write(chunk.tobytes())
            return
        to_copy = min(state.remaining, len(chunk))
        if to_copy == 0:
            msg = "No more room to buffer header, should have chosen stream by now"
            raise RuntimeError(msg)
        state.buffer += chunk[:to_copy]
        if state.remaining:
            return
        self._choose_stream(state)
        if to_copy < len(chunk):
            self._write(chunk[to_copy:])

    def _choose_stream(self, state: _Undecided) -> _Decided:
        head = bytes(state.buffer)
        kind = classify(head)
        sink = self._suppliers[kind]()
        if sink is None:
            msg = f"No stream returned by {kind.value} supplier"
            raise TypeError(msg)
        decided = _Decided(sink=sink, kind=kind)
        self._state = decided
        logger.debug(
            "Selected %s sink after probing %d bytes", kind.value, len(head)
        )
        if head:
            sink.write(head)
        if state.flush_pending:
            sink.flush()
        return decided

    def writelines(self, lines: Iterable[bytes | bytearray | memoryview]) -> None:
        """Write each chunk of *lines* in order."""
        for line in lines:
            self.write(line)

    def flush(self) -> None:
        """Flush the chosen sink, or defer the flush until one is chosen.

        :raises ValueError: If the stream is closed.
        """
        self._ensure_open()
        state = self._state
        if isinstance(state, _Decided):
            state.sink.flush()
        else:
            state.flush_pending = True

    def close(self) -> None:
        """Choose a sink if still probing, then close it.

        The selector is marked closed even when closing the sink fails; the
        error is still raised.

        :raises ValueError: If the stream is already closed.
        """
        self._ensure_open()
        try:
            state = self._state
            if isinstance(state, _Undecided):
                state = self._choose_stream(state)
            state.sink.close()
        finally:
            self._closed = True

    @property
    def closed(self) -> bool:
        """Whether :meth:`close` has been called."""
        return self._closed

    @property
    def decided(self) -> bool:
        """Whether a sink has been chosen."""
        return isinstance(self._state, _Decided)

    @property
    def kind(self) -> ContentKind | None:
        """The content kind the sink was chosen for, or ``None`` while probing."""
        if isinstance(self._state, _Decided):
            return self._state.kind
        return None

    @property
    def underlying_stream(self) -> Sink | None:
        """The chosen sink, or ``None`` while probing."""
        if isinstance(self._state, _Decided):
            return self._state.sink
        return None

    @property
    def probe_size(self) -> int:
        """Number of leading bytes examined before a sink is chosen."""
        return self._probe_size

    def writable(self) -> bool:
        self._ensure_open()
        return True

    def readable(self) -> bool:
        return False

    def seekable(self) -> bool:
        return False

    def __enter__(self) -> OutputStreamSelector:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self._closed:
            self.close()
