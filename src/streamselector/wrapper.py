"""Introspection of streams that delegate to another stream."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class WrapperStream(Protocol):
    """A stream that forwards its output to an underlying stream."""

    @property
    def underlying_stream(self) -> Any: ...


def unwrap(stream: Any) -> Any:
    """Return the innermost stream behind a chain of wrappers.

    Follows :attr:`WrapperStream.underlying_stream` until it reaches a stream
    that is not a wrapper.  A wrapper that has no underlying stream yet (for
    example an undecided :class:`~streamselector.OutputStreamSelector`) is
    returned as is.
    """
    seen: set[int] = set()
    while isinstance(stream, WrapperStream):
        if id(stream) in seen:
            msg = "Cycle detected while unwrapping streams"
            raise ValueError(msg)
        seen.add(id(stream))
        inner = stream.underlying_stream
        if inner is None:
            break
        stream = inner
    return stream
