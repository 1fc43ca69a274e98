"""Internal shared utilities for streamselector."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

#: Default number of leading bytes examined before choosing a sink.
DEFAULT_PROBE_SIZE: int = 20

#: Read size used when copying a source stream through a selector.
DEFAULT_CHUNK_SIZE: int = 65_536


def _validate_probe_size(probe_size: int) -> None:
    """Raise ValueError if *probe_size* is not a positive integer."""
    if (
        isinstance(probe_size, bool)
        or not isinstance(probe_size, int)
        or probe_size < 1
    ):
        msg = "probe_size must be a positive integer"
        raise ValueError(msg)


class _OneShot(Generic[T]):
    """Wrap a zero-argument supplier so it can be called at most once."""

    __slots__ = ("_called", "_name", "_supplier")

    def __init__(self, supplier: Callable[[], T], name: str) -> None:
        if not callable(supplier):
            msg = f"{name} supplier must be callable, got {type(supplier).__name__}"
            raise TypeError(msg)
        self._supplier = supplier
        self._name = name
        self._called = False

    def __call__(self) -> T:
        if self._called:
            msg = f"{self._name} supplier already invoked"
            raise RuntimeError(msg)
        self._called = True
        return self._supplier()
