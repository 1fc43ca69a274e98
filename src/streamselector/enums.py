"""Enumerations for streamselector."""

import enum


class ContentKind(enum.Enum):
    """Classification of the leading bytes of a stream."""

    BINARY = "binary"
    TEXT = "text"
