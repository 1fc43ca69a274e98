"""Command-line interface for streamselector."""

from __future__ import annotations

import argparse
import contextlib
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import streamselector
from streamselector._utils import DEFAULT_CHUNK_SIZE, DEFAULT_PROBE_SIZE
from streamselector.selector import OutputStreamSelector

if TYPE_CHECKING:
    from contextlib import AbstractContextManager
    from typing import BinaryIO


def _open_source(path: str | None) -> AbstractContextManager[BinaryIO]:
    if path:
        return Path(path).open("rb")
    return contextlib.nullcontext(sys.stdin.buffer)


def _copy(source: BinaryIO, selector: OutputStreamSelector) -> None:
    while chunk := source.read(DEFAULT_CHUNK_SIZE):
        selector.write(chunk)


def main(argv: list[str] | None = None) -> None:
    """Run the ``streamselect`` command-line tool.

    Copies a file (or stdin) to ``--binary-out`` or ``--text-out`` depending
    on how its first bytes classify.  Only the chosen output is created.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Copy input to a binary or text destination based on its content."
    )
    parser.add_argument("file", nargs="?", help="File to copy (default: stdin)")
    parser.add_argument(
        "-b", "--binary-out", required=True, help="Destination for binary content"
    )
    parser.add_argument(
        "-t", "--text-out", required=True, help="Destination for text content"
    )
    parser.add_argument(
        "-p",
        "--probe-size",
        type=int,
        default=DEFAULT_PROBE_SIZE,
        help=f"Number of leading bytes to examine (default: {DEFAULT_PROBE_SIZE})",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Do not report the decision"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"streamselect {streamselector.__version__}",
    )

    args = parser.parse_args(argv)
    if args.probe_size < 1:
        parser.error("--probe-size must be a positive integer")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    binary_out = Path(args.binary_out)
    text_out = Path(args.text_out)
    selector = OutputStreamSelector(
        lambda: binary_out.open("wb"),
        lambda: text_out.open("wb"),
        probe_size=args.probe_size,
    )

    name = args.file or "stdin"
    try:
        with _open_source(args.file) as source, selector:
            _copy(source, selector)
    except OSError as e:
        print(f"streamselect: {name}: {e}", file=sys.stderr)
        sys.exit(1)

    if not args.quiet:
        kind = selector.kind
        destination = (
            binary_out if kind is streamselector.ContentKind.BINARY else text_out
        )
        print(f"{name}: {kind.value} -> {destination}")


if __name__ == "__main__":
    main()
