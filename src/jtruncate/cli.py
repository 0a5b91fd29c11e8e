"""Command-line interface for jtruncate."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import jtruncate
from jtruncate._utils import DEFAULT_MAX_BYTES
from jtruncate.enums import JapaneseEncoding

_ENCODING_CHOICES = ["auto"] + [e.value for e in JapaneseEncoding if e.is_japanese]


def _length(value: str) -> int:
    try:
        length = int(value)
    except ValueError:
        length = -1
    if length < 0:
        msg = f"invalid length {value!r}: must be a non-negative integer"
        raise argparse.ArgumentTypeError(msg)
    return length


def _process(data: bytes, name: str, args: argparse.Namespace) -> None:
    if args.detect:
        detected = jtruncate.detect_encoding(data[:DEFAULT_MAX_BYTES])
        print(f"{name}: {detected.value}")
        return
    encoding = None if args.encoding == "auto" else args.encoding
    out = jtruncate.truncate(data, args.length, encoding=encoding)
    sys.stdout.buffer.write(out)
    sys.stdout.buffer.flush()


def main(argv: list[str] | None = None) -> None:
    """Run the ``jtruncate`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        description="Truncate Japanese-encoded text without breaking characters."
    )
    parser.add_argument("files", nargs="*", help="Files to truncate")
    parser.add_argument(
        "-l", "--length", type=_length, help="Maximum output length in bytes"
    )
    parser.add_argument(
        "-e",
        "--encoding",
        default="auto",
        choices=_ENCODING_CHOICES,
        help="Treat input as this encoding instead of detecting it",
    )
    parser.add_argument(
        "--detect", action="store_true", help="Only print the detected encoding"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"jtruncate {jtruncate.__version__}"
    )

    args = parser.parse_args(argv)
    if args.length is None and not args.detect:
        parser.error("the following arguments are required: -l/--length")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    failed = False
    if args.files:
        for filepath in args.files:
            try:
                with Path(filepath).open("rb") as f:
                    data = f.read()
            except OSError as e:
                print(f"jtruncate: {filepath}: {e}", file=sys.stderr)
                failed = True
                continue
            _process(data, filepath, args)
    else:
        _process(sys.stdin.buffer.read(), "stdin", args)

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
