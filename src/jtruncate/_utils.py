"""Internal shared utilities for jtruncate."""

from __future__ import annotations

#: Maximum number of bytes the CLI hands to detection for ``--detect``.
DEFAULT_MAX_BYTES: int = 200_000


def _validate_length(length: object) -> int:
    """Return *length* unchanged, or raise ValueError if it is not a non-negative int."""
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        msg = "length must be a non-negative integer"
        raise ValueError(msg)
    return length


def _as_bytes(text: object) -> bytes:
    """Return *text* as ``bytes``, or raise TypeError if it is not bytes-like."""
    if isinstance(text, bytes):
        return text
    if isinstance(text, (bytearray, memoryview)):
        return bytes(text)
    msg = f"text must be bytes-like, not {type(text).__name__}"
    raise TypeError(msg)
