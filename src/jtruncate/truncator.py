"""Byte-length truncation that respects Japanese character boundaries."""

from __future__ import annotations

import logging
from collections.abc import Callable

from jtruncate._utils import _as_bytes, _validate_length
from jtruncate.detector import detect_encoding
from jtruncate.enums import JapaneseEncoding
from jtruncate.patterns import (
    JIS_HEADROOM,
    SINGLE_BYTE_ESCAPE,
    ends_in_two_byte_mode,
    match_tail,
)

logger = logging.getLogger(__name__)

Detector = Callable[[bytes], JapaneseEncoding | str | None]


def _resolve_encoding(
    data: bytes,
    encoding: JapaneseEncoding | str | None,
    detector: Detector | None,
) -> JapaneseEncoding:
    if encoding is not None:
        return JapaneseEncoding.from_name(encoding)
    detect = detector if detector is not None else detect_encoding
    # The detector gets its own copy; truncation always works on *data*.
    return JapaneseEncoding.from_name(detect(bytes(data)))


def truncate(
    text: bytes | bytearray | memoryview,
    length: int | None = None,
    *,
    encoding: JapaneseEncoding | str | None = None,
    detector: Detector | None = None,
) -> bytes:
    """Truncate *text* to at most *length* bytes without breaking characters.

    EUC-JP, Shift-JIS and ISO-2022-JP text is shortened by removing whole
    characters from the end.  ISO-2022-JP output that would end in two-byte
    mode gets ``ESC ( B`` appended, for which three bytes are reserved up
    front.  Anything else, or text whose tail matches no known character
    shape, is cut at byte offset *length*.

    :param text: The encoded bytes to truncate.
    :param length: Maximum length of the result in bytes.
    :param encoding: Skip detection and treat *text* as this encoding.  Accepts
        a :class:`JapaneseEncoding`, a short tag or a codec name.
    :param detector: Callable used to detect the encoding when *encoding* is
        not given.  Defaults to :func:`jtruncate.detector.detect_encoding`.
    :returns: The truncated bytes.
    :raises ValueError: If *length* is missing, negative or not an integer.
    :raises TypeError: If *text* is not bytes-like.
    """
    data = _as_bytes(text)
    length = _validate_length(length)
    if length == 0:
        return b""
    if len(data) <= length:
        return data

    resolved = _resolve_encoding(data, encoding, detector)
    if not resolved.is_japanese:
        logger.debug("%s input, cutting at byte %d", resolved.value, length)
        return data[:length]

    target = length
    if resolved is JapaneseEncoding.JIS:
        target = max(length - JIS_HEADROOM, 0)

    end = len(data)
    while end > target:
        found = match_tail(data, resolved, end)
        if found is None:
            logger.debug(
                "no %s character at offset %d, cutting at byte %d",
                resolved.value,
                end,
                length,
            )
            return data[:length]
        end -= found.width

    buf = data[:end]
    if resolved is JapaneseEncoding.JIS and buf and ends_in_two_byte_mode(buf):
        buf += SINGLE_BYTE_ESCAPE
    return buf


jtruncate = truncate
