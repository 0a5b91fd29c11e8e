"""Japanese encoding detection backed by chardet.

chardet reports codec labels (``EUC-JP``, ``SHIFT_JIS``, ``CP932``,
``ISO-2022-JP`` ...); they are folded into :class:`JapaneseEncoding` so the
truncator only ever sees the short tags.
"""

from __future__ import annotations

import logging

import chardet

from jtruncate.enums import JapaneseEncoding

logger = logging.getLogger(__name__)


def _chardet_result(data: bytes | bytearray) -> dict[str, str | float | None]:
    data = data if isinstance(data, bytes) else bytes(data)
    result = chardet.detect(data, should_rename_legacy=False)
    logger.debug(
        "chardet: %s with confidence %s", result["encoding"], result["confidence"]
    )
    return result


def detect_encoding(data: bytes | bytearray) -> JapaneseEncoding:
    """Detect which Japanese encoding *data* uses.

    :param data: The raw byte data to examine.
    :returns: A :class:`JapaneseEncoding`; anything chardet does not report as
        ASCII, EUC-JP, Shift-JIS or ISO-2022-JP is :attr:`JapaneseEncoding.UNKNOWN`.
    """
    return JapaneseEncoding.from_name(_chardet_result(data)["encoding"])


def detect(data: bytes | bytearray) -> dict[str, str | float | None]:
    """Detect the encoding of *data* and describe it as a dict.

    :returns: A dict with ``'encoding'`` (the short tag), ``'codec'`` (a
        Python codec name, or ``None``) and ``'confidence'`` (chardet's score)
        keys.
    """
    result = _chardet_result(data)
    encoding = JapaneseEncoding.from_name(result["encoding"])
    return {
        "encoding": encoding.value,
        "codec": encoding.codec,
        "confidence": result["confidence"],
    }
