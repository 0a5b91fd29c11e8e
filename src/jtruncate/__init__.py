"""Truncate EUC-JP, Shift-JIS and ISO-2022-JP text without breaking characters."""

from __future__ import annotations

from jtruncate.detector import detect, detect_encoding
from jtruncate.enums import JapaneseEncoding
from jtruncate.truncator import jtruncate, truncate

__version__ = "0.1.0"
__all__ = [
    "JapaneseEncoding",
    "detect",
    "detect_encoding",
    "jtruncate",
    "truncate",
]
