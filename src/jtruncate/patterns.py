"""Character-boundary pattern tables for EUC-JP, Shift-JIS and ISO-2022-JP.

Each table lists the byte shapes that can form one complete character (or,
for ISO-2022-JP, one escape sequence) at the *end* of a buffer.  Truncation
removes whole units from the tail, so the tables only ever need to answer the
question "what is the last unit of this buffer, and how wide is it?".

All patterns are compiled once at import time and never mutated, so the
module is safe to share between threads.
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Mapping
from typing import NamedTuple

from jtruncate.enums import JapaneseEncoding

#: Escape sequence that returns ISO-2022-JP text to ASCII (single-byte) mode.
SINGLE_BYTE_ESCAPE: bytes = b"\x1b(B"

#: Bytes reserved at the end of ISO-2022-JP output for :data:`SINGLE_BYTE_ESCAPE`.
JIS_HEADROOM: int = len(SINGLE_BYTE_ESCAPE)


@dataclasses.dataclass(frozen=True, slots=True)
class CharacterPattern:
    """One byte shape that can end a buffer.

    :param name: Short identifier, unique within its encoding's table.
    :param pattern: Bytes regular expression for a single unit.
    :param max_width: Widest possible match in bytes, or ``None`` when the
        unit has no fixed upper bound.
    :param opener: For unbounded units, the byte every match starts with and
        that cannot recur inside the unit.
    :param closer: For unbounded units, the byte every match ends with.
    """

    name: str
    pattern: bytes
    max_width: int | None
    opener: bytes = b""
    closer: bytes = b""
    _tail: re.Pattern[bytes] = dataclasses.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        tail = re.compile(b"(?:" + self.pattern + rb")\Z", re.DOTALL)
        object.__setattr__(self, "_tail", tail)

    def match_width(self, data: bytes, end: int | None = None) -> int | None:
        """Return the width of the longest match ending at offset *end* of *data*.

        *end* defaults to ``len(data)``.  The search starts *max_width* bytes
        before *end*, so the first hit is the leftmost start that still
        reaches *end*, i.e. the widest one.  Unbounded units start at the last
        *opener* before *end*.
        """
        if end is None:
            end = len(data)
        if self.max_width is not None:
            pos = max(end - self.max_width, 0)
        else:
            if self.closer and not data.endswith(self.closer, 0, end):
                return None
            pos = data.rfind(self.opener, 0, end) if self.opener else 0
            if pos == -1:
                return None
        match = self._tail.search(data, pos, end)
        if match is None:
            return None
        return match.end() - match.start()


class TailMatch(NamedTuple):
    """The unit found at the end of a buffer."""

    pattern: CharacterPattern
    width: int


EUC_JP_PATTERNS: tuple[CharacterPattern, ...] = (
    CharacterPattern("ascii_jis_roman", rb"[\x00-\x7f]", 1),
    CharacterPattern("jis_x_0208", rb"[\xa1-\xfe][\xa1-\xfe]", 2),
    CharacterPattern("half_width_katakana", rb"\x8e[\xa0-\xdf]", 2),
    CharacterPattern("jis_x_0212", rb"\x8f[\xa1-\xfe][\xa1-\xfe]", 3),
)

SHIFT_JIS_PATTERNS: tuple[CharacterPattern, ...] = (
    CharacterPattern("ascii_jis_roman", rb"[\x21-\x7e]", 1),
    CharacterPattern("half_width_katakana", rb"[\xa1-\xdf]", 1),
    CharacterPattern(
        "two_byte_char", rb"[\x81-\x9f\xe0-\xef][\x40-\x7e\x80-\xfc]", 2
    ),
)

# ESC $ @ (JIS C 6226-1978), ESC $ B (JIS X 0208-1983), ESC & @ ESC $ B
# (JIS X 0208-1990), ESC $ ( D (JIS X 0212-1990).
_TWO_BYTE_ESCAPE = rb"\x1b\$@|\x1b\$B|\x1b&@\x1b\$B|\x1b\$\(D"
# ESC ( J (JIS-Roman), ESC ( H, ESC ( B (ASCII), ESC ( I (JIS7 katakana).
_ONE_BYTE_ESCAPE = rb"\x1b\([JHBI]"

JIS_PATTERNS: tuple[CharacterPattern, ...] = (
    CharacterPattern("two_byte_escape", _TWO_BYTE_ESCAPE, 6),
    CharacterPattern("two_byte_char", rb"[\x21-\x7e][\x21-\x7e]", 2),
    CharacterPattern("one_byte_escape", _ONE_BYTE_ESCAPE, 3),
    # JIS7 half-width katakana and ASCII / JIS-Roman.
    CharacterPattern("one_byte_char", rb"[\x21-\x5f]|[\x21-\x7e]", 1),
    # JIS8 half-width katakana: a shifted run between SI and SO.
    CharacterPattern(
        "jis8_half_width_katakana",
        rb"\x0f[\xa1-\xdf]*\x0e",
        None,
        opener=b"\x0f",
        closer=b"\x0e",
    ),
)

CHARACTER_PATTERNS: Mapping[JapaneseEncoding, tuple[CharacterPattern, ...]] = {
    JapaneseEncoding.EUC_JP: EUC_JP_PATTERNS,
    JapaneseEncoding.SHIFT_JIS: SHIFT_JIS_PATTERNS,
    JapaneseEncoding.JIS: JIS_PATTERNS,
}

_COMBINED: dict[JapaneseEncoding, re.Pattern[bytes]] = {
    encoding: re.compile(
        b"(?:" + b"|".join(p.pattern for p in patterns) + rb")\Z", re.DOTALL
    )
    for encoding, patterns in CHARACTER_PATTERNS.items()
}

_TWO_BYTE_ESCAPE_RE = re.compile(_TWO_BYTE_ESCAPE)
_ONE_BYTE_ESCAPE_RE = re.compile(_ONE_BYTE_ESCAPE)


def _patterns_for(encoding: JapaneseEncoding) -> tuple[CharacterPattern, ...]:
    try:
        return CHARACTER_PATTERNS[encoding]
    except KeyError:
        msg = f"no character patterns for encoding {encoding.value!r}"
        raise ValueError(msg) from None


def combined_pattern(encoding: JapaneseEncoding) -> re.Pattern[bytes]:
    """Return the alternation of *encoding*'s rules, anchored at the end.

    :raises ValueError: If *encoding* has no pattern table.
    """
    try:
        return _COMBINED[encoding]
    except KeyError:
        msg = f"no character patterns for encoding {encoding.value!r}"
        raise ValueError(msg) from None


def match_tail(
    data: bytes, encoding: JapaneseEncoding, end: int | None = None
) -> TailMatch | None:
    """Find the widest complete unit ending at offset *end* of *data*.

    Every rule for *encoding* is tried at the tail and the one covering the
    longest span wins.  Rules of equal width cover identical bytes, so the
    tie goes to table order without affecting the result.

    :param data: Buffer to inspect.
    :param encoding: One of the Japanese encodings.
    :param end: Offset the unit must end at; defaults to ``len(data)``.
    :returns: The winning rule and its width, or ``None`` if no rule matches.
    :raises ValueError: If *encoding* has no pattern table.
    """
    best: TailMatch | None = None
    for pattern in _patterns_for(encoding):
        width = pattern.match_width(data, end)
        if width is not None and (best is None or width > best.width):
            best = TailMatch(pattern, width)
    return best


def ends_in_two_byte_mode(data: bytes) -> bool:
    """Return True if ISO-2022-JP *data* is left in two-byte shift state.

    The state is set by the last recognised escape sequence; stray ESC bytes
    are skipped and a buffer without any escape is in single-byte mode.
    """
    pos = data.rfind(b"\x1b")
    while pos != -1:
        if _TWO_BYTE_ESCAPE_RE.match(data, pos):
            return True
        if _ONE_BYTE_ESCAPE_RE.match(data, pos):
            return False
        pos = data.rfind(b"\x1b", 0, pos)
    return False
