"""Enumerations for jtruncate."""

from __future__ import annotations

import enum


class JapaneseEncoding(enum.Enum):
    """Encodings the detector can report.

    Values are the short tags used throughout the package (``"euc"``,
    ``"sjis"``, ``"jis"`` ...).  Only :attr:`EUC_JP`, :attr:`SHIFT_JIS` and
    :attr:`JIS` get character-aware truncation.
    """

    ASCII = "ascii"
    EUC_JP = "euc"
    SHIFT_JIS = "sjis"
    JIS = "jis"
    UNKNOWN = "unknown"

    @property
    def is_japanese(self) -> bool:
        return self in _JAPANESE

    @property
    def codec(self) -> str | None:
        """Python codec name for this encoding, or ``None``."""
        return _CODECS.get(self)

    @classmethod
    def from_name(cls, name: JapaneseEncoding | str | None) -> JapaneseEncoding:
        """Normalise a tag, codec name or alias to a member.

        Anything unrecognised (including ``None``) becomes :attr:`UNKNOWN`.
        """
        if isinstance(name, cls):
            return name
        if not name:
            return cls.UNKNOWN
        key = name.strip().lower().replace("_", "-")
        return _ALIASES.get(key, cls.UNKNOWN)


_JAPANESE = frozenset(
    {JapaneseEncoding.EUC_JP, JapaneseEncoding.SHIFT_JIS, JapaneseEncoding.JIS}
)

_CODECS: dict[JapaneseEncoding, str] = {
    JapaneseEncoding.ASCII: "ascii",
    JapaneseEncoding.EUC_JP: "euc_jp",
    JapaneseEncoding.SHIFT_JIS: "shift_jis",
    JapaneseEncoding.JIS: "iso2022_jp",
}

# Keys are lower-case with "_" folded to "-".
_ALIASES: dict[str, JapaneseEncoding] = {
    **{member.value: member for member in JapaneseEncoding},
    "us-ascii": JapaneseEncoding.ASCII,
    "euc-jp": JapaneseEncoding.EUC_JP,
    "eucjp": JapaneseEncoding.EUC_JP,
    "ujis": JapaneseEncoding.EUC_JP,
    "euc-jis-2004": JapaneseEncoding.EUC_JP,
    "euc-jisx0213": JapaneseEncoding.EUC_JP,
    "shift-jis": JapaneseEncoding.SHIFT_JIS,
    "shiftjis": JapaneseEncoding.SHIFT_JIS,
    "sjis": JapaneseEncoding.SHIFT_JIS,
    "s-jis": JapaneseEncoding.SHIFT_JIS,
    "cp932": JapaneseEncoding.SHIFT_JIS,
    "ms932": JapaneseEncoding.SHIFT_JIS,
    "windows-31j": JapaneseEncoding.SHIFT_JIS,
    "shift-jis-2004": JapaneseEncoding.SHIFT_JIS,
    "shift-jisx0213": JapaneseEncoding.SHIFT_JIS,
    "iso-2022-jp": JapaneseEncoding.JIS,
    "iso2022-jp": JapaneseEncoding.JIS,
    "csiso2022jp": JapaneseEncoding.JIS,
    "iso-2022-jp-1": JapaneseEncoding.JIS,
    "iso-2022-jp-2": JapaneseEncoding.JIS,
    "iso-2022-jp-ext": JapaneseEncoding.JIS,
}
