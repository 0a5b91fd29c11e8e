from __future__ import annotations

import pytest

from jtruncate.enums import JapaneseEncoding
from jtruncate.truncator import truncate

_SENTENCE = "これは日本語のテキストです"
_EUC = "日本語文".encode("euc_jp")
_SJIS = "日本語".encode("shift_jis")
_JIS_NO_SHIFT_OUT = b"\x1b$B" + b"F|K\\8l"


def test_ascii_shorter_than_length_is_unchanged():
    assert truncate(b"hello world", 20) == b"hello world"


def test_ascii_is_cut_at_byte_offset():
    assert truncate(b"hello world", 5) == b"hello"


def test_zero_length_returns_empty():
    assert truncate(_EUC, 0) == b""
    assert truncate(b"", 0) == b""


@pytest.mark.parametrize("length", [-1, None, True, 2.5, "5"])
def test_invalid_length_raises(length: object) -> None:
    with pytest.raises(ValueError, match="non-negative integer"):
        truncate(b"hello", length)  # type: ignore[arg-type]


def test_str_text_raises_type_error():
    with pytest.raises(TypeError):
        truncate("hello", 3)  # type: ignore[arg-type]


def test_bytearray_input_returns_bytes():
    result = truncate(bytearray(b"hello world"), 5)
    assert result == b"hello"
    assert isinstance(result, bytes)


def test_exact_length_is_unchanged():
    assert truncate(_SJIS, len(_SJIS)) == _SJIS


def test_euc_drops_partial_character():
    assert len(_EUC) == 8
    result = truncate(_EUC, 5)
    assert result == "日本".encode("euc_jp")


def test_euc_mixed_with_ascii():
    data = "abc日本".encode("euc_jp")
    assert truncate(data, 4, encoding="euc") == b"abc"


def test_euc_half_width_katakana():
    data = "ｱｲｳ".encode("euc_jp")
    assert truncate(data, 3, encoding="euc") == "ｱ".encode("euc_jp")


def test_euc_jis_x_0212_character_is_removed_whole():
    data = "日本".encode("euc_jp") + b"\x8f\xb0\xa1"
    assert truncate(data, 6, encoding=JapaneseEncoding.EUC_JP) == data[:4]


def test_sjis_drops_partial_character():
    assert truncate(_SJIS, 5) == "日本".encode("shift_jis")


def test_sjis_mixed_with_ascii():
    data = "テストabc".encode("shift_jis")
    assert truncate(data, 5, encoding="sjis") == "テス".encode("shift_jis")


def test_sjis_unmatched_tail_falls_back_to_byte_cut():
    data = _SJIS + b"   "
    assert truncate(data, 7, encoding="sjis") == data[:7]


def test_jis_without_shift_out_gets_single_byte_escape():
    result = truncate(_JIS_NO_SHIFT_OUT, 7)
    assert len(result) <= 7
    assert result.endswith(b"\x1b(B")
    assert result == b"\x1b$B\x1b(B"


def test_jis_keeps_characters_within_headroom():
    result = truncate(_JIS_NO_SHIFT_OUT, 8)
    assert result == b"\x1b$BF|\x1b(B"
    assert result.decode("iso2022_jp") == "日"


def test_jis_encoded_text():
    data = "日本語".encode("iso2022_jp")
    result = truncate(data, 10)
    assert result == b"\x1b$BF|K\\\x1b(B"
    assert result.decode("iso2022_jp") == "日本"


@pytest.mark.parametrize("length", [1, 2, 3, 4, 5])
def test_jis_too_short_for_escape_pair_is_empty(length: int) -> None:
    assert truncate("日本語".encode("iso2022_jp"), length) == b""


def test_jis_escape_alone_is_closed():
    assert truncate("日本語".encode("iso2022_jp"), 6) == b"\x1b$B\x1b(B"


@pytest.mark.parametrize("codec", ["euc_jp", "shift_jis"])
def test_multibyte_result_always_decodes(codec: str) -> None:
    data = _SENTENCE.encode(codec)
    for length in range(len(data) + 1):
        result = truncate(data, length)
        assert len(result) <= length
        assert _SENTENCE.startswith(result.decode(codec))


def test_jis_result_always_decodes_and_fits():
    data = _SENTENCE.encode("iso2022_jp")
    for length in range(len(data) + 1):
        result = truncate(data, length)
        assert len(result) <= length
        assert _SENTENCE.startswith(result.decode("iso2022_jp"))
        if result:
            assert result.endswith(b"\x1b(B")


@pytest.mark.parametrize("codec", ["euc_jp", "shift_jis", "iso2022_jp"])
def test_truncation_is_idempotent(codec: str) -> None:
    data = _SENTENCE.encode(codec)
    for length in range(0, len(data), 3):
        once = truncate(data, length)
        assert truncate(once, length) == once


def test_binary_garbage_is_cut_at_byte_offset():
    data = b"\x00\x01\x02\x03\x04\x05"
    assert truncate(data, 3) == b"\x00\x01\x02"


def test_unmatched_tail_uses_original_length_for_jis():
    data = b"\x1b$BF|K\\8l\x80\x80"
    assert truncate(data, 8, encoding="jis") == data[:8]


def test_explicit_encoding_skips_detector():
    def detector(data: bytes) -> str:
        raise AssertionError("detector should not be called")

    assert truncate(_EUC, 5, encoding="euc-jp", detector=detector) == _EUC[:4]


def test_custom_detector_codec_name():
    assert truncate(_EUC, 5, detector=lambda data: "EUC-JP") == _EUC[:4]


def test_custom_detector_unknown_result_cuts_bytes():
    assert truncate(_EUC, 5, detector=lambda data: None) == _EUC[:5]


def test_detector_receives_bytes_copy():
    seen: list[object] = []

    def detector(data: bytes) -> JapaneseEncoding:
        seen.append(data)
        return JapaneseEncoding.EUC_JP

    source = bytearray(_EUC)
    assert truncate(source, 5, detector=detector) == _EUC[:4]
    assert isinstance(seen[0], bytes)
    assert source == bytearray(_EUC)


def test_detector_not_called_when_no_truncation_needed():
    def detector(data: bytes) -> str:
        raise AssertionError("detector should not be called")

    assert truncate(_EUC, 8, detector=detector) == _EUC


def test_missing_length_is_invalid():
    with pytest.raises(ValueError, match="non-negative integer"):
        truncate(b"hello")


def test_jis8_katakana_run_is_removed_whole():
    data = b"ab\x0f\xb1\xb2\xb3\x0e"
    assert truncate(data, 6, encoding="jis") == b"ab"


def test_jis8_katakana_run_then_escape_and_fixup():
    data = b"\x1b$BF|\x1b(B\x0f\xb1\xb2\x0e"
    assert truncate(data, 10, encoding="jis") == b"\x1b$BF|\x1b(B"


def test_jis8_katakana_runs_are_trimmed_one_at_a_time():
    data = b"\x1b(B" + b"\x0f\xb1\x0e" * 30_000
    assert truncate(data, 10, encoding="jis") == b"\x1b(B\x0f\xb1\x0e"


@pytest.mark.parametrize("codec", ["euc_jp", "shift_jis"])
def test_large_multibyte_input(codec: str) -> None:
    data = ("日" * 50_000).encode(codec)
    assert truncate(data, 11, encoding=codec) == ("日" * 5).encode(codec)


def test_large_jis_input():
    data = b"\x1b$B" + b"F|" * 50_000 + b"\x1b(B"
    assert truncate(data, 10, encoding="jis") == b"\x1b$BF|F|\x1b(B"
