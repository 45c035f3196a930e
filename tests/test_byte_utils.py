import hypothesis.strategies as st
import pytest
from hypothesis import given

from _bytescan.byte_utils import (
    debug_utf8,
    decode_lossy,
    decode_strict,
    into_cursor,
    is_hex,
    print_utf8,
    strip_nul,
    to_ascii_lower,
    to_ascii_lower_inplace,
    trim_trailing,
    trim_trailing_crlf,
)
from _bytescan.constants import CAPITALS, CRLF, HEX_DIGITS
from _bytescan.cursor import Cursor
from _bytescan.errors import InvalidEncodingError

from .generators.byte_contents import hex_bytes, non_hex_bytes


@given(st.binary())
def test_strip_nul_keeps_order(data):
    stripped = strip_nul(data)

    assert b"\0" not in stripped
    assert stripped == bytes(b for b in data if b != 0)


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"", b""),
        (b"\0\0", b""),
        (b"\0foo\0bar\0", b"foobar"),
        (bytearray(b"a\0b"), b"ab"),
        (memoryview(b"a\0b"), b"ab"),
        ([0x61, 0x00, 0x62], b"ab"),
    ],
)
def test_strip_nul(data, expected):
    assert strip_nul(data) == expected


@given(st.binary())
def test_is_hex_matches_alphabet(data):
    assert is_hex(data) == all(b in HEX_DIGITS for b in data)


@given(hex_bytes)
def test_is_hex_on_hex_digits(data):
    assert is_hex(data)


@given(hex_bytes, non_hex_bytes, hex_bytes)
def test_is_hex_rejects_single_non_hex(prefix, byte, suffix):
    assert not is_hex(prefix + bytes([byte]) + suffix)


def test_is_hex_empty():
    assert is_hex(b"")


def test_hex_alphabet_size():
    assert len(set(HEX_DIGITS)) == 22


@given(st.binary())
def test_to_ascii_lower_folds_capitals_only(data):
    folded = to_ascii_lower(data)

    assert len(folded) == len(data)
    for original, result in zip(data, folded):
        if original in CAPITALS:
            assert result == original + 32
        else:
            assert result == original


def test_to_ascii_lower_ignores_non_ascii():
    assert to_ascii_lower("ÅÉ Header-X".encode("utf-8")) == "ÅÉ header-x".encode(
        "utf-8"
    )


def test_to_ascii_lower_does_not_mutate():
    data = bytearray(b"ABC")

    assert to_ascii_lower(data) == b"abc"
    assert data == bytearray(b"ABC")


def test_to_ascii_lower_inplace():
    data = bytearray(b"Content-LENGTH: 12")

    result = to_ascii_lower_inplace(data)

    assert result is data
    assert data == bytearray(b"content-length: 12")


@pytest.mark.parametrize("data", [b"ABC", memoryview(b"ABC"), [65, 66]])
def test_to_ascii_lower_inplace_requires_writable(data):
    with pytest.raises(TypeError):
        to_ascii_lower_inplace(data)


@given(st.binary())
def test_trim_trailing_crlf_idempotent(data):
    once = trim_trailing_crlf(data)

    assert trim_trailing_crlf(once) == once
    assert not once.endswith(CRLF)
    assert data.startswith(once)


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"", b""),
        (b"\r\n", b""),
        (b"line\r\n", b"line"),
        (b"line\r\n\r\n\r\n", b"line"),
        (b"line\r", b"line\r"),
        (b"line\n", b"line\n"),
        (b"line\n\r", b"line\n\r"),
        (b"a\r\nb", b"a\r\nb"),
    ],
)
def test_trim_trailing_crlf(data, expected):
    assert trim_trailing_crlf(data) == expected


@pytest.mark.parametrize(
    "data, pattern, expected",
    [
        (b"ab--", b"-", b"ab"),
        (b"key: : ", b": ", b"key"),
        (b"path//", 0x2F, b"path"),
        (b"abc", b"", b"abc"),
        (b"abc", b"abcd", b"abc"),
        (b"abab", b"ab", b""),
        (b"aab", b"ab", b"a"),
    ],
)
def test_trim_trailing(data, pattern, expected):
    assert trim_trailing(data, pattern) == expected


@given(st.binary(), st.binary(min_size=1, max_size=3))
def test_trim_trailing_removes_every_repetition(data, pattern):
    trimmed = trim_trailing(data, pattern)

    assert not trimmed.endswith(pattern)
    assert data.startswith(trimmed)


def test_decode_strict():
    assert decode_strict("søk".encode("utf-8")) == "søk"


def test_decode_strict_invalid():
    with pytest.raises(InvalidEncodingError) as excinfo:
        decode_strict(b"ab\xffcd")

    assert excinfo.value.position == 2
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_invalid_encoding_is_value_error():
    with pytest.raises(ValueError):
        decode_strict(b"\xc3")


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"plain", "plain"),
        (b"ab\xffcd", "ab�cd"),
        (b"", ""),
        ("ø".encode("utf-8"), "ø"),
    ],
)
def test_decode_lossy(data, expected):
    assert decode_lossy(data) == expected


@given(st.binary())
def test_decode_lossy_never_fails(data):
    assert isinstance(decode_lossy(data), str)


def test_print_utf8(capsys):
    print_utf8(b"hello\xff")

    assert capsys.readouterr().out == "hello�\n"


def test_debug_utf8(capsys):
    debug_utf8(b"a\r\n")

    assert capsys.readouterr().out == "'a\\r\\n'\n"


def test_into_cursor_strips_nul():
    cursor = into_cursor(b"a\0b\0")

    assert isinstance(cursor, Cursor)
    assert cursor.into_remaining_bytes() == b"ab"


@pytest.mark.parametrize("values", [[0x61, 0x100], [-1], [0x61, 1000, 0x62]])
def test_out_of_range_byte_values(values):
    with pytest.raises(ValueError, match="range\\(256\\)"):
        strip_nul(values)
    with pytest.raises(ValueError):
        Cursor(values)
    with pytest.raises(ValueError):
        is_hex(values)
