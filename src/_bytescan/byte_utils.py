"""
Free functions over byte sequences. Any bytes-like object (bytes, bytearray,
memoryview) or iterable of ints in range(256) is accepted as input.

Table based operations (hex test, case folding and nul stripping) view the
input as a numpy uint8 array and look each byte up in a 256 entry table.
"""

import numpy as np

from _bytescan.constants import CAPITALS, CASE_OFFSET, CRLF, HEX_DIGITS, NUL
from _bytescan.errors import InvalidEncodingError


def as_uint8(seq):
    """
    :returns: The given byte sequence as a numpy array of uint8. For objects
        supporting the buffer protocol this is a view, not a copy.
    :raises ValueError: If an iterable holds values outside range(256).
    """
    if isinstance(seq, (bytes, bytearray, memoryview)):
        return np.frombuffer(seq, dtype=np.uint8)
    values = list(seq)
    for value in values:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Byte values must be in range(256), got {value}")
    return np.array(values, dtype=np.uint8)


def _byte_table(members):
    table = np.zeros(256, dtype=np.bool_)
    table[as_uint8(members)] = True
    return table


_HEX_TABLE = _byte_table(HEX_DIGITS)

_LOWER_TABLE = np.arange(256, dtype=np.uint8)
_LOWER_TABLE[as_uint8(CAPITALS)] += CASE_OFFSET


def decode_strict(seq):
    """
    Decode the sequence as utf-8.

    :raises InvalidEncodingError: If the sequence is not valid utf-8.
    """
    try:
        return bytes(seq).decode("utf-8")
    except UnicodeDecodeError as err:
        raise InvalidEncodingError(
            f"Invalid utf-8 at position {err.start}: {err.reason}", err.start
        ) from err


def decode_lossy(seq):
    """
    Decode the sequence as utf-8, replacing invalid sequences with U+FFFD.
    """
    return bytes(seq).decode("utf-8", errors="replace")


def print_utf8(seq, file=None):
    print(decode_lossy(seq), file=file)


def debug_utf8(seq, file=None):
    print(repr(decode_lossy(seq)), file=file)


def is_hex(seq):
    """
    :returns: True if every byte is one of 0-9, A-F or a-f. The empty
        sequence is hex.
    """
    return bool(_HEX_TABLE[as_uint8(seq)].all())


def to_ascii_lower(seq):
    """
    Fold ascii capitals A-Z to lowercase, leaving all other bytes as is.

    >>> to_ascii_lower(b"Content-Type: \\xc3\\x85")
    b'content-type: \\xc3\\x85'

    :returns: A new bytes object.
    """
    return _LOWER_TABLE[as_uint8(seq)].tobytes()


def to_ascii_lower_inplace(seq):
    """
    Same as to_ascii_lower, but folds a writable buffer (eg. bytearray) in
    place.

    :returns: The given sequence.
    :raises TypeError: If the sequence is not a writable buffer.
    """
    try:
        view = np.frombuffer(seq, dtype=np.uint8)
    except TypeError as err:
        raise TypeError(
            f"Expected a writable byte buffer, got {type(seq).__name__}"
        ) from err
    if not view.flags.writeable:
        raise TypeError(f"Cannot fold read-only {type(seq).__name__} in place")
    view[:] = _LOWER_TABLE[view]
    return seq


def strip_nul(seq):
    """
    :returns: The sequence with every zero byte removed.
    """
    values = as_uint8(seq)
    return values[values != NUL].tobytes()


def trim_trailing(seq, pattern):
    """
    Remove every trailing repetition of pattern, ie.
    trim_trailing(b"ab--", b"-") == b"ab".

    :param pattern: Bytes to trim, or a single byte value.
    """
    if isinstance(pattern, int):
        pattern = bytes([pattern])
    data = bytes(seq)
    pattern = bytes(pattern)
    if not pattern:
        return data

    end = len(data)
    while data.endswith(pattern, 0, end):
        end -= len(pattern)
    return data[:end]


def trim_trailing_crlf(seq):
    """
    Remove all trailing CRLF pairs. A lone trailing CR or LF is kept.
    """
    return trim_trailing(seq, CRLF)


def into_cursor(seq):
    """
    :returns: A Cursor over seq, with zero bytes stripped.
    """
    from _bytescan.cursor import Cursor

    return Cursor(seq)
