import bytescan.version
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
from _bytescan.constants import (
    CAPITALS,
    COLON,
    COLSP,
    CR,
    CRLF,
    EQUALS,
    HEX_DIGITS,
    LF,
    NUL,
    QMARK,
    SLASH,
    SP,
)
from _bytescan.cursor import Cursor
from _bytescan.errors import InvalidEncodingError
from _bytescan.reader import ByteReader

__version__ = bytescan.version.version

__all__ = [
    "ByteReader",
    "CAPITALS",
    "COLON",
    "COLSP",
    "CR",
    "CRLF",
    "Cursor",
    "EQUALS",
    "HEX_DIGITS",
    "InvalidEncodingError",
    "LF",
    "NUL",
    "QMARK",
    "SLASH",
    "SP",
    "debug_utf8",
    "decode_lossy",
    "decode_strict",
    "into_cursor",
    "is_hex",
    "print_utf8",
    "strip_nul",
    "to_ascii_lower",
    "to_ascii_lower_inplace",
    "trim_trailing",
    "trim_trailing_crlf",
]
