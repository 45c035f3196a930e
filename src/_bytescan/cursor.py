"""
The cursor scans a byte buffer from start to end, cutting tokens at protocol
delimiters. A scan never fails: when the delimiter is missing the token runs
to the end of the buffer, and an exhausted cursor yields empty tokens.

CRLF is matched as a pair, so a CR that is not directly followed by LF is
part of the token:

>>> cursor = Cursor(b"A\\rB\\r\\nC")
>>> line = bytearray()
>>> cursor.read_until_crlf(line)
3
>>> bytes(line)
b'A\\rB'
"""

import warnings

from _bytescan.byte_utils import decode_lossy, strip_nul
from _bytescan.constants import CRLF, HEX_DIGITS, LF, NUL, SP
from _bytescan.reader import ByteReader


def as_delimiter(byte):
    """
    :param byte: A byte value in range(256) or a bytes-like object of length
        one.
    :returns: The byte value as an int.
    """
    if isinstance(byte, int):
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"Delimiter must be in range(256), got {byte}")
        return byte
    byte = bytes(byte)
    if len(byte) != 1:
        raise ValueError(f"Delimiter must be a single byte, got {byte!r}")
    return byte[0]


class Cursor(ByteReader):
    """
    Forward-only tokenizer over an in-memory byte buffer.

    All zero bytes are removed when the cursor is created. The read_until_*
    methods append the token to a given bytearray and return its length, the
    delimiter itself is consumed but not appended.
    """

    def __init__(self, data):
        """
        :param data: Any bytes-like object or iterable of byte values.
        """
        self._buffer = strip_nul(data)
        self._pos = 0

    @classmethod
    def from_bytes(cls, data):
        return cls(data)

    @property
    def position(self):
        return self._pos

    @property
    def remaining(self):
        return len(self._buffer) - self._pos

    @property
    def exhausted(self):
        return self._pos >= len(self._buffer)

    def __len__(self):
        return self.remaining

    def __repr__(self):
        preview = decode_lossy(self._buffer[self._pos : self._pos + 32])
        return (
            f"Cursor(position={self._pos}, remaining={self.remaining}, {preview!r})"
        )

    def copy(self):
        """
        :returns: An independent cursor at the same position.
        """
        other = type(self).__new__(type(self))
        other._buffer = self._buffer
        other._pos = self._pos
        return other

    __copy__ = copy

    def peek(self):
        """
        :returns: The next byte value without consuming it, None if exhausted.
        """
        if self.exhausted:
            return None
        return self._buffer[self._pos]

    def _find_until(self, delimiter, width):
        """
        :returns: Tuple of the token up to delimiter and the position
            following the delimiter. The cursor is not moved.
        """
        start = self._pos
        end = self._buffer.find(delimiter, start)
        if end < 0:
            return self._buffer[start:], len(self._buffer)
        return self._buffer[start:end], end + width

    def _take_until(self, delimiter, width):
        token, self._pos = self._find_until(delimiter, width)
        return token

    def read_until_byte(self, byte, into):
        """
        Read up to the next occurrence of byte, or to the end.

        :param byte: The delimiter, see as_delimiter.
        :param into: bytearray the token is appended to.
        :returns: Number of bytes appended.
        """
        token, end = self._find_until(as_delimiter(byte), 1)
        into += token
        self._pos = end
        return len(token)

    def read_until_crlf(self, into):
        """
        Read up to the next CR LF pair, or to the end. A lone CR is kept in
        the token.
        """
        token, end = self._find_until(CRLF, len(CRLF))
        into += token
        self._pos = end
        return len(token)

    def read_until_space(self, into):
        return self.read_until_byte(SP, into)

    def read_until_lf(self, into):
        return self.read_until_byte(LF, into)

    def read_until_nul(self, into):
        """
        As the cursor holds no zero bytes, this always reads everything that
        is left.
        """
        return self.read_until_byte(NUL, into)

    def skip_to_crlf(self):
        """
        Discard everything up to and including the next CR LF pair.
        """
        self._take_until(CRLF, len(CRLF))

    def skip_while(self, byte_set):
        """
        Discard bytes as long as the next byte is in byte_set.

        :param byte_set: bytes object or iterable of byte values.
        """
        members = frozenset(byte_set)
        end = self._pos
        while end < len(self._buffer) and self._buffer[end] in members:
            end += 1
        self._pos = end

    def take_hex_run(self):
        """
        :returns: The longest run of hex digits at the cursor, b"" if the next
            byte is not a hex digit.
        """
        start = end = self._pos
        while end < len(self._buffer) and self._buffer[end] in HEX_DIGITS:
            end += 1
        self._pos = end
        return self._buffer[start:end]

    def iter_crlf_lines(self, decode=False):
        """
        Lazily read CR LF terminated lines until a read gives an empty line.
        An empty line inside the buffer (b"\\r\\n\\r\\n") therefore also stops
        the iteration, leaving the rest of the buffer unread.

        :param decode: Yield lossily decoded strings instead of bytes.
        """
        while True:
            line = self._take_until(CRLF, len(CRLF))
            if not line:
                return
            yield decode_lossy(line) if decode else line

    def collect_crlf_lines_as_text(self):
        return list(self.iter_crlf_lines(decode=True))

    def collect_crlf_lines_raw(self):
        return list(self.iter_crlf_lines())

    def into_remaining_bytes(self):
        """
        :returns: Every byte not yet read. The cursor is exhausted afterwards.
        """
        rest = self._buffer[self._pos :]
        self._pos = len(self._buffer)
        return rest

    def readinto(self, buffer):
        """
        Consume everything that is left and write as much of it as fits into
        buffer. Bytes that do not fit are lost and a warning is emitted.

        :raises TypeError: If buffer is not a writable buffer, in which case
            nothing is consumed.
        """
        start = self._pos
        with memoryview(buffer) as target:
            if target.readonly:
                raise TypeError(
                    "Expected a writable buffer, got read-only "
                    f"{type(buffer).__name__}"
                )
            view = target.cast("B")
            count = min(len(self._buffer) - start, len(view))
            view[:count] = self._buffer[start : start + count]
            dropped = len(self._buffer) - start - count
            capacity = len(view)
            view.release()
        self._pos = len(self._buffer)
        if dropped:
            warnings.warn(
                f"Cursor.readinto discarded {dropped} bytes not fitting "
                f"the buffer of size {capacity}"
            )
        return count

    def read_to_end(self, buffer):
        return self.read_until_nul(buffer)

    def read_to_text(self, buffer):
        """
        Read one CR LF terminated line and write it lossily decoded to buffer.
        The line is only consumed once buffer.write succeeds.
        """
        line, end = self._find_until(CRLF, len(CRLF))
        buffer.write(decode_lossy(line))
        self._pos = end
        return len(line)
