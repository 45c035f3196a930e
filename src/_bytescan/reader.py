from abc import ABC, abstractmethod


class ByteReader(ABC):
    """
    A sequential source of bytes. Implementations provide readinto,
    read_to_end and read_to_text, from which read is derived so that a
    ByteReader can be given to code calling read() on a binary stream.

    Unlike io streams, a Cursor's readinto drains the reader in one call, so
    read(size) is only a drop-in replacement for code that reads once, or
    that reads to the end with read().
    """

    @abstractmethod
    def readinto(self, buffer):
        """
        Read into a writable buffer.

        :returns: The number of bytes written to buffer.
        """
        pass

    @abstractmethod
    def read_to_end(self, buffer):
        """
        Append everything that is left to the bytearray buffer.

        :returns: The number of bytes appended.
        """
        pass

    @abstractmethod
    def read_to_text(self, buffer):
        """
        Read text and write it to buffer, which can be any object with a
        write(str) method such as io.StringIO.

        :returns: The number of bytes consumed from the reader.
        """
        pass

    def readable(self):
        return True

    def read(self, size=-1):
        """
        :param size: When negative or None, read until the end, otherwise
            read into a buffer of the given size. With a readinto that
            consumes everything left (as Cursor.readinto does) any
            non-negative size, read(0) included, consumes the whole reader
            and bytes past size are discarded.
        :returns: The bytes read, b"" when nothing is left.
        """
        if size is None or size < 0:
            data = bytearray()
            self.read_to_end(data)
            return bytes(data)
        data = bytearray(size)
        count = self.readinto(data)
        return bytes(data[:count])

    def readall(self):
        return self.read()
