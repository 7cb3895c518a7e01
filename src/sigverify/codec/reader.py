"""
Binary Reader

Decodes the primitive values used in serialized keys: ULEB128 varints and
varint length-prefixed byte strings.
"""

import builtins


# A uint64 needs at most 10 varint bytes
MAX_VARINT_LEN = 10


class CodecError(ValueError):
    """Raised when a buffer cannot be decoded."""
    pass


class BinaryReader:
    """
    Sequential reader over an immutable byte buffer.

    Every read either consumes exactly the bytes it decodes or raises
    CodecError without advancing past the end of the buffer.
    """

    def __init__(self, buf: builtins.bytes):
        """
        Initialize reader with byte buffer.

        Args:
            buf: Byte buffer to read from
        """
        self._buf = bytes(buf)
        self._off = 0

    @property
    def eof(self) -> bool:
        """True if every byte has been consumed."""
        return self._off >= len(self._buf)

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._buf) - self._off

    def u8(self) -> int:
        """
        Read unsigned 8-bit integer.

        Returns:
            Unsigned 8-bit integer value
        """
        if self._off >= len(self._buf):
            raise CodecError("Buffer overflow: attempting to read beyond end")
        val = self._buf[self._off]
        self._off += 1
        return val

    def uvarint(self) -> int:
        """
        Read unsigned varint in ULEB128 format.

        Returns:
            Decoded unsigned integer value
        """
        x = 0
        s = 0
        for _ in range(MAX_VARINT_LEN):
            if self._off >= len(self._buf):
                raise CodecError("Buffer overflow: attempting to read varint beyond end")
            b = self.u8()
            if b < 0x80:
                return x | (b << s)
            x |= (b & 0x7F) << s
            s += 7
        raise CodecError("Varint overflows 64 bits")

    def bytes(self, n: int) -> builtins.bytes:
        """
        Read n bytes from buffer.

        Args:
            n: Number of bytes to read

        Returns:
            Bytes of specified length
        """
        if n < 0 or self._off + n > len(self._buf):
            raise CodecError(f"Buffer overflow: attempting to read {n} bytes beyond end")
        out = self._buf[self._off : self._off + n]
        self._off += n
        return out

    def len_prefixed_bytes(self) -> builtins.bytes:
        """
        Read bytes with length prefix using uvarint.

        Returns:
            Bytes with length read from uvarint prefix
        """
        n = self.uvarint()
        return self.bytes(n)

    def expect_eof(self) -> None:
        """Raise CodecError if unread bytes remain."""
        if not self.eof:
            raise CodecError(f"{self.remaining} trailing bytes after last field")
