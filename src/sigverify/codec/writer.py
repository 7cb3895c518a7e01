"""
Binary Writer

Encodes the primitive values used in serialized keys, mirroring BinaryReader.
"""

from typing import List


class BinaryWriter:
    """Append-only byte buffer."""

    def __init__(self):
        self._bb: List[int] = []

    def u8(self, v: int) -> None:
        """Write unsigned 8-bit integer."""
        self._bb.append(v & 0xFF)

    def bytes(self, v: bytes) -> None:
        """Write raw bytes without length prefix."""
        self._bb.extend(v)

    def len_prefixed_bytes(self, v: bytes) -> None:
        """
        Write bytes with length prefix using uvarint.

        Args:
            v: Bytes to write with length prefix
        """
        self.uvarint(len(v))
        self.bytes(v)

    def uvarint(self, v: int) -> None:
        """
        Write unsigned varint in ULEB128 format.

        Args:
            v: Unsigned integer value to encode as varint
        """
        if v < 0:
            raise ValueError(f"uvarint cannot encode negative value {v}")
        x = v & 0xFFFFFFFFFFFFFFFF
        while x >= 0x80:
            self.u8((x & 0x7F) | 0x80)
            x >>= 7
        self.u8(x)

    def to_bytes(self) -> bytes:
        """Return accumulated bytes as immutable bytes object."""
        return bytes(self._bb)
