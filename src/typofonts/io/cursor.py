"""Big-endian binary reader over a seekable byte source.

This module provides the ByteCursor class used by every table parser. It has
no knowledge of fonts beyond the notion of a bounded table window.
"""

import io
import struct
from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO

from typofonts.exceptions import FontTruncatedError, TableBoundsError

_U16 = struct.Struct(">H")
_U32 = struct.Struct(">I")


class ByteCursor:
    """Positionable big-endian reader.

    Every read consumes exactly the requested number of bytes or raises
    FontTruncatedError. Inside a ``bounded`` scope, reads that would cross
    the window end raise TableBoundsError instead.

    Example:
        cursor = ByteCursor.from_bytes(b"\\x00\\x01\\x00\\x00")
        assert cursor.read_u32() == 0x00010000
    """

    def __init__(self, stream: BinaryIO) -> None:
        """Initialize the cursor.

        Args:
            stream: Seekable binary stream, borrowed for the cursor's lifetime
        """
        self._stream = stream
        self._limit: int | None = None
        self._tag = ""

    @classmethod
    def from_bytes(cls, data: bytes) -> "ByteCursor":
        """Create a cursor over an in-memory buffer."""
        return cls(io.BytesIO(data))

    @property
    def position(self) -> int:
        """Current absolute offset."""
        return self._stream.tell()

    def seek(self, offset: int) -> None:
        """Move to an absolute offset without reading."""
        self._stream.seek(offset, io.SEEK_SET)

    def skip(self, count: int) -> None:
        """Move forward by ``count`` bytes without reading."""
        self._stream.seek(count, io.SEEK_CUR)

    def read_bytes(self, count: int) -> bytes:
        """Read exactly ``count`` bytes.

        Args:
            count: Number of bytes to read

        Returns:
            The bytes read

        Raises:
            TableBoundsError: If the read crosses the current table window
            FontTruncatedError: If the source ends before ``count`` bytes
        """
        offset = self.position
        if self._limit is not None and offset + count > self._limit:
            raise TableBoundsError(self._tag, offset, count, self._limit)

        data = self._stream.read(count)
        if len(data) < count:
            raise FontTruncatedError(offset, count, len(data))
        return data

    def read_u8(self) -> int:
        return self.read_bytes(1)[0]

    def read_u16(self) -> int:
        return _U16.unpack(self.read_bytes(2))[0]

    def read_u32(self) -> int:
        return _U32.unpack(self.read_bytes(4))[0]

    def read_tag(self) -> str:
        """Read a 4-byte tag as text (non-ASCII bytes become '?')."""
        return decode_ascii(self.read_bytes(4))

    @contextmanager
    def restoring(self) -> Iterator["ByteCursor"]:
        """Restore the current position when the scope exits."""
        saved = self.position
        try:
            yield self
        finally:
            self.seek(saved)

    @contextmanager
    def bounded(self, tag: str, offset: int, length: int) -> Iterator["ByteCursor"]:
        """Read a table in isolation.

        Seeks to ``offset`` and limits reads to ``length`` bytes from there.
        The previous position and window are restored on exit, so the caller
        can keep walking a record list after following an offset.

        Args:
            tag: Table tag, used in error messages
            offset: Absolute table offset
            length: Declared table length
        """
        saved_position = self.position
        saved_limit, saved_tag = self._limit, self._tag
        self.seek(offset)
        self._limit, self._tag = offset + length, tag
        try:
            yield self
        finally:
            self._limit, self._tag = saved_limit, saved_tag
            self.seek(saved_position)


def decode_ascii(data: bytes) -> str:
    """Decode ASCII text, replacing bytes above 0x7F with '?'."""
    return bytes(b if b < 0x80 else 0x3F for b in data).decode("ascii")
