"""Big-endian reader for DHCP wire data with deferred error reporting."""

from __future__ import annotations


class WireError(ValueError):
    """Raised when wire data cannot be decoded."""


class BufferTooShortError(WireError):
    """Raised when a read needs more bytes than are left."""


class UnreadBytesError(WireError):
    """Raised when decoding finished with bytes left over."""


class Reader:
    """Reads big-endian fields from a byte sequence.

    A read past the end does not raise. It records the failure, returns a
    zero value and leaves the position where it was. ``finish`` then raises
    the first recorded failure, or UnreadBytesError if bytes are left over.
    """

    def __init__(self, data: bytes | bytearray | memoryview | None = b"") -> None:
        self._data = bytes(data) if data else b""
        self._pos = 0
        self._error: str | None = None

    def __len__(self) -> int:
        return len(self._data) - self._pos

    def __repr__(self) -> str:
        return f"Reader(pos={self._pos}, remaining={len(self)})"

    @property
    def failed(self) -> bool:
        """Whether a read has run past the end of the data."""
        return self._error is not None

    def has(self, n: int) -> bool:
        """Return whether at least ``n`` bytes are left."""
        return len(self) >= n

    def _take(self, n: int) -> bytes | None:
        if n < 0 or not self.has(n):
            if self._error is None:
                self._error = (
                    f"buffer too short at position {self._pos}: "
                    f"have {len(self)} bytes, want {n} bytes"
                )
            return None
        chunk = self._data[self._pos : self._pos + n]
        self._pos += n
        return chunk

    def _read_int(self, size: int) -> int:
        chunk = self._take(size)
        return int.from_bytes(chunk, "big") if chunk is not None else 0

    def read8(self) -> int:
        """Read one unsigned byte."""
        return self._read_int(1)

    def read16(self) -> int:
        """Read a big-endian unsigned 16-bit integer."""
        return self._read_int(2)

    def read32(self) -> int:
        """Read a big-endian unsigned 32-bit integer."""
        return self._read_int(4)

    def read_bytes(self, n: int) -> bytes:
        """Read exactly ``n`` bytes; zero bytes stand in when too few are left."""
        chunk = self._take(n)
        return chunk if chunk is not None else bytes(max(n, 0))

    def consume(self, n: int) -> bytes:
        """Read ``n`` bytes; an empty result stands in when too few are left."""
        chunk = self._take(n)
        return chunk if chunk is not None else b""

    def read_all(self) -> bytes:
        """Read every byte that is left."""
        return self.consume(len(self))

    def finish(self) -> None:
        """Raise if a read failed or if bytes remain unread."""
        if self._error is not None:
            raise BufferTooShortError(self._error)
        if len(self):
            raise UnreadBytesError(f"buffer contains {len(self)} unread bytes")