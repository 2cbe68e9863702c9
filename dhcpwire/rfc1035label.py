"""RFC 1035 domain name labels, including compression pointers."""

from __future__ import annotations

from typing import Iterable


class LabelError(ValueError):
    """Raised when labels cannot be decoded or encoded."""


def _decode(chunk: bytes) -> str:
    return chunk.decode("utf-8", errors="surrogateescape")


def _encode(text: str) -> bytes:
    return text.encode("utf-8", errors="surrogateescape")


def labels_from_bytes(data: bytes | None) -> list[str]:
    """Decode a serialized sequence of domain names.

    A final name without a terminating zero-length byte is accepted as a
    partial domain name (RFC 4704, Section 4.2).
    """
    buf = bytes(data) if data else b""
    labels: list[str] = []
    pos = 0
    return_pos = 0
    label = ""
    following_pointer = False

    while True:
        if pos >= len(buf):
            if label:
                labels.append(label)
            break
        length = buf[pos]
        pos += 1
        if length == 0:
            labels.append(label)
            label = ""
            if following_pointer:
                pos = return_pos
                following_pointer = False
        elif length & 0xC0 == 0xC0:
            if following_pointer:
                raise LabelError("cannot handle nested pointers")
            following_pointer = True
            if pos + 1 > len(buf):
                raise LabelError("pointer buffer too short")
            offset = ((length & 0x3F) << 8) + buf[pos]
            return_pos = pos + 1
            pos = offset
        else:
            if pos + length > len(buf):
                raise LabelError("buffer too short")
            chunk = _decode(buf[pos : pos + length])
            label = f"{label}.{chunk}" if label else chunk
            pos += length
    return labels


def _label_to_bytes(label: str) -> bytes:
    if not label:
        return b"\x00"
    out = bytearray()
    for part in label.split("."):
        encoded = _encode(part)
        if len(encoded) > 0xFF:
            raise LabelError(f"label part too long: {len(encoded)} bytes")
        out.append(len(encoded))
        out += encoded
    out.append(0)
    return bytes(out)


def labels_to_bytes(labels: Iterable[str]) -> bytes:
    """Encode domain names without compression."""
    return b"".join(_label_to_bytes(label) for label in labels)


class Labels:
    """A list of domain names that keeps its original encoding while unchanged.

    When parsed from bytes, the original (possibly compressed) bytes are
    returned by ``to_bytes`` until ``labels`` is modified.
    """

    def __init__(self, labels: Iterable[str] | None = None) -> None:
        self.labels: list[str] = list(labels) if labels is not None else []
        self._original: bytes | None = None

    @classmethod
    def from_bytes(cls, data: bytes) -> "Labels":
        """Parse labels from bytes, keeping the original encoding."""
        data = bytes(data)
        parsed = cls(labels_from_bytes(data))
        parsed._original = data
        return parsed

    def to_bytes(self) -> bytes:
        """Return the original bytes if unchanged, otherwise a fresh encoding."""
        if self._original is not None and labels_from_bytes(self._original) == self.labels:
            return self._original
        return labels_to_bytes(self.labels)

    def length(self) -> int:
        """Return the length in bytes of the serialized labels."""
        return len(self.to_bytes())

    def __str__(self) -> str:
        return "[" + " ".join(self.labels) + "]"

    def __repr__(self) -> str:
        return f"Labels({self.labels!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Labels):
            return NotImplemented
        return self.labels == other.labels

    __hash__ = None  # type: ignore[assignment]