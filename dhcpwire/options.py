"""DHCPv6 options: the generic option, option lists and the IA_TA, user class and vendor options."""

from __future__ import annotations

import struct
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, ClassVar, Iterable, Optional

from dhcpwire.types import OptionCode, option_code_name
from dhcpwire.wire import BufferTooShortError, Reader

OptionParser = Callable[[int, bytes], "Option"]


def _u16(value: int, what: str) -> bytes:
    if not 0 <= value <= 0xFFFF:
        raise ValueError(f"{what} does not fit in 16 bits: {value}")
    return struct.pack(">H", value)


def _u32(value: int, what: str) -> bytes:
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"{what} does not fit in 32 bits: {value}")
    return struct.pack(">I", value)


def _text(data: bytes) -> str:
    return bytes(data).decode("utf-8", errors="replace")


def _length_prefixed(chunks: Iterable[bytes]) -> bytes:
    return b"".join(_u16(len(chunk), "data length") + bytes(chunk) for chunk in chunks)


def _read_length_prefixed(reader: Reader) -> list[bytes]:
    chunks: list[bytes] = []
    while reader.has(2):
        length = reader.read16()
        chunk = reader.consume(length)
        if reader.failed:
            break
        chunks.append(chunk)
    return chunks


class Option(ABC):
    """A DHCPv6 option. Every option has a ``code`` attribute."""

    code: int

    @abstractmethod
    def to_bytes(self) -> bytes:
        """Serialize the option payload, without code and length."""

    @classmethod
    @abstractmethod
    def parse(cls, data: bytes) -> "Option":
        """Build the option from its payload, without code and length."""


@dataclass
class OptionGeneric(Option):
    """An option whose payload is kept as raw bytes."""

    code: int
    data: bytes = b""

    def __post_init__(self) -> None:
        self.data = bytes(self.data)

    def to_bytes(self) -> bytes:
        return self.data

    @classmethod
    def parse(cls, data: bytes, code: int = 0) -> "OptionGeneric":
        return cls(code, bytes(data))

    def __str__(self) -> str:
        name = option_code_name(self.code)
        if not self.data:
            return name
        return f"{name}: [{' '.join(str(b) for b in self.data)}]"


class Options(list):
    """An ordered collection of options."""

    def __str__(self) -> str:
        return "[" + " ".join(str(opt) for opt in self) + "]"

    def long_string(self, indent: int = 0) -> str:
        """Render one option per line, indented by at least ``indent`` spaces."""
        if not self:
            return "[]"
        pad = " " * indent
        lines = ["["]
        for opt in self:
            long_string = getattr(opt, "long_string", None)
            text = long_string(indent + 2) if callable(long_string) else str(opt)
            lines.append(f"{pad}  {text}")
        lines.append(f"{pad}]")
        return "\n".join(lines)

    def get(self, code: int) -> list[Option]:
        """Return every option with the given code."""
        return [opt for opt in self if opt.code == code]

    def get_one(self, code: int) -> Optional[Option]:
        """Return the first option with the given code, or None."""
        return next((opt for opt in self if opt.code == code), None)

    def add(self, option: Option) -> None:
        """Append one option."""
        self.append(option)

    def delete(self, code: int) -> None:
        """Remove every option with the given code."""
        self[:] = [opt for opt in self if opt.code != code]

    def update(self, option: Option) -> None:
        """Replace the first option with the same code, or append it."""
        for index, opt in enumerate(self):
            if opt.code == option.code:
                self[index] = option
                return
        self.append(option)

    def to_bytes(self) -> bytes:
        """Serialize every option with its code and length."""
        out = bytearray()
        for opt in self:
            value = opt.to_bytes()
            out += _u16(int(opt.code), "option code")
            out += _u16(len(value), "option length")
            out += value
        return bytes(out)

    @classmethod
    def from_bytes(
        cls, data: bytes | None, parser: Optional[OptionParser] = None
    ) -> "Options":
        """Parse a sequence of options, each built by ``parser``."""
        build = parser if parser is not None else parse_option
        options = cls()
        if not data:
            return options
        reader = Reader(data)
        while reader.has(4):
            code = reader.read16()
            length = reader.read16()
            payload = reader.consume(length)
            if reader.failed:
                break
            options.append(build(code, payload))
        reader.finish()
        return options


@dataclass
class OptIATA(Option):
    """Identity association for temporary addresses (RFC 8415, Section 21.5)."""

    code: ClassVar[OptionCode] = OptionCode.IATA
    ia_id: bytes = bytes(4)
    options: Options = field(default_factory=Options)

    def __post_init__(self) -> None:
        self.ia_id = bytes(self.ia_id)
        if len(self.ia_id) != 4:
            raise ValueError(f"IAID must be 4 bytes long, got {len(self.ia_id)}")
        if not isinstance(self.options, Options):
            self.options = Options(self.options)

    def to_bytes(self) -> bytes:
        return self.ia_id + self.options.to_bytes()

    @classmethod
    def parse(cls, data: bytes) -> "OptIATA":
        reader = Reader(data)
        ia_id = reader.read_bytes(4)
        options = Options.from_bytes(reader.read_all())
        reader.finish()
        return cls(ia_id=ia_id, options=options)

    def __str__(self) -> str:
        return f"{option_code_name(self.code)}: {{IAID=0x{self.ia_id.hex()}, Options={{{self.options}}}}}"

    def long_string(self, indent: int = 0) -> str:
        """Render the option with its sub-options on separate lines."""
        return (
            f"{option_code_name(self.code)}: IAID=0x{self.ia_id.hex()} "
            f"Options={self.options.long_string(indent)}"
        )


@dataclass
class OptUserClass(Option):
    """User class option (RFC 3315, Section 22.15)."""

    code: ClassVar[OptionCode] = OptionCode.USER_CLASS
    user_classes: list[bytes] = field(default_factory=list)

    def to_bytes(self) -> bytes:
        return _length_prefixed(self.user_classes)

    @classmethod
    def parse(cls, data: bytes) -> "OptUserClass":
        if not data:
            raise BufferTooShortError("user class option must not be empty")
        reader = Reader(data)
        classes = _read_length_prefixed(reader)
        reader.finish()
        return cls(classes)

    def __str__(self) -> str:
        names = ", ".join(_text(uc) for uc in self.user_classes)
        return f"{option_code_name(self.code)}: [{names}]"


@dataclass
class OptVendorClass(Option):
    """Vendor class option (RFC 3315, Section 22.16)."""

    code: ClassVar[OptionCode] = OptionCode.VENDOR_CLASS
    enterprise_number: int = 0
    data: list[bytes] = field(default_factory=list)

    def to_bytes(self) -> bytes:
        return _u32(self.enterprise_number, "enterprise number") + _length_prefixed(self.data)

    @classmethod
    def parse(cls, data: bytes) -> "OptVendorClass":
        reader = Reader(data)
        enterprise_number = reader.read32()
        chunks = _read_length_prefixed(reader)
        if not chunks:
            raise BufferTooShortError("vendor class data should not be empty")
        reader.finish()
        return cls(enterprise_number, chunks)

    def __str__(self) -> str:
        items = ", ".join(_text(d) for d in self.data)
        return (
            f"{option_code_name(self.code)}: "
            f"{{EnterpriseNumber={self.enterprise_number} Data=[{items}]}}"
        )


@dataclass
class OptVendorOpts(Option):
    """Vendor-specific information option (RFC 3315, Section 22.17)."""

    code: ClassVar[OptionCode] = OptionCode.VENDOR_OPTS
    enterprise_number: int = 0
    vendor_opts: Options = field(default_factory=Options)

    def __post_init__(self) -> None:
        if not isinstance(self.vendor_opts, Options):
            self.vendor_opts = Options(self.vendor_opts)

    def to_bytes(self) -> bytes:
        return _u32(self.enterprise_number, "enterprise number") + self.vendor_opts.to_bytes()

    @classmethod
    def parse(cls, data: bytes) -> "OptVendorOpts":
        reader = Reader(data)
        enterprise_number = reader.read32()
        vendor_opts = Options.from_bytes(reader.read_all(), vendor_parse_option)
        reader.finish()
        return cls(enterprise_number, vendor_opts)

    def __str__(self) -> str:
        return (
            f"{option_code_name(self.code)}: "
            f"{{EnterpriseNumber={self.enterprise_number} VendorOptions={self.vendor_opts}}}"
        )

    def long_string(self, indent: int = 0) -> str:
        """Render the option with its vendor sub-options on separate lines."""
        return (
            f"{option_code_name(self.code)}: EnterpriseNumber={self.enterprise_number} "
            f"VendorOptions={self.vendor_opts.long_string(indent)}"
        )


_PARSERS: dict[int, type[Option]] = {
    OptionCode.IATA: OptIATA,
    OptionCode.USER_CLASS: OptUserClass,
    OptionCode.VENDOR_CLASS: OptVendorClass,
    OptionCode.VENDOR_OPTS: OptVendorOpts,
}


def parse_option(code: int, data: bytes) -> Option:
    """Parse one option payload according to its code."""
    option_type = _PARSERS.get(code)
    if option_type is None:
        return OptionGeneric(code, bytes(data))
    return option_type.parse(bytes(data))


def vendor_parse_option(code: int, data: bytes) -> Option:
    """Parse a vendor sub-option; vendor codes overlap standard ones, so keep them raw."""
    return OptionGeneric(code, bytes(data))