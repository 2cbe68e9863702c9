"""Zero-touch provisioning helpers: circuit IDs and vendor data from DHCPv6 options."""

from __future__ import annotations

import re
import struct
from dataclasses import dataclass
from typing import Optional

from dhcpwire.iana import EnterpriseID, enterprise_name
from dhcpwire.options import Options
from dhcpwire.types import MessageType, OptionCode
from dhcpwire.wire import WireError


class ZTPError(ValueError):
    """Raised when provisioning data cannot be found or parsed."""


# Arista port:vlan, then Arista slot/module/port.
_CIRCUIT_PATTERNS = (
    re.compile(r"Ethernet(?P<port>[0-9]+):(?P<vlan>[0-9]+)"),
    re.compile(r"Ethernet(?P<slot>[0-9]+)/(?P<module>[0-9]+)/(?P<port>[0-9]+)"),
)

_RELAY_HEADER_LEN = 34  # type, hop count, link address, peer address
_DUID_EN = 2


@dataclass
class CircuitID:
    """Network vendor interface coordinates."""

    slot: str = ""
    module: str = ""
    port: str = ""
    sub_port: str = ""
    vlan: str = ""

    def format_circuit_id(self) -> str:
        """Return the comma-separated form used in ZTP boot file URLs."""
        return f"{self.slot},{self.module},{self.port},{self.sub_port},{self.vlan}"


@dataclass
class VendorData:
    """Vendor name, model and serial number taken from vendor options."""

    vendor_name: str = ""
    model: str = ""
    serial: str = ""


def _text(data: bytes) -> str:
    return bytes(data).decode("utf-8", errors="surrogateescape")


def match_circuit_id(circuit_info: str) -> CircuitID:
    """Extract a CircuitID from a vendor interface string."""
    for pattern in _CIRCUIT_PATTERNS:
        match = pattern.search(circuit_info)
        if match:
            groups = match.groupdict()
            return CircuitID(
                slot=groups.get("slot") or "",
                module=groups.get("module") or "",
                port=groups.get("port") or "",
                sub_port=groups.get("subport") or "",
                vlan=groups.get("vlan") or "",
            )
    raise ZTPError(f"no circuitId regex matches for {circuit_info}")


def _innermost_relay_options(options: Options) -> Options:
    current = options
    relay_types = (MessageType.RELAY_FORWARD, MessageType.RELAY_REPLY)
    while True:
        relayed = current.get_one(OptionCode.RELAY_MSG)
        if relayed is None:
            return current
        payload = relayed.to_bytes()
        if not payload or payload[0] not in relay_types:
            return current
        if len(payload) < _RELAY_HEADER_LEN:
            raise ZTPError("failed to decapsulate relay index: relay message too short")
        try:
            current = Options.from_bytes(payload[_RELAY_HEADER_LEN:])
        except WireError as exc:
            raise ZTPError(f"failed to decapsulate relay index: {exc}") from exc


def _try_match(data: bytes) -> Optional[CircuitID]:
    try:
        return match_circuit_id(_text(data))
    except ZTPError:
        return None


def parse_remote_id(options: Options) -> CircuitID:
    """Find a CircuitID in the innermost relay's Remote ID or Interface ID option.

    ``options`` are the options of a relay message; nested relay messages are
    followed down to the innermost relay.
    """
    inner = _innermost_relay_options(options)
    remote = inner.get_one(OptionCode.REMOTE_ID)
    if remote is not None:
        payload = remote.to_bytes()
        if len(payload) >= 4:
            circuit = _try_match(payload[4:])
            if circuit is not None:
                return circuit
    interface_id = inner.get_one(OptionCode.INTERFACE_ID)
    if interface_id is not None:
        circuit = _try_match(interface_id.to_bytes())
        if circuit is not None:
            return circuit
    raise ZTPError("failed to parse RemoteID and InterfaceID option data")


def _enterprise_identifier(options: Options) -> Optional[str]:
    client_id = options.get_one(OptionCode.CLIENT_ID)
    if client_id is None:
        return None
    duid = client_id.to_bytes()
    if len(duid) < 6 or struct.unpack(">H", duid[:2])[0] != _DUID_EN:
        return None
    return _text(duid[6:])


def parse_vendor_data(options: Options) -> VendorData:
    """Extract vendor, model and serial from the Vendor Opts or Vendor Class option.

    When both are present the Vendor Opts option is used.
    """
    vendor_class = options.get_one(OptionCode.VENDOR_CLASS)
    vendor_opts = options.get_one(OptionCode.VENDOR_OPTS)
    if vendor_class is None and vendor_opts is None:
        raise ZTPError("no vendor options or vendor class found")

    if vendor_opts is not None:
        entries = [_text(opt.to_bytes()) for opt in vendor_opts.vendor_opts]
    else:
        entries = [_text(chunk) for chunk in vendor_class.data]

    ciena = str(int(EnterpriseID.CIENA_CORPORATION))
    for entry in entries:
        # e.g. Arista;DCS-0000;00.00;ZZZ00000000 or Cisco;8800;12.34;FOC00000000
        if entry.startswith(("Arista;", "Cisco;")):
            parts = entry.split(";")
            if len(parts) < 4:
                raise ZTPError("malformed vendor option")
            return VendorData(parts[0], parts[1], parts[3])
        # e.g. ZPESystems:NSC:000000000
        if entry.startswith("ZPESystems:"):
            parts = entry.split(":")
            if len(parts) < 3:
                raise ZTPError("malformed vendor option")
            return VendorData(parts[0], parts[1], parts[2])
        # {enterprise number}-{product}-{type}, e.g. 1271-23422Z11-123
        if entry.startswith(ciena):
            parts = entry.split("-")
            if len(parts) < 3:
                raise ZTPError("malformed vendor option")
            serial = _enterprise_identifier(options) or ""
            return VendorData(
                enterprise_name(EnterpriseID.CIENA_CORPORATION),
                f"{parts[1]}-{parts[2]}",
                serial,
            )
    raise ZTPError("failed to parse vendor option data")