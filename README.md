# dhcpwire

Building blocks for working with DHCPv6 on the wire. The package covers option encoding, IANA registries, domain-name labels, interface discovery and a few helpers for zero-touch provisioning.

## Modules

- `dhcpwire.wire` provides `Reader`, a big-endian reader for option payloads. It offers `read8`, `read16`, `read32`, `read_bytes`, `consume`, `read_all` and `has`.
  - A read past the end does not raise straight away. Instead, `finish()` raises `BufferTooShortError`, or it raises `UnreadBytesError` if bytes are left over.
  - Both errors are subclasses of `WireError`, which is itself a `ValueError`.
- `dhcpwire.types` provides the DHCPv6 `MessageType` and `OptionCode` enums and the three-byte `TransactionID`.
  - `message_type_name` and `option_code_name` give readable names.
  - Values that are not listed come back as `"unknown (N)"`.
- `dhcpwire.iana` provides IANA registries:
  - processor architectures: `Arch`, and the list type `Archs` with `to_bytes`, `from_bytes` and `contains`
  - enterprise numbers: `EnterpriseID`
  - hardware types: `HWType`
  - DHCPv6 status codes: `StatusCode`
  - name lookups: `arch_name`, `enterprise_name`, `hw_type_name` and `status_code_name`
- `dhcpwire.rfc1035label` provides `Labels` along with `labels_from_bytes` and `labels_to_bytes`.
  - Decoding follows compression pointers, but nested pointers raise `LabelError`.
  - A final name without a terminating zero byte is accepted.
  - A `Labels` parsed from bytes gives back its original, possibly compressed, bytes until its `labels` list is changed.
- `dhcpwire.options` provides DHCPv6 options:
  - `Options`, a list with `get`, `get_one`, `add`, `delete`, `update`, `to_bytes`, `from_bytes` and `long_string`
  - the option types `OptionGeneric`, `OptIATA`, `OptUserClass`, `OptVendorClass` and `OptVendorOpts`
  - `parse_option`, which picks the option type from the code
  - `vendor_parse_option`, which keeps vendor sub-options as raw `OptionGeneric`
- `dhcpwire.interfaces` lists the host's network interfaces through `system_interfaces`, which uses psutil.
  - The interfaces can be filtered with `get_interfaces_func`, `get_loopback_interfaces` or `get_non_loopback_interfaces`.
  - Each of these filters takes an optional `getter` that replaces the system lookup.
  - `bind_to_interface` restricts a socket to one interface:
    - on Linux it uses `SO_BINDTODEVICE`
    - on macOS it uses `IP_BOUND_IF`
    - on the BSDs and AIX it uses `IP_RECVIF`
    - on other platforms it raises `OSError`
- `dhcpwire.udpconn` provides `new_ipv6_udp_conn(iface, addr)`. It returns an IPv6-only UDP socket with `SO_REUSEADDR` set, bound to `addr` (a `(host, port)` pair).
  - If `iface` is not empty, the socket is also bound to that interface.
  - Without the privilege to bind to an interface it raises `PermissionError`.
- `dhcpwire.logger` provides the loggers `EmptyLogger`, `ShortSummaryLogger` and `DebugLogger`.
  - The last two write through an `output` callable. By default that writes to stderr with a `[dhcpv6]` prefix and a timestamp.
  - `DebugLogger.print_message` uses the message's `summary()` if it has one.
- `dhcpwire.ztp` provides zero-touch provisioning helpers.
  - `parse_remote_id` follows nested relay messages down to the innermost relay. It reads a `CircuitID` from that relay's Remote ID or Interface ID option.
  - `match_circuit_id` reads a `CircuitID` from a string.
  - `parse_vendor_data` reads vendor name, model and serial number (`VendorData`) from the Vendor Opts or Vendor Class option. It recognises Arista, Cisco, ZPE Systems and Ciena formats.
  - Failures raise `ZTPError`.

## Installation

```
pip install .
```

## Examples

Parse a list of options and serialize it again:

```python
from dhcpwire.options import Options

opts = Options.from_bytes(bytes([0, 15, 0, 5, 0, 3]) + b"foo")
print(opts.long_string(0))
# [
#   User Class: [foo]
# ]
print(opts.to_bytes().hex())
```

Decode domain-name labels:

```python
from dhcpwire.rfc1035label import Labels

labels = Labels.from_bytes(b"\x07example\x03com\x00")
print(labels.labels)  # ['example.com']
```

Look up registry names:

```python
from dhcpwire.iana import Arch, arch_name

print(arch_name(Arch.EFI_X86_64))  # EFI x86-64
```

Read vendor data from a set of options:

```python
from dhcpwire.options import OptVendorClass, Options
from dhcpwire.ztp import parse_vendor_data

opts = Options([OptVendorClass(0, [b"ZPESystems:NSC:000000000"])])
print(parse_vendor_data(opts))
# VendorData(vendor_name='ZPESystems', model='NSC', serial='000000000')
```

## What it does not do

This package works with DHCPv6 options and option lists, not with whole messages. It has no DHCPv6 message or relay-message types, no client, no server loop and no DHCPv4 support. Only the IA_TA, user class, vendor class and vendor-specific information options are decoded into their own types. Every other option code is kept as raw bytes in an `OptionGeneric`. The package also installs no commands.

## Tests

```
pip install .[test]
pytest
```