"""DHCPv6 option encoding, IANA registries, RFC 1035 labels, IPv6 UDP sockets and provisioning helpers."""

__version__ = "0.1.0"

__all__ = [
    "wire",
    "iana",
    "rfc1035label",
    "types",
    "options",
    "interfaces",
    "udpconn",
    "logger",
    "ztp",
]