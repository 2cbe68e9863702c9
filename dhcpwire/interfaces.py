"""Network interface discovery and binding sockets to a single interface."""

from __future__ import annotations

import errno
import ipaddress
import re
import socket
import sys
from dataclasses import dataclass
from typing import Callable, Optional

import psutil

# Socket option numbers used where the socket module does not expose them.
_SO_BINDTODEVICE = getattr(socket, "SO_BINDTODEVICE", 25)
_IP_BOUND_IF = getattr(socket, "IP_BOUND_IF", 25)
_IP_RECVIF = getattr(socket, "IP_RECVIF", 20)

_BSD_PLATFORMS = ("aix", "freebsd", "openbsd", "netbsd")


@dataclass(frozen=True)
class Interface:
    """A network interface as seen by the operating system."""

    index: int
    mtu: int
    name: str
    hardware_addr: bytes = b""
    loopback: bool = False
    up: bool = False


InterfaceMatcher = Callable[[Interface], bool]
InterfaceGetter = Callable[[], list]


def _parse_mac(text: str) -> bytes:
    parts = re.split(r"[:\-.]", text)
    try:
        return bytes(int(part, 16) for part in parts if part)
    except ValueError:
        return b""


def _is_loopback_address(text: str) -> bool:
    try:
        return ipaddress.ip_address(text.split("%", 1)[0]).is_loopback
    except ValueError:
        return False


def system_interfaces() -> list[Interface]:
    """Return the interfaces present on this host, ordered by index."""
    addrs = psutil.net_if_addrs()
    stats = psutil.net_if_stats()
    found = []
    for name in set(addrs) | set(stats):
        stat = stats.get(name)
        hardware_addr = b""
        loopback = False
        for addr in addrs.get(name, []):
            if addr.family == psutil.AF_LINK and addr.address:
                hardware_addr = _parse_mac(addr.address)
            elif addr.family in (socket.AF_INET, socket.AF_INET6):
                loopback = loopback or _is_loopback_address(addr.address)
        flags = getattr(stat, "flags", "") if stat is not None else ""
        if "loopback" in flags.split(","):
            loopback = True
        try:
            index = socket.if_nametoindex(name)
        except OSError:
            index = 0
        found.append(
            Interface(
                index=index,
                mtu=stat.mtu if stat is not None else 0,
                name=name,
                hardware_addr=hardware_addr,
                loopback=loopback,
                up=bool(stat.isup) if stat is not None else False,
            )
        )
    found.sort(key=lambda iface: (iface.index, iface.name))
    return found


def get_interfaces_func(
    matcher: InterfaceMatcher, getter: Optional[InterfaceGetter] = None
) -> list[Interface]:
    """Return the interfaces for which ``matcher`` returns true."""
    source = getter if getter is not None else system_interfaces
    return [iface for iface in source() if matcher(iface)]


def get_loopback_interfaces(getter: Optional[InterfaceGetter] = None) -> list[Interface]:
    """Return the loopback interfaces."""
    return get_interfaces_func(lambda iface: iface.loopback, getter)


def get_non_loopback_interfaces(getter: Optional[InterfaceGetter] = None) -> list[Interface]:
    """Return the interfaces that are not loopback interfaces."""
    return get_interfaces_func(lambda iface: not iface.loopback, getter)


def bind_to_interface(sock: socket.socket, ifname: str) -> None:
    """Restrict ``sock`` to traffic on the named interface.

    Linux uses SO_BINDTODEVICE; macOS uses IP_BOUND_IF and the BSDs IP_RECVIF,
    both keyed by interface index. Raises OSError where no such option exists.
    """
    platform = sys.platform
    if platform.startswith("linux"):
        sock.setsockopt(socket.SOL_SOCKET, _SO_BINDTODEVICE, ifname.encode())
    elif platform == "darwin":
        index = socket.if_nametoindex(ifname)
        sock.setsockopt(socket.IPPROTO_IP, _IP_BOUND_IF, index)
    elif platform.startswith(_BSD_PLATFORMS):
        index = socket.if_nametoindex(ifname)
        sock.setsockopt(socket.IPPROTO_IP, _IP_RECVIF, index)
    else:
        raise OSError(
            errno.EOPNOTSUPP,
            f"binding a socket to an interface is not supported on {platform}",
        )