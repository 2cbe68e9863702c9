"""IPv6-only UDP sockets bound to an interface and port."""

from __future__ import annotations

import errno
import socket
from typing import Optional, Tuple, Union

from dhcpwire.interfaces import bind_to_interface

Address = Tuple[Union[str, object], int]


def _set_v6only(sock: socket.socket) -> None:
    try:
        sock.setsockopt(socket.IPPROTO_IPV6, socket.IPV6_V6ONLY, 1)
    except OSError as exc:
        # Some systems do not support the option; IPv6-only is then the default.
        if exc.errno != errno.ENOPROTOOPT:
            raise OSError(exc.errno, f"cannot set socket v6only: {exc.strerror}") from exc


def _bind_interface(sock: socket.socket, iface: str) -> None:
    try:
        bind_to_interface(sock, iface)
    except OSError as exc:
        if exc.errno in (errno.EACCES, errno.EPERM):
            raise PermissionError(
                exc.errno,
                "Cannot bind to interface without CAP_NET_RAW or root permissions. "
                "Restart with elevated privilege, or run without specifying an "
                "interface to bind to all available interfaces.",
            ) from exc
        raise OSError(exc.errno, f"cannot bind to interface {iface}: {exc}") from exc


def new_ipv6_udp_conn(iface: str, addr: Optional[Address]) -> socket.socket:
    """Return an IPv6-only UDP socket bound to ``iface`` (if given) and ``addr``.

    ``addr`` is a ``(host, port)`` pair; the host may be a multicast address.
    The interface must already be configured.
    """
    sock = socket.socket(socket.AF_INET6, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
    try:
        _set_v6only(sock)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        if iface:
            _bind_interface(sock, iface)
        if addr is None:
            raise ValueError("an address to listen on needs to be specified")
        host, port = addr
        try:
            sock.bind((str(host), int(port)))
        except OSError as exc:
            raise OSError(exc.errno, f"cannot bind to address {addr}: {exc.strerror}") from exc
    except BaseException:
        sock.close()
        raise
    return sock