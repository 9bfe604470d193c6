"""Network helpers for CLI commands."""

from __future__ import annotations

import errno
import socket

# Address families the host may not support; skipped rather than reported.
_UNAVAILABLE = {errno.EADDRNOTAVAIL, errno.EAFNOSUPPORT}


def is_port_in_use(host: str, port: int) -> bool:
    """Return True if any address `host` resolves to already has `port` bound."""
    infos = socket.getaddrinfo(host or None, port, type=socket.SOCK_STREAM, flags=socket.AI_PASSIVE)
    for family, socktype, proto, _, address in infos:
        try:
            probe = socket.socket(family, socktype, proto)
        except OSError as e:
            if e.errno in _UNAVAILABLE:
                continue
            raise
        with probe:
            try:
                probe.bind(address)
            except OSError as e:
                if e.errno == errno.EADDRINUSE:
                    return True
                if e.errno in _UNAVAILABLE:
                    continue
                raise
    return False
